from __future__ import annotations

from typing import Hashable, List


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.value = start

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


class ScriptedAnimation:
    """Animatable that reports done after a fixed number of updates."""

    def __init__(self, animation_id: Hashable, updates_until_done: int = 1) -> None:
        self.id = animation_id
        self.remaining = updates_until_done
        self.elapsed: List[float] = []

    def update(self, elapsed: float) -> None:
        self.elapsed.append(elapsed)
        self.remaining -= 1

    def is_done(self) -> bool:
        return self.remaining <= 0


def step_until_done(spring, dt: float = 1 / 60, max_steps: int = 5000) -> int:
    """Return the number of updates needed for ``spring`` to converge."""
    for step in range(1, max_steps + 1):
        spring.update(dt)
        if spring.is_done():
            return step
    raise AssertionError(f"spring did not converge within {max_steps} steps: {spring!r}")


def spring_state(spring):
    return spring.value, spring.target, spring.velocity
