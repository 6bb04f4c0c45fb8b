"""Damped-harmonic-oscillator integrator for one animated value.

A :class:`SpringValue` owns the value, target and velocity of a single
animated quantity and advances them with semi-implicit (symplectic) Euler:
velocity is updated from the force at the pre-step state, then the value
moves with the *new* velocity. First-order accurate, but stable for the
oscillatory systems and frame rates involved. No sub-stepping is done, so a
very large ``elapsed`` (for instance after the driver was paused) can
overshoot or oscillate.
"""
from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic

from spring_animation.constants import (
    DEFAULT_DAMPING_RATIO,
    DEFAULT_DURATION,
    DEFAULT_EPSILON,
)
from spring_animation.physics.vector import V, VectorOps, coerce_like, coerce_value, ops_for

if TYPE_CHECKING:
    from spring_animation.animation.registry import AnimationRegistry


def _require_finite(name: str, value: float) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(result):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class SpringConfig:
    """Response-style spring description (unit mass).

    ``duration`` is the period of the undamped oscillation in seconds and
    ``damping_ratio`` is 1.0 for critical damping, below 1.0 for a bouncy
    response.
    """

    duration: float = DEFAULT_DURATION
    damping_ratio: float = DEFAULT_DAMPING_RATIO
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        duration = _require_finite("duration", self.duration)
        ratio = _require_finite("damping_ratio", self.damping_ratio)
        epsilon = _require_finite("epsilon", self.epsilon)
        if duration <= 0.0:
            raise ValueError(f"duration must be positive, got {duration}")
        if ratio < 0.0:
            raise ValueError(f"damping_ratio must not be negative, got {ratio}")
        if epsilon <= 0.0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "damping_ratio", ratio)
        object.__setattr__(self, "epsilon", epsilon)

    @property
    def stiffness(self) -> float:
        return (2.0 * math.pi / self.duration) ** 2

    @property
    def damping(self) -> float:
        return 4.0 * math.pi * self.damping_ratio / self.duration

    @classmethod
    def from_coefficients(
        cls,
        stiffness: float,
        damping: float,
        epsilon: float = DEFAULT_EPSILON,
    ) -> "SpringConfig":
        """Build a config from raw stiffness/damping constants."""
        stiffness = _require_finite("stiffness", stiffness)
        damping = _require_finite("damping", damping)
        if stiffness <= 0.0:
            raise ValueError(f"stiffness must be positive, got {stiffness}")
        if damping < 0.0:
            raise ValueError(f"damping must not be negative, got {damping}")
        duration = 2.0 * math.pi / math.sqrt(stiffness)
        return cls(
            duration=duration,
            damping_ratio=damping * duration / (4.0 * math.pi),
            epsilon=epsilon,
        )

    @classmethod
    def preset(cls, name: str) -> "SpringConfig":
        from spring_animation.config import default_preset_registry

        return default_preset_registry.get(name)


class SpringValue(Generic[V]):
    """Stateful spring integrator; satisfies the ``Animatable`` protocol."""

    def __init__(
        self,
        value: V,
        *,
        config: SpringConfig | None = None,
        registry: "AnimationRegistry | None" = None,
    ) -> None:
        self.ops: VectorOps[V] = ops_for(value)
        self.config = config or SpringConfig()
        self.id = uuid.uuid4()
        self.value: V = coerce_value(value, self.ops)
        self.target: V = coerce_value(value, self.ops)
        self.velocity: V = self.ops.zero(self.value)
        # Fixed for the integrator's lifetime.
        self.stiffness = self.config.stiffness
        self.damping = self.config.damping
        self.epsilon = self.config.epsilon
        self.registry = registry

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, value={self.value!r}, "
            f"target={self.target!r}, velocity={self.velocity!r})"
        )

    def animate_to(self, target: V) -> None:
        """Redirect toward ``target`` keeping the current velocity.

        ``target`` must be the same kind of vector as the current value.
        """
        self.target = coerce_like(target, self.ops, self.value)
        if self.registry is not None:
            self.registry.register_or_refresh(self)

    def snap_to(self, value: V) -> None:
        """Jump to ``value`` at rest; does not touch the registry."""
        self.value = coerce_like(value, self.ops, self.value)
        self.target = coerce_value(self.value, self.ops)
        self.velocity = self.ops.zero(self.value)

    def update(self, elapsed: float) -> None:
        # Negative and NaN elapsed are clamped to zero, which is a no-op.
        if not elapsed > 0.0:
            return
        ops = self.ops
        displacement = ops.sub(self.value, self.target)
        # Hooke's law plus linear drag, unit mass so force == acceleration.
        spring_force = ops.scale(displacement, -self.stiffness)
        damping_force = ops.scale(self.velocity, -self.damping)
        acceleration = ops.add(spring_force, damping_force)
        self.velocity = ops.add(self.velocity, ops.scale(acceleration, elapsed))
        self.value = ops.add(self.value, ops.scale(self.velocity, elapsed))

    def is_done(self) -> bool:
        ops = self.ops
        displacement = ops.sub(self.value, self.target)
        # Both checks so a fast pass through the target is not retired early.
        return (
            ops.squared_magnitude(self.velocity) < self.epsilon
            and ops.squared_magnitude(displacement) < self.epsilon
        )
