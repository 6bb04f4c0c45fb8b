from __future__ import annotations

from time import monotonic
from typing import Any, Callable

from spring_animation.animation.registry import AnimationRegistry
from spring_animation.events.bus import (
    EVENT_ANIMATIONS_IDLE,
    EVENT_FRAME,
    EVENT_TICK,
    EventBus,
)


class FrameDriver:
    """Turns frame timestamps into elapsed-time ticks while animations run.

    The first frame after an idle period has no baseline and ticks with
    ``dt=0`` so a long pause never shows up as one large step. While the
    registry is idle no ticks are emitted at all.
    """

    def __init__(
        self,
        event_bus: EventBus,
        registry: AnimationRegistry,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.event_bus = event_bus
        self.registry = registry
        self._clock = clock or monotonic
        self._last_timestamp: float | None = None
        self.event_bus.subscribe(EVENT_FRAME, self.on_frame)
        self.event_bus.subscribe(EVENT_ANIMATIONS_IDLE, self.on_idle)

    @property
    def paused(self) -> bool:
        return self.registry.is_idle()

    def on_frame(self, sender: Any, **kwargs: Any) -> None:
        timestamp = kwargs.get("timestamp")
        if timestamp is None:
            timestamp = self._clock()
        self.frame(float(timestamp))

    def on_idle(self, sender: Any, **kwargs: Any) -> None:
        self._last_timestamp = None

    def frame(self, timestamp: float) -> float | None:
        """Handle one frame; returns the emitted ``dt`` or None when idle."""
        if self.registry.is_idle():
            self._last_timestamp = None
            return None
        if self._last_timestamp is None:
            dt = 0.0
        else:
            dt = max(0.0, timestamp - self._last_timestamp)
        self._last_timestamp = timestamp
        self.event_bus.emit(EVENT_TICK, dt=dt)
        return dt
