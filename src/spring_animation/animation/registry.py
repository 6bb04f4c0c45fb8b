from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Hashable, List, Protocol, runtime_checkable

from spring_animation.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_ANIMATIONS_IDLE,
    EVENT_ANIMATIONS_RESUMED,
    EventBus,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class Animatable(Protocol):
    """Anything the registry can step: an id, a convergence check and an update."""

    id: Hashable

    def is_done(self) -> bool: ...

    def update(self, elapsed: float) -> None: ...


class AnimationRegistry:
    """Collection of the animations that have not converged yet.

    One instance per running application; the frame driver advances it and
    watches :meth:`is_idle` to decide whether ticks are still needed.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus
        self._animations: Dict[Hashable, Animatable] = {}
        # Re-entrant so an update may register another animation on the same thread.
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._animations)

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self._animations

    def get(self, animation_id: Hashable) -> Animatable | None:
        return self._animations.get(animation_id)

    def is_idle(self) -> bool:
        return not self._animations

    def register_or_refresh(self, animation: Animatable) -> None:
        with self._lock:
            was_idle = not self._animations
            is_new = animation.id not in self._animations
            self._animations[animation.id] = animation
        if not is_new:
            logger.debug("Refreshing animation %s", animation.id)
            return
        logger.debug("Adding animation %s", animation.id)
        self._emit(EVENT_ANIMATION_START, animation_id=animation.id)
        if was_idle:
            self._emit(EVENT_ANIMATIONS_RESUMED, count=len(self._animations))

    def advance(self, elapsed: float) -> List[Hashable]:
        """Step every registered animation and retire the converged ones.

        Works on a snapshot taken when the pass starts: entries registered
        while the pass runs are stepped on the next call. Returns the ids
        retired by this pass.
        """
        if not elapsed > 0.0:
            elapsed = 0.0
        retired: List[Hashable] = []
        try:
            with self._lock:
                snapshot = list(self._animations.items())
                for animation_id, animation in snapshot:
                    animation.update(elapsed)
                    logger.debug("Stepping animation %s: %s", animation_id, elapsed)
                    if not animation.is_done():
                        continue
                    # A refreshed handle replaced this one mid-pass; leave it for next tick.
                    if self._animations.get(animation_id) is not animation:
                        continue
                    del self._animations[animation_id]
                    retired.append(animation_id)
                    logger.debug("Animation %s done", animation_id)
        finally:
            # Ids retired before a failing update still get their events.
            for animation_id in retired:
                self._emit(EVENT_ANIMATION_COMPLETE, animation_id=animation_id)
            # Completion handlers may have started new animations.
            if retired and not self._animations:
                self._emit(EVENT_ANIMATIONS_IDLE)
        return retired

    def _emit(self, name: str, **payload: Any) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(name, **payload)
