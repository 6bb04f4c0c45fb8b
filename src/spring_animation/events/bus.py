from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_FRAME = "frame"    # payload: timestamp=float|None (seconds)
EVENT_TICK = "tick"      # payload: dt=float (seconds since previous tick)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"                  # payload: animation_id=UUID
EVENT_ANIMATION_COMPLETE = "animation_complete"            # payload: animation_id=UUID
EVENT_ANIMATIONS_RESUMED = "animations_resumed"            # payload: count=int
EVENT_ANIMATIONS_IDLE = "animations_idle"                  # payload: None
EVENT_SPRING_TARGET_REQUEST = "spring_target_request"      # payload: entity=int, target=Any
