from __future__ import annotations

from typing import Any

from esper import World

from spring_animation.components.toggle_targets import ToggleTargets
from spring_animation.events.bus import (
    EVENT_MOUSE_PRESS,
    EVENT_SPRING_TARGET_REQUEST,
    EventBus,
)


class InputSystem:
    """Every mouse press flips each toggling entity to its other target."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender: Any, **kwargs: Any) -> None:
        if kwargs.get("x") is None or kwargs.get("y") is None:
            return
        # Collect first; target requests must not run while esper is iterating.
        toggles = list(self.world.get_component(ToggleTargets))
        for entity, toggle in toggles:
            self.event_bus.emit(EVENT_SPRING_TARGET_REQUEST, entity=entity, target=toggle.flip())
