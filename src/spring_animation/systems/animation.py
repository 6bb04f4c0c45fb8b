from __future__ import annotations

from typing import Any

from esper import World

from spring_animation.animation.registry import AnimationRegistry
from spring_animation.components.spring_body import SpringBody
from spring_animation.events.bus import (
    EVENT_SPRING_TARGET_REQUEST,
    EVENT_TICK,
    EventBus,
)


class AnimationSystem:
    """Advances every registered spring once per tick and routes target requests."""

    def __init__(self, world: World, event_bus: EventBus, registry: AnimationRegistry):
        self.world = world
        self.event_bus = event_bus
        self.registry = registry
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_SPRING_TARGET_REQUEST, self.on_target_request)

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        dt = kwargs.get("dt")
        if dt is None:
            return
        self.registry.advance(float(dt))

    def on_target_request(self, sender: Any, **kwargs: Any) -> None:
        entity = kwargs.get("entity")
        target = kwargs.get("target")
        if entity is None or target is None:
            return
        try:
            body = self.world.component_for_entity(entity, SpringBody)
        except KeyError:
            return
        body.handle.set_target(target)
