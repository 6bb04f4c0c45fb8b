from __future__ import annotations

from typing import Generic, Type

from spring_animation.animation.registry import AnimationRegistry
from spring_animation.physics.spring import SpringConfig, SpringValue
from spring_animation.physics.vector import V


class Animated(Generic[V]):
    """Read/write handle over a spring: reads give the current interpolated
    value, writes become new targets."""

    def __init__(
        self,
        initial: V,
        registry: AnimationRegistry,
        *,
        config: SpringConfig | None = None,
        spring_type: Type[SpringValue] = SpringValue,
    ) -> None:
        self._spring: SpringValue[V] = spring_type(initial, config=config, registry=registry)

    @property
    def spring(self) -> SpringValue[V]:
        return self._spring

    def current_value(self) -> V:
        return self._spring.value

    def target(self) -> V:
        return self._spring.target

    def set_target(self, target: V) -> None:
        self._spring.animate_to(target)

    def is_animating(self) -> bool:
        registry = self._spring.registry
        return registry is not None and self._spring.id in registry
