from esper import World

from spring_animation.animation.animated import Animated
from spring_animation.animation.registry import AnimationRegistry
from spring_animation.components.marker import Marker
from spring_animation.components.spring_body import SpringBody
from spring_animation.components.toggle_targets import ToggleTargets
from spring_animation.constants import (
    EXACT_COLUMN_X,
    EXACT_RING_COLOR,
    MARKER_LARGE,
    MARKER_SMALL,
    RING_BIG_STATE,
    RING_LINE_WIDTH,
    RING_SMALL_STATE,
    SPRING_COLUMN_X,
    SPRING_RING_COLOR,
)
from spring_animation.physics.exact import ExactSpringValue
from spring_animation.physics.spring import SpringConfig, SpringValue
from spring_animation.physics.vector import Point
from spring_animation.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    registry: AnimationRegistry,
    *,
    config: SpringConfig | None = None,
) -> World:
    """Build the demo scene.

    Two columns share the same resting spots and spring constants: the left
    ring follows the closed-form solution, the right one the integrator, so
    a click shows both responses side by side.
    """
    world = World()

    big = Point(*RING_BIG_STATE)
    small = Point(*RING_SMALL_STATE)

    columns = (
        (EXACT_COLUMN_X, ExactSpringValue, EXACT_RING_COLOR),
        (SPRING_COLUMN_X, SpringValue, SPRING_RING_COLOR),
    )
    for anchor_x, spring_type, color in columns:
        for diameter, offset_y in (MARKER_SMALL, MARKER_LARGE):
            world.create_entity(Marker(anchor_x=anchor_x, offset_y=offset_y, diameter=diameter))
        world.create_entity(
            SpringBody(
                handle=Animated(big, registry, config=config, spring_type=spring_type),
                anchor_x=anchor_x,
                line_width=RING_LINE_WIDTH,
                color=color,
            ),
            ToggleTargets(first=big, second=small),
        )
    return world
