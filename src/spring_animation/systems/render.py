"""Rendering system drawing spring-driven rings and their resting markers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import arcade
from esper import World

from spring_animation.components.marker import Marker
from spring_animation.components.spring_body import SpringBody

Color = Tuple[int, int, int, int]


@dataclass(slots=True)
class CircleShape:
    center_x: float
    center_y: float
    radius: float
    color: Color
    line_width: float = 0.0  # 0 means filled

    @property
    def filled(self) -> bool:
        return self.line_width <= 0.0


class RenderSystem:
    """Reads the current spring values each redraw; never writes them."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def build_shapes(self) -> List[CircleShape]:
        cx = self.window.width / 2
        cy = self.window.height / 2
        shapes: List[CircleShape] = []
        # Offsets grow downward like screen coordinates; arcade's y axis points up.
        for _, marker in self.world.get_component(Marker):
            shapes.append(
                CircleShape(
                    center_x=cx + marker.anchor_x,
                    center_y=cy - marker.offset_y,
                    radius=marker.diameter / 2,
                    color=marker.color,
                )
            )
        for _, body in self.world.get_component(SpringBody):
            point = body.handle.current_value()
            shapes.append(
                CircleShape(
                    center_x=cx + body.anchor_x,
                    center_y=cy - point.y,
                    # The ring may overshoot through zero size; draw its magnitude.
                    radius=abs(point.x) / 2,
                    color=body.color,
                    line_width=body.line_width,
                )
            )
        return shapes

    def process(self) -> None:
        for shape in self.build_shapes():
            if shape.radius <= 0.0:
                continue
            if shape.filled:
                arcade.draw_circle_filled(shape.center_x, shape.center_y, shape.radius, shape.color)
            else:
                arcade.draw_circle_outline(
                    shape.center_x,
                    shape.center_y,
                    shape.radius,
                    shape.color,
                    border_width=shape.line_width,
                )
