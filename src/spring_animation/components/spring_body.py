from dataclasses import dataclass
from typing import Tuple

from spring_animation.animation.animated import Animated
from spring_animation.physics.vector import Point


@dataclass(slots=True)
class SpringBody:
    """Circle driven by a 2D spring: ``x`` is the diameter, ``y`` the offset from centre."""

    handle: Animated[Point]
    anchor_x: float = 0.0
    line_width: float = 8.0
    color: Tuple[int, int, int, int] = (255, 255, 255, 255)
