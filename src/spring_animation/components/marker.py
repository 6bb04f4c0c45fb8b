from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class Marker:
    """Static filled circle marking one of the spring's resting spots."""

    anchor_x: float
    offset_y: float
    diameter: float
    color: Tuple[int, int, int, int] = (128, 128, 128, 90)
