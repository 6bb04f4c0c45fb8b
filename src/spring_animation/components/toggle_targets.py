from dataclasses import dataclass

from spring_animation.physics.vector import Point


@dataclass(slots=True)
class ToggleTargets:
    first: Point
    second: Point
    showing_second: bool = False

    def flip(self) -> Point:
        self.showing_second = not self.showing_second
        return self.second if self.showing_second else self.first
