"""Entry point for the spring animation demo.

Sets up the animation registry, event bus, ECS world, systems and the Arcade
window. Click anywhere to send both rings to their other resting spot.
"""
import logging

from arcade import Window, run, set_background_color, color
from spring_animation.animation.registry import AnimationRegistry
from spring_animation.cli import parse_args
from spring_animation.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from spring_animation.events.bus import EVENT_FRAME, EVENT_MOUSE_PRESS, EventBus
from spring_animation.logging_config import setup_logging
from spring_animation.physics.spring import SpringConfig
from spring_animation.systems.animation import AnimationSystem
from spring_animation.systems.frame_driver import FrameDriver
from spring_animation.systems.input import InputSystem
from spring_animation.systems.render import RenderSystem
from spring_animation.world import create_world


class SpringWindow(Window):
    def __init__(self, config: SpringConfig | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.registry = AnimationRegistry(self.event_bus)
        self.world = create_world(self.event_bus, self.registry, config=config)

        self.frame_driver = FrameDriver(self.event_bus, self.registry)
        self.animation_system = AnimationSystem(self.world, self.event_bus, self.registry)
        self.input_system = InputSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        # The driver measures elapsed time itself and stays quiet while idle.
        if not self.frame_driver.paused:
            self.event_bus.emit(EVENT_FRAME)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)
    SpringWindow(args.config)
    run()


if __name__ == "__main__":
    main()
