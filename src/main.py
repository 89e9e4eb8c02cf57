"""Entry point for the Chain Burst match-three game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color, key
from chainburst.world import create_world
from chainburst.constants import WINDOW_WIDTH, WINDOW_HEIGHT
from chainburst.events.bus import (EVENT_TICK, EventBus, EVENT_MOUSE_PRESS, EVENT_GAME_START_REQUEST,
                                   EVENT_GAME_RESET_REQUEST)
from chainburst.systems.game_flow_system import GameFlowSystem
from chainburst.systems.render import RenderSystem
from chainburst.systems.animation import AnimationSystem
from chainburst.systems.board import BoardSystem
from chainburst.systems.input import InputSystem
from chainburst.systems.swap import SwapSystem
from chainburst.systems.match_resolution import MatchResolutionSystem
from chainburst.systems.scoring_system import ScoringSystem
from chainburst.systems.progression_system import ProgressionSystem
from chainburst.systems.high_score_system import HighScoreSystem
from chainburst.systems.notification_system import NotificationSystem


class ChainBurstWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Chain Burst", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Progression systems
        self.high_score_system = HighScoreSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.scoring_system = ScoringSystem(self.world, self.event_bus)
        self.progression_system = ProgressionSystem(self.world, self.event_bus)
        self.notification_system = NotificationSystem(self.world, self.event_bus)

        # Interface systems
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)

        # Board and animation systems
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.swap_system = SwapSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (key.ENTER, key.RETURN, key.SPACE):
            self.event_bus.emit(EVENT_GAME_START_REQUEST)
        elif symbol == key.R:
            self.event_bus.emit(EVENT_GAME_RESET_REQUEST)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ChainBurstWindow()
    run()


if __name__ == "__main__":
    main()
