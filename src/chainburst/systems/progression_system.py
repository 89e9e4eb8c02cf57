import logging

from esper import World
from chainburst.events.bus import EventBus, EVENT_STATE_UPDATED, EVENT_LEVEL_UP, EVENT_GAME_OVER, EVENT_MOVES_CHANGED
from chainburst.constants import LEVEL_UP_MOVE_BONUS
from chainburst.systems.game_rules import check_game_over, check_level_up
from chainburst.utils.game_state import get_game_state, set_game_state

logger = logging.getLogger(__name__)


class ProgressionSystem:
    """Applies level-up, then game-over, whenever the scalar state settles."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_STATE_UPDATED, self.on_state_updated)

    def on_state_updated(self, sender, **kwargs):
        state = get_game_state(self.world)
        if state.resolving:
            return
        state, leveled_up = check_level_up(state)
        if leveled_up:
            set_game_state(self.world, state)
            logger.info("Level %d reached; next target %d", state.level, state.target)
            self.event_bus.emit(EVENT_MOVES_CHANGED, moves=state.moves, delta=LEVEL_UP_MOVE_BONUS)
            self.event_bus.emit(EVENT_LEVEL_UP, level=state.level, target=state.target)
        state, game_over = check_game_over(state)
        if game_over:
            set_game_state(self.world, state)
            logger.info("Game over with %d points", state.score)
            self.event_bus.emit(EVENT_GAME_OVER, final_score=state.score)
