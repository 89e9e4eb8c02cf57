import logging

from esper import World
from chainburst.events.bus import (EventBus, EVENT_CASCADE_COMPLETE, EVENT_SCORE_CHANGED, EVENT_NEW_HIGH_SCORE,
                                   EVENT_COMBO_ACHIEVED, EVENT_STATE_UPDATED)
from chainburst.systems.game_rules import apply_cascade_result
from chainburst.utils.game_state import get_game_state, set_game_state

logger = logging.getLogger(__name__)


class ScoringSystem:
    """Folds each finished cascade into score, combo and high score."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CASCADE_COMPLETE, self.on_cascade_complete)

    def on_cascade_complete(self, sender, **kwargs):
        total = int(kwargs.get('total_cleared', 0) or 0)
        depth = int(kwargs.get('depth', 0) or 0)
        result = apply_cascade_result(get_game_state(self.world), total, depth)
        state = set_game_state(self.world, result.state)
        if result.delta:
            logger.debug("Scored %d (%d cleared, depth %d)", result.delta, total, depth)
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=result.delta)
        if result.new_high_score:
            self.event_bus.emit(EVENT_NEW_HIGH_SCORE, score=state.score)
        if result.combo_bonus:
            self.event_bus.emit(EVENT_COMBO_ACHIEVED, depth=depth, bonus=result.combo_bonus)
        # Progression listens for this even when nothing was cleared; the move was still spent.
        self.event_bus.emit(EVENT_STATE_UPDATED, reason='cascade_complete')
