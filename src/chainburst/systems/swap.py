import logging
from dataclasses import replace

from esper import World
from chainburst.events.bus import (EventBus, EVENT_TILE_SWAP_REQUEST, EVENT_TILE_SWAP_VALID, EVENT_TILE_SWAP_INVALID,
                                   EVENT_TILE_SWAP_FINALIZE, EVENT_MOVES_CHANGED, EVENT_BOARD_CHANGED)
from chainburst.engine import validate_swap
from chainburst.systems.board_ops import swap_pieces
from chainburst.utils.game_state import get_board, get_game_state, set_board, set_game_state

logger = logging.getLogger(__name__)


class SwapSystem:
    """Validates swap requests and commits the accepted ones.

    Any accepted swap costs a move, even one that produces no match; the
    cascade that follows is MatchResolutionSystem's business.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst:
            return
        state = get_game_state(self.world)
        rejection = validate_swap(state, src, dst)
        if rejection is not None:
            logger.debug("Swap %s -> %s rejected: %s", src, dst, rejection.value)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason=rejection)
            return
        board = set_board(self.world, swap_pieces(get_board(self.world), src, dst))
        state = set_game_state(self.world, replace(state, moves=state.moves - 1, selected=None))
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        self.event_bus.emit(EVENT_MOVES_CHANGED, moves=state.moves, delta=-1)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='swap', board=board, selected=None, combo=state.combo)
        self.event_bus.emit(EVENT_TILE_SWAP_FINALIZE, src=src, dst=dst)
