import logging
from dataclasses import replace
from typing import List

from esper import World
from chainburst.events.bus import (EventBus, EVENT_TILE_SWAP_FINALIZE, EVENT_MATCH_CLEARED, EVENT_REFILL_COMPLETED,
                                   EVENT_CASCADE_STEP, EVENT_CASCADE_COMPLETE, EVENT_ANIMATION_START,
                                   EVENT_ANIMATION_COMPLETE, EVENT_BOARD_CHANGED)
from chainburst.systems.board_ops import (animating_positions, collapse_columns, matched_positions, remove_matches,
                                          settle_board)
from chainburst.systems.cascade import PHASE_CLEAR, PHASE_DROP
from chainburst.utils.game_state import get_board, get_game_state, get_piece_factory, set_board, set_game_state

logger = logging.getLogger(__name__)


class MatchResolutionSystem:
    """Runs the clear / drop / refill loop one animation phase at a time.

    Each pass clears the current match set, waits for the clear animation,
    collapses and refills, waits for the drop animation, then looks again.
    ``GameState.resolving`` stays set from the first pass until the board
    comes to rest.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_SWAP_FINALIZE, self.on_swap_finalize)
        self.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, self.on_animation_complete)
        self.passes: List[int] = []
        self._awaiting: str | None = None

    @property
    def depth(self) -> int:
        return len(self.passes)

    def on_swap_finalize(self, sender, **kwargs):
        self.start_cascade(reason='swap')

    def start_cascade(self, reason: str) -> bool:
        state = get_game_state(self.world)
        if state.resolving:
            logger.debug("Cascade already resolving; ignoring %s", reason)
            return False
        set_game_state(self.world, replace(state, resolving=True))
        self.passes = []
        self._awaiting = None
        self._run_pass()
        return True

    def on_animation_complete(self, sender, **kwargs):
        kind = kwargs.get('kind')
        if self._awaiting is None or kind != self._awaiting:
            return
        self._awaiting = None
        if kind == PHASE_CLEAR:
            self._after_clear()
        elif kind == PHASE_DROP:
            self._run_pass()

    def _run_pass(self):
        board, count = remove_matches(get_board(self.world))
        if count == 0:
            self._finish()
            return
        self.passes.append(count)
        set_board(self.world, board)
        positions = matched_positions(board)
        logger.debug("Cascade pass %d clears %d pieces", self.depth, count)
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=positions, count=count, depth=self.depth)
        self.event_bus.emit(EVENT_CASCADE_STEP, depth=self.depth, positions=positions)
        self._emit_board_changed('clear', board)
        self._start_phase(PHASE_CLEAR, positions)

    def _after_clear(self):
        level = get_game_state(self.world).level
        board = set_board(self.world, collapse_columns(get_board(self.world), get_piece_factory(self.world), level))
        moved = animating_positions(board)
        self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=moved)
        self._emit_board_changed('refill', board)
        self._start_phase(PHASE_DROP, moved)

    def _finish(self):
        board = set_board(self.world, settle_board(get_board(self.world)))
        state = get_game_state(self.world)
        set_game_state(self.world, replace(state, resolving=False))
        total = sum(self.passes)
        if total:
            logger.info("Cascade finished: %d cleared over %d passes", total, self.depth)
        self._emit_board_changed('settled', board)
        self.event_bus.emit(EVENT_CASCADE_COMPLETE, total_cleared=total, depth=self.depth, passes=tuple(self.passes))

    def _start_phase(self, kind: str, items):
        # Set before emitting: a zero-length animation completes inside the emit.
        self._awaiting = kind
        self.event_bus.emit(EVENT_ANIMATION_START, kind=kind, items=items)

    def _emit_board_changed(self, reason: str, board):
        state = get_game_state(self.world)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, board=board, selected=state.selected, combo=state.combo)
