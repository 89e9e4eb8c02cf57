import logging
from dataclasses import replace
from typing import Optional, Tuple

from esper import World
from chainburst.events.bus import (EventBus, EVENT_TILE_CLICK, EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED,
                                   EVENT_TILE_SWAP_REQUEST, EVENT_MOUSE_PRESS)
from chainburst.constants import MOUSE_BUTTON_RIGHT
from chainburst.systems.board_ops import is_adjacent
from chainburst.utils.game_state import get_board, get_game_state, set_game_state

logger = logging.getLogger(__name__)


class BoardSystem:
    """Turns cell clicks into selections and swap requests.

    The first click records a pending selection; the second one requests a
    swap against it and the selection is dropped whatever the outcome.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    @property
    def selected(self) -> Optional[Tuple[int, int]]:
        return get_game_state(self.world).selected

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        if not get_board(self.world).in_bounds(row, col):
            return
        state = get_game_state(self.world)
        if not state.accepting_input:
            logger.debug("Click at (%s, %s) ignored; board not accepting input", row, col)
            return
        if state.selected is None:
            set_game_state(self.world, replace(state, selected=(row, col)))
            self.event_bus.emit(EVENT_TILE_SELECTED, row=row, col=col)
            return
        src = state.selected
        dst = (row, col)
        self._clear_selection(reason='swap_attempt')
        if not is_adjacent(src, dst):
            logger.debug("Second click %s is not adjacent to %s", dst, src)
        # Validation (including adjacency) is SwapSystem's call.
        self.event_bus.emit(EVENT_TILE_SWAP_REQUEST, src=src, dst=dst)

    def on_mouse_press(self, sender, **kwargs):
        # Right-click always clears the current selection.
        if kwargs.get('button') != MOUSE_BUTTON_RIGHT:
            return
        self._clear_selection(reason='right_click')

    def _clear_selection(self, reason: str):
        state = get_game_state(self.world)
        prev = state.selected
        if prev is None:
            return
        set_game_state(self.world, replace(state, selected=None))
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev_row=prev[0], prev_col=prev[1])
