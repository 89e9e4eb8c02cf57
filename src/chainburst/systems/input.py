from chainburst.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from chainburst.constants import GRID_COLS, GRID_ROWS, MOUSE_BUTTON_LEFT
from chainburst.ui.layout import cell_at, compute_board_geometry
from chainburst.utils.game_state import get_board


class InputSystem:
    """Maps left mouse presses on the board to EVENT_TILE_CLICK."""
    def __init__(self, event_bus: EventBus, window, world=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world  # optional; board size comes from here when present
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Other buttons fall through; BoardSystem listens to EVENT_MOUSE_PRESS for right-click.
        if button != MOUSE_BUTTON_LEFT:
            return
        rows, cols = self._board_size()
        geometry = compute_board_geometry(self.window.width, self.window.height, rows, cols)
        cell = cell_at(x, y, geometry, rows, cols)
        if cell is None:
            return
        row, col = cell
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def _board_size(self):
        if self.world is None:
            return GRID_ROWS, GRID_COLS
        board = get_board(self.world)
        return board.rows, board.cols
