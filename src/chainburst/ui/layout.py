from typing import Optional, Tuple

from chainburst.constants import (GRID_COLS, GRID_ROWS, BOTTOM_MARGIN, HUD_HEIGHT, BOARD_MAX_WIDTH_PCT,
                                  BOARD_MAX_HEIGHT_PCT)


def compute_board_geometry(window_width: int, window_height: int, rows: int = GRID_ROWS, cols: int = GRID_COLS):
    """Return (tile_size, start_x, start_y) for the board's bottom-left corner.

    Shared by RenderSystem and InputSystem so clicks land on the cell that
    was drawn there.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / cols, max_board_h / rows))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_origin(row: int, col: int, geometry, rows: int = GRID_ROWS) -> Tuple[float, float]:
    """Bottom-left pixel of a cell. Row 0 is drawn at the top of the board."""
    tile_size, start_x, start_y = geometry
    return start_x + col * tile_size, start_y + (rows - 1 - row) * tile_size


def cell_at(x: float, y: float, geometry, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = geometry
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row_from_bottom = int((y - start_y) // tile_size)
    return rows - 1 - row_from_bottom, col
