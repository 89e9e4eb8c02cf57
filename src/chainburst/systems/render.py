from typing import Any, Dict, List, Optional, Tuple

from esper import World
from chainburst.events.bus import (EVENT_TICK, EventBus, EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED,
                                   EVENT_BOARD_CHANGED)
from chainburst.components.animation_clear import ClearAnimation
from chainburst.components.animation_drop import DropAnimation
from chainburst.components.board import Board
from chainburst.components.piece import PieceType
from chainburst.ui.layout import cell_origin, compute_board_geometry
from chainburst.utils.game_state import get_board, get_game_state, get_notification_feed, get_palette

PADDING = 4

GLYPHS = {
    PieceType.AREA_BOMB: "B",
    PieceType.CROSS_CLEAR: "+",
}


class RenderSystem:
    """Draws the last published board snapshot plus the HUD.

    Board and selection come from bus events so the screen never shows
    a half-resolved pass. ``build_layout`` does all the geometry work and is
    usable without a window.
    """
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_TILE_SELECTED, self.on_tile_selected)
        self.event_bus.subscribe(EVENT_TILE_DESELECTED, self.on_tile_deselected)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self.board: Board = get_board(world)
        self.selected: Optional[Tuple[int, int]] = None
        self._time = 0.0

    def on_tick(self, sender, **kwargs):
        self._time += float(kwargs.get('dt', 1/60))

    def on_tile_selected(self, sender, **kwargs):
        self.selected = (kwargs.get('row'), kwargs.get('col'))

    def on_tile_deselected(self, sender, **kwargs):
        self.selected = None

    def on_board_changed(self, sender, **kwargs):
        board = kwargs.get('board')
        if board is not None:
            self.board = board
        self.selected = kwargs.get('selected')

    def build_layout(self) -> List[Dict[str, Any]]:
        """One draw entry per occupied cell: rectangle, colour, alpha and glyph."""
        board = self.board
        geometry = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        tile_size = geometry[0]
        palette = get_palette(self.world)
        fades = {clear.pos: clear.alpha for _, clear in self.world.get_component(ClearAnimation)}
        drops = {drop.pos: drop.linear for _, drop in self.world.get_component(DropAnimation)}
        entries = []
        for piece in board.pieces():
            left, bottom = cell_origin(piece.row, piece.col, geometry, board.rows)
            alpha = 1.0
            if piece.is_matched:
                alpha = fades.get(piece.position, 0.5)
            elif piece.position in drops:
                # Slide in from one tile above while the drop phase runs.
                bottom += (1.0 - drops[piece.position]) * tile_size
            entries.append({
                'pos': piece.position,
                'left': left + PADDING,
                'right': left + tile_size - PADDING,
                'bottom': bottom + PADDING,
                'top': bottom + tile_size - PADDING,
                'color': palette.color_for(piece.type),
                'alpha': alpha,
                'glyph': GLYPHS.get(piece.type),
                'selected': piece.position == self.selected,
                'emphasis': piece.is_animating,
            })
        return entries

    def hud_lines(self) -> List[str]:
        state = get_game_state(self.world)
        lines = [
            f"Score: {state.score}   High: {state.high_score}",
            f"Level: {state.level}   Moves: {state.moves}   Target: {state.target}",
        ]
        if state.show_combo:
            lines.append(f"{state.combo}x COMBO!")
        feed = get_notification_feed(self.world)
        latest = feed.latest() if feed is not None else None
        if latest is not None:
            lines.append(f"{latest.title} {latest.description}")
        if not state.playing:
            lines.append("Press Enter to start, R to reset")
        return lines

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        entries = self.build_layout()
        for entry in entries:
            r, g, b = entry['color']
            color = (r, g, b, int(255 * entry['alpha']))
            arcade.draw_lrbt_rectangle_filled(entry['left'], entry['right'], entry['bottom'], entry['top'], color)
            if entry['emphasis']:
                arcade.draw_lrbt_rectangle_outline(entry['left'], entry['right'], entry['bottom'], entry['top'],
                                                   arcade.color.WHITE, 1)
            if entry['selected']:
                arcade.draw_lrbt_rectangle_outline(entry['left'] - 2, entry['right'] + 2, entry['bottom'] - 2,
                                                   entry['top'] + 2, arcade.color.WHITE, 3)
            if entry['glyph']:
                cx = (entry['left'] + entry['right']) / 2
                cy = (entry['bottom'] + entry['top']) / 2
                arcade.draw_circle_filled(cx, cy, (entry['right'] - entry['left']) / 4, arcade.color.WHITE)
                arcade.draw_text(entry['glyph'], cx, cy, arcade.color.BLACK, 14,
                                 anchor_x="center", anchor_y="center", bold=True)
        y = self.window.height - 24
        for line in self.hud_lines():
            arcade.draw_text(line, 16, y, arcade.color.WHITE, 14)
            y -= 22
