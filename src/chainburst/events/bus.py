from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else holds on to.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# SELECTION & SWAPS
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev_row, prev_col
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=(r,c), dst=(r,c), reason=SwapRejection
EVENT_TILE_SWAP_FINALIZE = "tile_swap_finalize"    # payload: src=(r,c), dst=(r,c)


# ============================================================================
# MATCH RESOLUTION
# ============================================================================
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(r,c),...], count=int, depth=int
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_tiles=[(r,c),...]
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, positions=[(r,c),...]
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: total_cleared=int, depth=int, passes=tuple[int,...]
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, board=Board, selected=(r,c)|None, combo=int


# ============================================================================
# ANIMATION PHASES
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind='clear'|'drop', items=[(r,c),...]
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind='clear'|'drop', items=[(r,c),...]


# ============================================================================
# SCORE & PROGRESSION
# ============================================================================
EVENT_MOVES_CHANGED = "moves_changed"          # payload: moves=int, delta=int
EVENT_SCORE_CHANGED = "score_changed"          # payload: score=int, delta=int
EVENT_STATE_UPDATED = "state_updated"          # payload: reason=str
EVENT_NEW_HIGH_SCORE = "new_high_score"        # payload: score=int
EVENT_COMBO_ACHIEVED = "combo_achieved"        # payload: depth=int, bonus=int
EVENT_LEVEL_UP = "level_up"                    # payload: level=int, target=int
EVENT_GAME_OVER = "game_over"                  # payload: final_score=int


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_START_REQUEST = "game_start_request"    # payload: None
EVENT_GAME_STARTED = "game_started"                # payload: level=int, target=int, moves=int
EVENT_GAME_RESET_REQUEST = "game_reset_request"    # payload: None
EVENT_GAME_RESET = "game_reset"                    # payload: None
