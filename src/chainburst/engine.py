"""State-threading entry points over the match-resolution core.

Every call takes the board and game state explicitly and returns new ones,
so a caller can drive whole games headlessly. The ECS systems reuse the same
validation and rules one event at a time.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

from chainburst.components.board import Board
from chainburst.components.game_state import GameState
from chainburst.components.piece import Position
from chainburst.factories.pieces import PieceFactory, initialize_board
from chainburst.systems.board_ops import is_adjacent, swap_pieces
from chainburst.systems.cascade import CascadeResult, PhaseCallback, resolve_cascade
from chainburst.systems.game_rules import (
    ScoreResult,
    apply_cascade_result,
    check_game_over,
    check_level_up,
    new_game_state,
)


StateCallback = Callable[[GameState], None]


class SwapRejection(str, Enum):
    NOT_PLAYING = "not_playing"
    ALREADY_RESOLVING = "already_resolving"
    NO_MOVES_LEFT = "no_moves_left"
    SAME_CELL = "same_cell"
    NON_ADJACENT = "non_adjacent"


@dataclass(frozen=True, slots=True)
class SwapOutcome:
    board: Board
    state: GameState
    rejection: Optional[SwapRejection] = None
    cascade: Optional[CascadeResult] = None
    score: Optional[ScoreResult] = None
    leveled_up: bool = False
    game_over: bool = False

    @property
    def accepted(self) -> bool:
        return self.rejection is None


@dataclass(frozen=True, slots=True)
class SelectionOutcome:
    board: Board
    state: GameState
    swap: Optional[SwapOutcome] = None
    ignored: bool = False


def start_game(factory: PieceFactory, *, high_score: int = 0) -> Tuple[Board, GameState]:
    state = new_game_state(high_score)
    return initialize_board(factory, state.level), state


def validate_swap(state: GameState, a: Position, b: Position) -> Optional[SwapRejection]:
    if not state.playing:
        return SwapRejection.NOT_PLAYING
    if state.resolving:
        return SwapRejection.ALREADY_RESOLVING
    if state.moves <= 0:
        return SwapRejection.NO_MOVES_LEFT
    if tuple(a) == tuple(b):
        return SwapRejection.SAME_CELL
    if not is_adjacent(a, b):
        return SwapRejection.NON_ADJACENT
    return None


def apply_transitions(state: GameState) -> Tuple[GameState, bool, bool]:
    """Run the level-up check, then the game-over check."""
    state, leveled_up = check_level_up(state)
    state, game_over = check_game_over(state)
    return state, leveled_up, game_over


def try_swap(
    board: Board,
    state: GameState,
    a: Position,
    b: Position,
    *,
    factory: PieceFactory,
    on_phase: Optional[PhaseCallback] = None,
    on_state: Optional[StateCallback] = None,
) -> SwapOutcome:
    """Validate, swap, resolve the cascade and score it.

    A rejected swap returns the board and state it was given. An accepted one
    always costs a move, match or not.

    ``on_state`` receives the resolving state before the first ``on_phase``
    call and the settled state once transitions have run. Any swap validated
    against the resolving state is rejected with ``ALREADY_RESOLVING``.
    """
    rejection = validate_swap(state, a, b)
    if rejection is not None:
        return SwapOutcome(board=board, state=state, rejection=rejection)
    swapped = swap_pieces(board, a, b)
    resolving = replace(state, moves=state.moves - 1, selected=None, resolving=True)
    if on_state is not None:
        on_state(resolving)
    cascade = resolve_cascade(swapped, factory, resolving.level, on_phase=on_phase)
    scored = apply_cascade_result(replace(resolving, resolving=False), cascade.total_cleared, cascade.depth)
    final_state, leveled_up, game_over = apply_transitions(scored.state)
    if on_state is not None:
        on_state(final_state)
    return SwapOutcome(
        board=cascade.board,
        state=final_state,
        cascade=cascade,
        score=scored,
        leveled_up=leveled_up,
        game_over=game_over,
    )


def select_cell(
    board: Board,
    state: GameState,
    pos: Position,
    *,
    factory: PieceFactory,
    on_phase: Optional[PhaseCallback] = None,
    on_state: Optional[StateCallback] = None,
) -> SelectionOutcome:
    """First click records a selection; the second attempts a swap and always clears it."""
    if not state.accepting_input:
        return SelectionOutcome(board=board, state=state, ignored=True)
    if state.selected is None:
        return SelectionOutcome(board=board, state=replace(state, selected=tuple(pos)))
    first = state.selected
    cleared = replace(state, selected=None)
    outcome = try_swap(board, cleared, first, pos, factory=factory, on_phase=on_phase, on_state=on_state)
    return SelectionOutcome(board=outcome.board, state=replace(outcome.state, selected=None), swap=outcome)
