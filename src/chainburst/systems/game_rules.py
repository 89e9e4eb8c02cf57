"""Scoring and progression rules applied to GameState values.

Each function returns a new state and leaves the one it was given untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from chainburst.components.game_state import GameState
from chainburst.constants import (
    COMBO_STEP_BONUS,
    LEVEL_UP_MOVE_BONUS,
    POINTS_PER_PIECE,
    STARTING_LEVEL,
    STARTING_MOVES,
    STARTING_TARGET,
    TARGET_GROWTH,
)


@dataclass(frozen=True, slots=True)
class ScoreResult:
    state: GameState
    delta: int = 0
    combo_bonus: int = 0
    new_high_score: bool = False


def combo_bonus_for(depth: int) -> int:
    return (depth - 1) * COMBO_STEP_BONUS if depth > 1 else 0


def apply_cascade_result(state: GameState, total_cleared: int, depth: int) -> ScoreResult:
    """Fold a finished cascade into the score.

    A cascade that cleared nothing leaves the state alone, combo included.
    """
    if total_cleared <= 0:
        return ScoreResult(state=state)
    bonus = combo_bonus_for(depth)
    delta = total_cleared * POINTS_PER_PIECE + bonus
    score = state.score + delta
    new_high = score > state.high_score
    updated = replace(
        state,
        score=score,
        combo=depth,
        high_score=score if new_high else state.high_score,
    )
    return ScoreResult(state=updated, delta=delta, combo_bonus=bonus, new_high_score=new_high)


def check_level_up(state: GameState) -> Tuple[GameState, bool]:
    # One level per check even when the score jumped past several targets.
    if not state.playing or state.score < state.target:
        return state, False
    return (
        replace(
            state,
            level=state.level + 1,
            target=state.target * TARGET_GROWTH,
            moves=state.moves + LEVEL_UP_MOVE_BONUS,
        ),
        True,
    )


def check_game_over(state: GameState) -> Tuple[GameState, bool]:
    if not state.playing or state.moves > 0 or state.score >= state.target:
        return state, False
    return replace(state, playing=False, selected=None), True


def new_game_state(high_score: int = 0) -> GameState:
    return GameState(
        score=0,
        high_score=high_score,
        level=STARTING_LEVEL,
        target=STARTING_TARGET,
        moves=STARTING_MOVES,
        combo=0,
        playing=True,
        resolving=False,
        selected=None,
    )


def reset_game_state(high_score: int = 0) -> GameState:
    return replace(new_game_state(high_score), playing=False)
