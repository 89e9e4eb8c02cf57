from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from chainburst.components.board import Board
from chainburst.factories.pieces import PieceFactory
from chainburst.systems.board_ops import collapse_columns, remove_matches, settle_board

PHASE_CLEAR = "clear"
PHASE_DROP = "drop"

PhaseCallback = Callable[[str, Board], None]


@dataclass(frozen=True, slots=True)
class CascadeResult:
    board: Board
    total_cleared: int = 0
    depth: int = 0
    passes: Tuple[int, ...] = field(default_factory=tuple)


def resolve_cascade(
    board: Board,
    factory: PieceFactory,
    level: int,
    on_phase: Optional[PhaseCallback] = None,
) -> CascadeResult:
    """Clear, collapse and refill until a pass clears nothing.

    ``on_phase`` is called at each phase boundary (after the clear and after
    the drop of every pass) with the board as it stands at that point.
    """
    passes: list[int] = []
    current = board
    while True:
        cleared_board, count = remove_matches(current)
        if count == 0:
            break
        passes.append(count)
        if on_phase is not None:
            on_phase(PHASE_CLEAR, cleared_board)
        current = collapse_columns(cleared_board, factory, level)
        if on_phase is not None:
            on_phase(PHASE_DROP, current)
    return CascadeResult(
        board=settle_board(current),
        total_cleared=sum(passes),
        depth=len(passes),
        passes=tuple(passes),
    )
