from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from chainburst.components.board import Board
from chainburst.components.piece import Piece, PieceType, Position
from chainburst.constants import MIN_RUN
from chainburst.factories.pieces import PieceFactory

MatchSet = Dict[Position, Piece]

ORTHOGONAL_STEPS: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return abs(ar - br) + abs(ac - bc) == 1


def _runs_in_line(line: Sequence[Optional[Piece]]) -> List[Piece]:
    """Return every piece belonging to a run of MIN_RUN or more equal ordinary pieces."""
    matched: List[Piece] = []
    run: List[Piece] = []
    for piece in line:
        if (
            piece is not None
            and not piece.is_matched
            and not piece.is_special
            and run
            and piece.type == run[-1].type
        ):
            run.append(piece)
            continue
        if len(run) >= MIN_RUN:
            matched.extend(run)
        # Specials and empty slots break runs and never start one.
        if piece is None or piece.is_matched or piece.is_special:
            run = []
        else:
            run = [piece]
    if len(run) >= MIN_RUN:
        matched.extend(run)
    return matched


def find_matches(board: Board) -> MatchSet:
    """Detect all horizontal and vertical runs of MIN_RUN or more, keyed by position."""
    matches: MatchSet = {}
    for row in range(board.rows):
        for piece in _runs_in_line(board.row(row)):
            matches[piece.position] = piece
    for col in range(board.cols):
        for piece in _runs_in_line(board.column(col)):
            matches[piece.position] = piece
    return matches


def expand_power_up(piece: Piece, board: Board) -> MatchSet:
    """Return the cells a special piece clears, including the piece itself."""
    affected: MatchSet = {}
    if piece.type is PieceType.AREA_BOMB:
        for row in range(max(0, piece.row - 1), min(board.rows - 1, piece.row + 1) + 1):
            for col in range(max(0, piece.col - 1), min(board.cols - 1, piece.col + 1) + 1):
                _add_piece(affected, board, row, col)
    elif piece.type is PieceType.CROSS_CLEAR:
        for col in range(board.cols):
            _add_piece(affected, board, piece.row, col)
        for row in range(board.rows):
            _add_piece(affected, board, row, piece.col)
    return affected


def _add_piece(target: MatchSet, board: Board, row: int, col: int) -> None:
    piece = board.cells[row][col]
    if piece is not None:
        target[(row, col)] = piece


def triggered_specials(board: Board, matches: MatchSet) -> List[Piece]:
    """Specials orthogonally touching a matched piece, in board order."""
    found: Dict[Position, Piece] = {}
    for row, col in matches:
        for dr, dc in ORTHOGONAL_STEPS:
            r, c = row + dr, col + dc
            if not board.in_bounds(r, c):
                continue
            neighbour = board.cells[r][c]
            if neighbour is not None and neighbour.is_special and not neighbour.is_matched:
                found[(r, c)] = neighbour
    return [found[pos] for pos in sorted(found)]


def collect_clear_set(board: Board) -> MatchSet:
    """Union of run matches and the area of every special they set off.

    Only specials touching the run matches expand. A special swept up by
    another one's area is cleared without going off.
    """
    matches = find_matches(board)
    if not matches:
        return {}
    clear_set: MatchSet = dict(matches)
    for special in triggered_specials(board, matches):
        clear_set[special.position] = special
        clear_set.update(expand_power_up(special, board))
    return clear_set


def remove_matches(board: Board) -> Tuple[Board, int]:
    """Mark this pass's clear set on a new board and return it with the distinct count.

    An empty clear set returns the same board object and 0.
    """
    clear_set = collect_clear_set(board)
    if not clear_set:
        return board, 0
    cleared = [replace(piece, is_matched=True, is_animating=True) for piece in clear_set.values()]
    return board.with_pieces(cleared), len(clear_set)


def collapse_columns(board: Board, factory: PieceFactory, level: int) -> Board:
    """Compact surviving pieces to the bottom of each column and refill the top."""
    collapsed = Board.empty(board.rows, board.cols)
    for col in range(board.cols):
        survivors: List[Piece] = []
        for row in range(board.rows - 1, -1, -1):
            piece = board.cells[row][col]
            if piece is not None and not piece.is_matched:
                survivors.append(piece)
        for offset, piece in enumerate(survivors):
            row = board.rows - 1 - offset
            collapsed.cells[row][col] = replace(
                piece, row=row, col=col, is_matched=False, is_animating=piece.row != row
            )
        for offset in range(len(survivors), board.rows):
            row = board.rows - 1 - offset
            fresh = factory.create(row, col, level)
            collapsed.cells[row][col] = replace(fresh, is_animating=True)
    return collapsed


def settle_board(board: Board) -> Board:
    """Drop renderer emphasis flags once a cascade has come to rest."""
    settled = [
        replace(piece, is_animating=False)
        for piece in board.pieces()
        if piece.is_animating
    ]
    if not settled:
        return board
    return board.with_pieces(settled)


def swap_pieces(board: Board, a: Position, b: Position) -> Board:
    """Exchange two pieces; each keeps a position equal to its new slot."""
    piece_a = board.at(*a)
    piece_b = board.at(*b)
    if piece_a is None or piece_b is None:
        raise ValueError(f"cannot swap empty slot {a if piece_a is None else b}")
    return board.with_pieces([
        replace(piece_b, row=a[0], col=a[1]),
        replace(piece_a, row=b[0], col=b[1]),
    ])


def animating_positions(board: Board) -> List[Position]:
    return sorted(piece.position for piece in board.pieces() if piece.is_animating)


def matched_positions(board: Board) -> List[Position]:
    return sorted(piece.position for piece in board.pieces() if piece.is_matched)
