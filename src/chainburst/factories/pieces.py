from __future__ import annotations

import itertools
import random
from typing import Iterator, Sequence

from chainburst.components.board import Board
from chainburst.components.piece import ORDINARY_TYPES, SPECIAL_TYPES, Piece, PieceType
from chainburst.constants import GRID_COLS, GRID_ROWS, SPECIAL_MIN_LEVEL, SPECIAL_SPAWN_CHANCE


class PieceFactory:
    """Creates pieces with unique ids from an injectable random source."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        ordinary: Sequence[PieceType] = ORDINARY_TYPES,
        specials: Sequence[PieceType] = SPECIAL_TYPES,
        special_chance: float = SPECIAL_SPAWN_CHANCE,
        special_min_level: int = SPECIAL_MIN_LEVEL,
        first_id: int = 1,
    ) -> None:
        self.rng = rng or random.Random()
        self.ordinary = list(ordinary)
        self.specials = list(specials)
        self.special_chance = special_chance
        self.special_min_level = special_min_level
        self._ids: Iterator[int] = itertools.count(first_id)

    def next_id(self) -> int:
        return next(self._ids)

    def create(self, row: int, col: int, level: int) -> Piece:
        piece_type = self.rng.choice(self.ordinary)
        if level > self.special_min_level and self.specials and self.rng.random() < self.special_chance:
            piece_type = self.rng.choice(self.specials)
        return Piece(id=self.next_id(), type=piece_type, row=row, col=col)


def initialize_board(
    factory: PieceFactory,
    level: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Board:
    """Fill every slot independently; the result may already contain matches."""
    board = Board.empty(rows, cols)
    for row in range(rows):
        for col in range(cols):
            board.cells[row][col] = factory.create(row, col, level)
    return board
