from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from chainburst.components.piece import Piece, Position
from chainburst.constants import GRID_COLS, GRID_ROWS

Grid = List[List[Optional[Piece]]]


@dataclass(slots=True)
class Board:
    """Row-major grid of pieces. Row 0 is the top; gravity pulls toward ``rows - 1``.

    Treat instances as values: operations return a new Board rather than
    editing one that may already have been handed to a renderer.
    """
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    cells: Grid = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def empty(cls, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> Board:
        return cls(rows=rows, cols=cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def at(self, row: int, col: int) -> Optional[Piece]:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} board")
        return self.cells[row][col]

    def row(self, row: int) -> List[Optional[Piece]]:
        return list(self.cells[row])

    def column(self, col: int) -> List[Optional[Piece]]:
        return [self.cells[row][col] for row in range(self.rows)]

    def pieces(self) -> Iterator[Piece]:
        for line in self.cells:
            for piece in line:
                if piece is not None:
                    yield piece

    def is_populated(self) -> bool:
        return all(piece is not None and not piece.is_matched for line in self.cells for piece in line)

    def copy(self) -> Board:
        return Board(rows=self.rows, cols=self.cols, cells=[list(line) for line in self.cells])

    def with_pieces(self, pieces: List[Piece]) -> Board:
        """Return a copy with each piece written into the slot named by its position."""
        updated = self.copy()
        for piece in pieces:
            updated.cells[piece.row][piece.col] = piece
        return updated

    def positions(self) -> Iterator[Position]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)
