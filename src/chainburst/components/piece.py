from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Position = Tuple[int, int]


class PieceType(str, Enum):
    """Every kind of piece that can occupy a board slot."""
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    ORANGE = "orange"
    AREA_BOMB = "bomb"
    CROSS_CLEAR = "star"

    @property
    def is_special(self) -> bool:
        return self in SPECIAL_TYPES


ORDINARY_TYPES: Tuple[PieceType, ...] = (
    PieceType.RED,
    PieceType.BLUE,
    PieceType.GREEN,
    PieceType.YELLOW,
    PieceType.PURPLE,
    PieceType.ORANGE,
)
SPECIAL_TYPES: Tuple[PieceType, ...] = (PieceType.AREA_BOMB, PieceType.CROSS_CLEAR)


@dataclass(frozen=True, slots=True)
class Piece:
    """Occupant of a single board slot.

    Pieces are immutable; board operations build replacements with
    ``dataclasses.replace`` so ``row``/``col`` always match the slot the
    piece sits in. ``is_matched`` marks a slot cleared in the current pass and
    ``is_animating`` flags pieces the renderer should emphasise.
    """
    id: int
    type: PieceType
    row: int
    col: int
    is_matched: bool = False
    is_animating: bool = False

    @property
    def is_special(self) -> bool:
        return self.type.is_special

    @property
    def position(self) -> Position:
        return (self.row, self.col)
