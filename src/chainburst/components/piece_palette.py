from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from chainburst.components.piece import ORDINARY_TYPES, SPECIAL_TYPES, PieceType

Color = Tuple[int, int, int]

DEFAULT_COLORS: Dict[PieceType, Color] = {
    PieceType.RED:         (220, 60, 60),
    PieceType.BLUE:        (66, 120, 230),
    PieceType.GREEN:       (70, 180, 90),
    PieceType.YELLOW:      (236, 200, 60),
    PieceType.PURPLE:      (150, 80, 200),
    PieceType.ORANGE:      (240, 140, 50),
    PieceType.AREA_BOMB:   (30, 30, 30),
    PieceType.CROSS_CLEAR: (250, 220, 90),
}


@dataclass(slots=True)
class PiecePalette:
    """Canonical piece definitions stored on a single entity.

    ``colors`` maps every piece type to its background colour for rendering;
    ``spawnable`` lists the ordinary types the piece factory draws from, in a
    stable order so seeded generators stay reproducible.
    """
    colors: Dict[PieceType, Color] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    spawnable: List[PieceType] = field(default_factory=lambda: list(ORDINARY_TYPES))
    specials: List[PieceType] = field(default_factory=lambda: list(SPECIAL_TYPES))

    def __post_init__(self) -> None:
        # Keep order while dropping specials and duplicates.
        seen: set[PieceType] = set()
        filtered: List[PieceType] = []
        for piece_type in self.spawnable:
            if piece_type.is_special or piece_type in seen:
                continue
            filtered.append(piece_type)
            seen.add(piece_type)
        self.spawnable = filtered or list(ORDINARY_TYPES)

    def color_for(self, piece_type: PieceType) -> Color:
        return self.colors[piece_type]

    def spawnable_types(self) -> List[PieceType]:
        return list(self.spawnable)
