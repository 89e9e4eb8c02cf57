"""Game state resource describing score, progression and input gating."""
from dataclasses import dataclass
from typing import Optional, Tuple

from chainburst.constants import STARTING_LEVEL, STARTING_MOVES, STARTING_TARGET


@dataclass(slots=True)
class GameState:
    """Singleton component holding the scalar state of the current game.

    ``resolving`` is the cascade gate: while it is set no swap or click is
    accepted. ``selected`` holds at most one pending cell selection.
    """
    score: int = 0
    high_score: int = 0
    level: int = STARTING_LEVEL
    target: int = STARTING_TARGET
    moves: int = STARTING_MOVES
    combo: int = 0
    playing: bool = False
    resolving: bool = False
    selected: Optional[Tuple[int, int]] = None

    @property
    def accepting_input(self) -> bool:
        return self.playing and not self.resolving and self.moves > 0

    @property
    def show_combo(self) -> bool:
        return self.combo > 1
