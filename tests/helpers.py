from __future__ import annotations

import itertools
import random
from typing import Dict, Iterable, Sequence, Tuple

from chainburst.components.board import Board
from chainburst.components.piece import Piece, PieceType
from chainburst.events.bus import EventBus

# Background layout with no runs in any row or column: each row alternates two
# types and each column walks through all four.
BACKGROUND = "RBGY"

LETTERS: Dict[str, PieceType] = {
    "R": PieceType.RED,
    "B": PieceType.BLUE,
    "G": PieceType.GREEN,
    "Y": PieceType.YELLOW,
    "P": PieceType.PURPLE,
    "O": PieceType.ORANGE,
    "X": PieceType.AREA_BOMB,
    "S": PieceType.CROSS_CLEAR,
}


def background_letter(row: int, col: int) -> str:
    return BACKGROUND[(row + 2 * col) % len(BACKGROUND)]


def make_board(overrides: Dict[Tuple[int, int], str] | None = None, rows: int = 8, cols: int = 8) -> Board:
    """Build a full board on the match-free background, then apply letter overrides."""
    overrides = overrides or {}
    board = Board.empty(rows, cols)
    ids = itertools.count(1000)
    for row in range(rows):
        for col in range(cols):
            letter = overrides.get((row, col), background_letter(row, col))
            board.cells[row][col] = Piece(id=next(ids), type=LETTERS[letter], row=row, col=col)
    return board


def letters_of(board: Board) -> list[str]:
    reverse = {piece_type: letter for letter, piece_type in LETTERS.items()}
    return [
        "".join(reverse[piece.type] if piece is not None else "." for piece in line)
        for line in board.cells
    ]


class ScriptedRandom(random.Random):
    """Random source whose choices follow a fixed cycle.

    ``choice`` returns the next scripted value when the sequence offers it and
    the sequence's first element otherwise; ``random`` always returns ``roll``.
    """

    def __init__(self, choices: Iterable[PieceType] = (PieceType.PURPLE, PieceType.ORANGE), roll: float = 0.99):
        super().__init__(0)
        self._script = itertools.cycle(list(choices))
        self.roll = roll

    def choice(self, seq: Sequence):
        value = next(self._script)
        return value if value in seq else seq[0]

    def random(self) -> float:
        return self.roll


class EventRecorder:
    """Collects payloads emitted for the given event names, in order."""

    def __init__(self, bus: EventBus, *names: str):
        self.events: list[tuple[str, dict]] = []
        for name in names:
            bus.subscribe(name, self._handler_for(name))

    def _handler_for(self, name: str):
        def handler(sender, **payload):
            self.events.append((name, payload))
        return handler

    def of(self, name: str) -> list[dict]:
        return [payload for event, payload in self.events if event == name]

    def names(self) -> list[str]:
        return [event for event, _ in self.events]


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def build_game(board: Board | None = None, *, rng: random.Random | None = None, clear_duration: float = 0.0,
               drop_duration: float = 0.0, high_score_store=None, **state_overrides):
    """Wire a world with every gameplay system, optionally seeded with a board and state.

    Animations default to zero length so cascades resolve inside the emit.
    Returns ``(bus, world, systems)`` with systems keyed by short name.
    """
    from dataclasses import replace

    from chainburst.systems.animation import AnimationSystem
    from chainburst.systems.board import BoardSystem
    from chainburst.systems.game_flow_system import GameFlowSystem
    from chainburst.systems.game_rules import new_game_state
    from chainburst.systems.high_score_system import HighScoreSystem
    from chainburst.systems.match_resolution import MatchResolutionSystem
    from chainburst.systems.notification_system import NotificationSystem
    from chainburst.systems.progression_system import ProgressionSystem
    from chainburst.systems.scoring_system import ScoringSystem
    from chainburst.systems.swap import SwapSystem
    from chainburst.utils.game_state import set_board, set_game_state
    from chainburst.world import create_world

    bus = EventBus()
    world = create_world(bus, rng=rng or ScriptedRandom())
    systems = {
        'high_score': HighScoreSystem(world, bus, store=high_score_store or MemoryHighScoreStore()),
        'game_flow': GameFlowSystem(world, bus),
        'scoring': ScoringSystem(world, bus),
        'progression': ProgressionSystem(world, bus),
        'notifications': NotificationSystem(world, bus),
        'animation': AnimationSystem(world, bus, clear_duration=clear_duration, drop_duration=drop_duration),
        'board': BoardSystem(world, bus),
        'swap': SwapSystem(world, bus),
        'match_resolution': MatchResolutionSystem(world, bus),
    }
    if board is not None:
        set_board(world, board)
        set_game_state(world, replace(new_game_state(), **state_overrides))
    return bus, world, systems


class MemoryHighScoreStore:
    def __init__(self, value: int = 0):
        self.value = value
        self.saved: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.saved.append(score)
        self.value = score
