import random

from chainburst.components.piece import ORDINARY_TYPES, PieceType
from chainburst.factories.pieces import PieceFactory, initialize_board
from helpers import ScriptedRandom


def test_low_levels_never_spawn_specials():
    for level in (1, 2, 3):
        factory = PieceFactory(ScriptedRandom([PieceType.PURPLE, PieceType.CROSS_CLEAR], roll=0.0))
        piece = factory.create(0, 0, level)
        assert piece.type is PieceType.PURPLE, f"level {level} spawned {piece.type}"


def test_special_replaces_the_colour_above_level_three():
    factory = PieceFactory(ScriptedRandom([PieceType.PURPLE, PieceType.CROSS_CLEAR], roll=0.0))
    piece = factory.create(2, 5, 4)
    assert piece.type is PieceType.CROSS_CLEAR
    assert piece.position == (2, 5)
    assert not piece.is_matched and not piece.is_animating


def test_roll_above_chance_keeps_ordinary_piece():
    factory = PieceFactory(ScriptedRandom([PieceType.ORANGE], roll=0.05))
    assert factory.create(0, 0, 10).type is PieceType.ORANGE


def test_ids_are_unique_and_increasing():
    factory = PieceFactory(random.Random(3))
    ids = [factory.create(0, c, 1).id for c in range(20)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 20


def test_initialize_board_fills_every_slot_with_matching_positions():
    board = initialize_board(PieceFactory(random.Random(11)), level=1)
    assert board.is_populated()
    for row, col in board.positions():
        piece = board.at(row, col)
        assert piece.position == (row, col)
        assert piece.type in ORDINARY_TYPES
    assert len({piece.id for piece in board.pieces()}) == 64


def test_initialize_board_custom_size():
    board = initialize_board(PieceFactory(random.Random(1)), level=1, rows=4, cols=6)
    assert (board.rows, board.cols) == (4, 6)
    assert len(list(board.pieces())) == 24


def test_same_seed_gives_same_board():
    a = initialize_board(PieceFactory(random.Random(42)), level=5)
    b = initialize_board(PieceFactory(random.Random(42)), level=5)
    assert [p.type for p in a.pieces()] == [p.type for p in b.pieces()]
