from chainburst.events.bus import (EVENT_GAME_START_REQUEST, EVENT_GAME_STARTED, EVENT_GAME_RESET_REQUEST,
                                   EVENT_GAME_RESET, EVENT_BOARD_CHANGED, EVENT_NEW_HIGH_SCORE)
from chainburst.utils.game_state import get_board, get_game_state, get_notification_feed
from helpers import EventRecorder, MemoryHighScoreStore, build_game, make_board


def test_world_starts_idle_with_empty_board():
    bus, world, _ = build_game()
    state = get_game_state(world)
    assert not state.playing
    assert list(get_board(world).pieces()) == []


def test_start_request_fills_board_and_resets_counters():
    bus, world, _ = build_game(high_score_store=MemoryHighScoreStore(700))
    rec = EventRecorder(bus, EVENT_GAME_STARTED, EVENT_BOARD_CHANGED)
    bus.emit(EVENT_GAME_START_REQUEST)
    state = get_game_state(world)
    assert state.playing
    assert (state.score, state.level, state.moves, state.target, state.combo) == (0, 1, 30, 1000, 0)
    assert state.high_score == 700
    assert get_board(world).is_populated()
    assert rec.of(EVENT_GAME_STARTED) == [{'level': 1, 'target': 1000, 'moves': 30}]
    assert rec.of(EVENT_BOARD_CHANGED)[0]['reason'] == 'new_game'


def test_start_request_replaces_a_game_in_progress():
    bus, world, _ = build_game(make_board(), score=600, moves=3, combo=2)
    bus.emit(EVENT_GAME_START_REQUEST)
    state = get_game_state(world)
    assert (state.score, state.moves, state.combo) == (0, 30, 0)


def test_reset_request_stops_play_and_clears_board():
    bus, world, _ = build_game(make_board(), score=600, high_score=900)
    rec = EventRecorder(bus, EVENT_GAME_RESET)
    bus.emit(EVENT_GAME_RESET_REQUEST)
    state = get_game_state(world)
    assert not state.playing
    assert state.score == 0 and state.high_score == 900
    assert list(get_board(world).pieces()) == []
    assert len(rec.of(EVENT_GAME_RESET)) == 1


def test_requests_ignored_while_resolving():
    board = make_board()
    bus, world, systems = build_game(board, resolving=True, score=400)
    assert not systems['game_flow'].start_game()
    assert not systems['game_flow'].reset_game()
    assert get_game_state(world).score == 400
    assert get_board(world) is board


def test_new_game_clears_notifications():
    bus, world, _ = build_game(make_board())
    bus.emit(EVENT_NEW_HIGH_SCORE, score=100)
    assert get_notification_feed(world).latest() is not None
    bus.emit(EVENT_GAME_START_REQUEST)
    assert get_notification_feed(world).latest() is None
