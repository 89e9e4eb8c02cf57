from chainburst.events.bus import (EVENT_TILE_CLICK, EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED,
                                   EVENT_TILE_SWAP_REQUEST, EVENT_MOUSE_PRESS)
from chainburst.constants import MOUSE_BUTTON_RIGHT
from chainburst.utils.game_state import get_game_state
from helpers import EventRecorder, build_game, make_board


def test_first_click_selects():
    bus, world, systems = build_game(make_board())
    rec = EventRecorder(bus, EVENT_TILE_SELECTED)
    bus.emit(EVENT_TILE_CLICK, row=2, col=3)
    assert systems['board'].selected == (2, 3)
    assert rec.of(EVENT_TILE_SELECTED) == [{'row': 2, 'col': 3}]


def test_selection_clears_on_swap_request():
    bus, world, systems = build_game(make_board())
    rec = EventRecorder(bus, EVENT_TILE_DESELECTED, EVENT_TILE_SWAP_REQUEST)
    bus.emit(EVENT_TILE_CLICK, row=0, col=0)
    bus.emit(EVENT_TILE_CLICK, row=0, col=1)
    assert systems['board'].selected is None
    assert rec.names() == [EVENT_TILE_DESELECTED, EVENT_TILE_SWAP_REQUEST]
    assert rec.of(EVENT_TILE_SWAP_REQUEST) == [{'src': (0, 0), 'dst': (0, 1)}]


def test_non_adjacent_second_click_clears_without_spending_a_move():
    bus, world, systems = build_game(make_board())
    bus.emit(EVENT_TILE_CLICK, row=0, col=0)
    bus.emit(EVENT_TILE_CLICK, row=4, col=4)
    assert systems['board'].selected is None
    assert get_game_state(world).moves == 30


def test_right_click_deselects():
    bus, world, systems = build_game(make_board())
    rec = EventRecorder(bus, EVENT_TILE_DESELECTED)
    bus.emit(EVENT_TILE_CLICK, row=1, col=1)
    bus.emit(EVENT_MOUSE_PRESS, x=0, y=0, button=MOUSE_BUTTON_RIGHT)
    assert systems['board'].selected is None
    assert rec.of(EVENT_TILE_DESELECTED)[0]['reason'] == 'right_click'


def test_clicks_ignored_when_not_playing():
    bus, world, systems = build_game(make_board(), playing=False)
    bus.emit(EVENT_TILE_CLICK, row=1, col=1)
    assert systems['board'].selected is None


def test_clicks_ignored_while_resolving():
    bus, world, systems = build_game(make_board(), resolving=True)
    bus.emit(EVENT_TILE_CLICK, row=1, col=1)
    assert systems['board'].selected is None


def test_out_of_bounds_click_ignored():
    bus, world, systems = build_game(make_board())
    bus.emit(EVENT_TILE_CLICK, row=8, col=0)
    assert systems['board'].selected is None
