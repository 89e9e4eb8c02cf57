"""High-level coordinator for starting and resetting games."""
from __future__ import annotations

import logging

from esper import World

from chainburst.components.board import Board
from chainburst.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_GAME_RESET,
    EVENT_GAME_RESET_REQUEST,
    EVENT_GAME_START_REQUEST,
    EVENT_GAME_STARTED,
    EventBus,
)
from chainburst.factories.pieces import initialize_board
from chainburst.systems.game_rules import new_game_state, reset_game_state
from chainburst.utils.game_state import (
    get_board,
    get_game_state,
    get_notification_feed,
    get_piece_factory,
    set_board,
    set_game_state,
)

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Starts fresh games and resets back to the idle screen.

    A new game replaces the board wholesale with random pieces and resets
    every counter except the high score.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_GAME_RESET_REQUEST, self._on_reset_request)

    def _on_start_request(self, sender, **payload) -> None:
        self.start_game()

    def _on_reset_request(self, sender, **payload) -> None:
        self.reset_game()

    def start_game(self) -> bool:
        current = get_game_state(self.world)
        if current.resolving:
            logger.debug("Ignoring new game request while a cascade is resolving")
            return False
        state = set_game_state(self.world, new_game_state(current.high_score))
        previous = get_board(self.world)
        board = set_board(
            self.world,
            initialize_board(get_piece_factory(self.world), state.level, previous.rows, previous.cols),
        )
        self._clear_notifications()
        logger.info("New game started (target %d, %d moves)", state.target, state.moves)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            level=state.level,
            target=state.target,
            moves=state.moves,
        )
        self.event_bus.emit(
            EVENT_BOARD_CHANGED,
            reason="new_game",
            board=board,
            selected=None,
            combo=state.combo,
        )
        return True

    def reset_game(self) -> bool:
        current = get_game_state(self.world)
        if current.resolving:
            logger.debug("Ignoring reset request while a cascade is resolving")
            return False
        state = set_game_state(self.world, reset_game_state(current.high_score))
        previous = get_board(self.world)
        board = set_board(self.world, Board.empty(previous.rows, previous.cols))
        self._clear_notifications()
        self.event_bus.emit(EVENT_GAME_RESET)
        self.event_bus.emit(
            EVENT_BOARD_CHANGED,
            reason="reset",
            board=board,
            selected=None,
            combo=state.combo,
        )
        return True

    def _clear_notifications(self) -> None:
        feed = get_notification_feed(self.world)
        if feed is not None:
            feed.clear()
