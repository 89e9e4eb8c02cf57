from __future__ import annotations

from esper import World

from chainburst.components.board import Board
from chainburst.components.game_state import GameState
from chainburst.components.notification_feed import NotificationFeed
from chainburst.components.piece_palette import PiecePalette
from chainburst.factories.pieces import PieceFactory


def _entity_for(world: World, component_type) -> int:
    for entity, _ in world.get_component(component_type):
        return entity
    raise RuntimeError(f"{component_type.__name__} resource not found")


def get_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    for _, state in world.get_component(GameState):
        return state
    state = GameState()
    world.create_entity(state)
    return state


def set_game_state(world: World, state: GameState) -> GameState:
    """Replace the GameState component with a new value."""
    try:
        entity = _entity_for(world, GameState)
    except RuntimeError:
        world.create_entity(state)
        return state
    world.add_component(entity, state)
    return state


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board resource not found")


def set_board(world: World, board: Board) -> Board:
    """Swap in a new board value; the old one stays valid for whoever holds it."""
    world.add_component(_entity_for(world, Board), board)
    return board


def get_palette(world: World) -> PiecePalette:
    for _, palette in world.get_component(PiecePalette):
        return palette
    raise RuntimeError("PiecePalette definitions not found")


def get_notification_feed(world: World) -> NotificationFeed | None:
    for _, feed in world.get_component(NotificationFeed):
        return feed
    return None


def get_piece_factory(world: World) -> PieceFactory:
    factory = getattr(world, "piece_factory", None)
    if factory is None:
        palette = get_palette(world)
        factory = PieceFactory(
            getattr(world, "random", None),
            ordinary=palette.spawnable_types(),
            specials=palette.specials,
        )
        setattr(world, "piece_factory", factory)
    return factory
