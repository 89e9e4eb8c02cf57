import random

from esper import World
from chainburst.events.bus import EventBus
from chainburst.components.board import Board
from chainburst.components.game_state import GameState
from chainburst.components.notification_feed import NotificationFeed
from chainburst.components.piece_palette import PiecePalette
from chainburst.constants import GRID_COLS, GRID_ROWS, STARTING_LEVEL
from chainburst.factories.pieces import PieceFactory


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    palette: PiecePalette | None = None,
    factory: PieceFactory | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    # Global game state resource; not playing until a game is started.
    world.create_entity(GameState(level=STARTING_LEVEL), NotificationFeed())

    # Board entity starts empty and is replaced wholesale on every new game.
    world.create_entity(Board.empty(rows, cols))

    # Single palette entity with canonical piece definitions.
    palette = palette or PiecePalette()
    world.create_entity(palette)

    setattr(
        world,
        "piece_factory",
        factory or PieceFactory(world.random, ordinary=palette.spawnable_types(), specials=palette.specials),
    )
    return world
