"""High score persistence."""
from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Protocol

from esper import World

from chainburst.events.bus import EVENT_NEW_HIGH_SCORE, EventBus
from chainburst.utils.game_state import get_game_state, set_game_state

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load(self) -> int:
        ...

    def save(self, score: int) -> None:
        ...


class JsonHighScoreStore:
    """Keeps the best score as ``{"high_score": n}`` in a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return 0
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("High score file %s is unreadable; starting from 0", self.path)
            return 0
        try:
            value = int(payload.get("high_score", 0))
        except (AttributeError, TypeError, ValueError, OverflowError):
            logger.warning("High score file %s holds no usable score; starting from 0", self.path)
            return 0
        return max(0, value)

    def save(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump({"high_score": int(score)}, handle, indent=2)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


class HighScoreSystem:
    """Loads the stored best score at start-up and saves every new one."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        store: HighScoreStore | None = None,
        save_path: Path | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        if store is None:
            store = JsonHighScoreStore(Path(save_path) if save_path is not None else self._default_save_path())
        self.store = store
        self.event_bus.subscribe(EVENT_NEW_HIGH_SCORE, self._on_new_high_score)
        self.load()

    @staticmethod
    def _default_save_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "high_score.json"

    def load(self) -> int:
        stored = self.store.load()
        state = get_game_state(self.world)
        if stored > state.high_score:
            set_game_state(self.world, replace(state, high_score=stored))
        return stored

    def _on_new_high_score(self, sender, **payload) -> None:
        score = payload.get("score")
        if score is None:
            score = get_game_state(self.world).high_score
        self.store.save(int(score))
