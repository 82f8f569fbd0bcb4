# homescreen/services/catalog_service.py
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from homescreen.core.constants import DEFAULT_GAMES, DEFAULT_PLAYERS
from homescreen.models.game_model import Game
from homescreen.models.player_model import Player
from homescreen.utils.logger_utils import logger

T = TypeVar("T", Player, Game)


@dataclass(frozen=True)
class Catalog:
    """The static player and game lists the home screen starts from."""

    players: list[Player] = field(default_factory=list)
    games: list[Game] = field(default_factory=list)


class CatalogService:
    """Loads the player and game catalogs from catalog.json."""

    def __init__(self, catalog_path: Path):
        self.catalog_path = catalog_path

    @staticmethod
    def builtin_catalog() -> Catalog:
        """The catalog shipped with the application."""
        return Catalog(
            players=[Player(**p) for p in DEFAULT_PLAYERS],
            games=[Game(**g) for g in DEFAULT_GAMES],
        )

    def load_catalog(self) -> Catalog:
        """
        Reads catalog.json. Falls back to the built-in catalog when the file is
        missing or cannot be parsed. Malformed entries are skipped.
        """
        if not self.catalog_path.exists():
            logger.info(
                f"No catalog file at '{self.catalog_path}'. Using the built-in catalog."
            )
            return self.builtin_catalog()

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read catalog.json: {e}. Using the built-in catalog.")
            return self.builtin_catalog()

        if not isinstance(data, dict):
            logger.error("catalog.json root is not an object. Using the built-in catalog.")
            return self.builtin_catalog()

        players = self._parse_entries(data.get("players", []), "player", self._player_from_dict)
        games = self._parse_entries(data.get("games", []), "game", self._game_from_dict)

        logger.info(f"Loaded catalog: {len(players)} players, {len(games)} games.")
        return Catalog(players=players, games=games)

    # --- Private Helpers ---

    def _parse_entries(
        self, entries: Any, kind: str, factory: Callable[[dict], T]
    ) -> list[T]:
        if not isinstance(entries, list):
            logger.error(f"'{kind}s' in catalog.json is not a list. Ignoring it.")
            return []

        parsed: list[T] = []
        seen_ids: set[int] = set()
        for entry in entries:
            try:
                item = factory(entry)
            except (TypeError, KeyError, ValueError) as e:
                logger.error(f"Malformed {kind} entry in catalog.json: {entry}. Error: {e}. Skipping.")
                continue

            if item.id in seen_ids:
                logger.warning(f"Duplicate {kind} id {item.id} in catalog.json. Keeping the first one.")
                continue
            seen_ids.add(item.id)
            parsed.append(item)
        return parsed

    @staticmethod
    def _require_int(value: Any, name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{name}' must be an integer, got {value!r}")
        return value

    def _player_from_dict(self, entry: dict) -> Player:
        return Player(
            id=self._require_int(entry["id"], "id"),
            name=str(entry["name"]),
            icon=str(entry.get("icon", "")),
        )

    def _game_from_dict(self, entry: dict) -> Game:
        return Game(
            id=self._require_int(entry["id"], "id"),
            title=str(entry["title"]),
            icon=str(entry.get("icon", "")),
        )
