# homescreen/models/home_state.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Optional, TYPE_CHECKING

from homescreen.core.constants import EPOCH

if TYPE_CHECKING:
    from .game_model import Game
    from .player_model import Player


class DisplayMode(Enum):
    DAY = "day"
    NIGHT = "night"

    def toggled(self) -> DisplayMode:
        return DisplayMode.NIGHT if self is DisplayMode.DAY else DisplayMode.DAY


@dataclass(frozen=True)
class HomeState:
    """
    A complete snapshot of the home screen. Immutable.
    Every transition produces a new instance; nothing mutates in place.
    """

    players: tuple[Player, ...] = ()
    games: tuple[Game, ...] = ()
    mode: DisplayMode = DisplayMode.DAY

    # --- Selection ---
    selected_player: Optional[Player] = None
    selected_game: Optional[Game] = None

    # --- Clock ---
    now: datetime = EPOCH
    time_zone: tzinfo = timezone.utc

    @property
    def local_now(self) -> datetime:
        """The current instant expressed in the resolved time zone."""
        return self.now.astimezone(self.time_zone)

    def find_game(self, game_id: int) -> Optional[Game]:
        return next((g for g in self.games if g.id == game_id), None)

    def find_player(self, player_id: int) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)
