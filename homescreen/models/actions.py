# homescreen/models/actions.py
# Discrete user and timer actions understood by the home screen dispatcher.
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .game_model import Game
    from .player_model import Player


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class SelectGame:
    game: Game


@dataclass(frozen=True)
class SelectPlayer:
    player: Player


@dataclass(frozen=True)
class Tick:
    instant: datetime


@dataclass(frozen=True)
class SetTimeZone:
    time_zone: tzinfo


Action = Union[ToggleTheme, SelectGame, SelectPlayer, Tick, SetTimeZone]
