from .player_model import Player
from .game_model import Game
from .home_state import DisplayMode, HomeState
from .config_model import AppConfig
from .actions import Action, SelectGame, SelectPlayer, SetTimeZone, Tick, ToggleTheme

__all__ = [
    "Player",
    "Game",
    "DisplayMode",
    "HomeState",
    "AppConfig",
    "Action",
    "SelectGame",
    "SelectPlayer",
    "SetTimeZone",
    "Tick",
    "ToggleTheme",
]
