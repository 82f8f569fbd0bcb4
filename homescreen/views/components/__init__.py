from .player_avatar_widget import PlayerAvatarWidget
from .game_tile_widget import GameTileWidget
from .quick_actions_widget import QuickActionButton, QuickActionsWidget
from .status_bar_widget import StatusBarWidget

__all__ = [
    "PlayerAvatarWidget",
    "GameTileWidget",
    "QuickActionButton",
    "QuickActionsWidget",
    "StatusBarWidget",
]
