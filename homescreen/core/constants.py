# homescreen/core/constants.py
from datetime import datetime, timezone

# --- Application Info ---
APP_NAME: str = "Console Home"
ORG_NAME: str = "homescreen"
APP_VERSION: str = "0.1.0"

# --- File & Directory Names ---
CONFIG_FILE_NAME: str = "config.json"
CATALOG_FILE_NAME: str = "catalog.json"
CACHE_DIR_NAME: str = "cache"
LOG_DIR_NAME: str = "logs"

# --- Clock ---
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Period of the clock driver. Also feeds the hover pulse, which needs sub-second ticks.
DEFAULT_TICK_INTERVAL_MS: int = 60
MIN_TICK_INTERVAL_MS: int = 16
MAX_TICK_INTERVAL_MS: int = 60_000
CLOCK_FORMAT: str = "%H:%M"

# --- Hover pulse (milliseconds within a second) ---
HOVER_RAMP_START_MS: int = 300
HOVER_RAMP_END_MS: int = 800
# Granularity of hover restyles; each step rebuilds the window stylesheet once
HOVER_ALPHA_STEP: float = 0.1

# --- Icons ---
ICON_CACHE_DIR_NAME: str = "icons"
ICON_CACHE_MAX_SIZE: int = 64
AVATAR_SIZE: int = 72
GAME_TILE_SIZE: int = 180
QUICK_ACTION_SIZE: int = 56

# --- Built-in catalog, used when no catalog file is present ---
DEFAULT_PLAYERS: list[dict] = [
    {"id": 1, "name": "Mário", "icon": "assets/players/mario.png"},
    {"id": 2, "name": "Zoë", "icon": "assets/players/zoe.png"},
    {"id": 3, "name": "Łukasz", "icon": "assets/players/lukasz.png"},
    {"id": 4, "name": "Søren", "icon": "assets/players/soren.png"},
]
DEFAULT_GAMES: list[dict] = [
    {"id": 2, "title": "Mario Kart 8 Deluxe", "icon": "assets/games/mario_kart.png"},
    {"id": 44, "title": "The Legend of Zelda: Breath of the Wild", "icon": "assets/games/zelda_botw.png"},
    {"id": 7, "title": "Super Smash Bros. Ultimate", "icon": "assets/games/smash.png"},
    {"id": 13, "title": "Animal Crossing: New Horizons", "icon": "assets/games/animal_crossing.png"},
    {"id": 21, "title": "Splatoon 3", "icon": "assets/games/splatoon3.png"},
    {"id": 30, "title": "Metroid Dread", "icon": "assets/games/metroid_dread.png"},
]

# --- Quick actions: (key, label) ---
QUICK_ACTIONS: list[tuple[str, str]] = [
    ("news", "News"),
    ("shop", "Shop"),
    ("album", "Album"),
    ("controllers", "Controllers"),
    ("theme", "Day / Night"),
    ("settings", "System Settings"),
    ("power", "Sleep Mode"),
]
