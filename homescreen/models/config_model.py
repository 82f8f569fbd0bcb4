# homescreen/models/config_model.py
from __future__ import annotations
from dataclasses import dataclass

from homescreen.core.constants import DEFAULT_TICK_INTERVAL_MS
from .home_state import DisplayMode


@dataclass(frozen=True)
class AppConfig:
    """Holds the application's user preferences. Immutable."""

    # --- Last Session State ---
    display_mode: DisplayMode = DisplayMode.DAY
    last_player_id: int | None = None

    # --- Clock ---
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS

    # --- UI Preferences ---
    window_geometry: tuple[int, int, int, int] | None = None
