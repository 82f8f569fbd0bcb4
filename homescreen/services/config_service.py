# homescreen/services/config_service.py
import json
from pathlib import Path
from typing import Any

from homescreen.core.constants import (
    DEFAULT_TICK_INTERVAL_MS,
    MAX_TICK_INTERVAL_MS,
    MIN_TICK_INTERVAL_MS,
)
from homescreen.models.config_model import AppConfig
from homescreen.models.home_state import DisplayMode
from homescreen.utils.logger_utils import logger


class ConfigSaveError(IOError):
    pass


class ConfigService:
    """Manages all read/write operations for the config.json file."""

    def __init__(self, config_path: Path):
        self.config_path = config_path

    def load_config(self) -> AppConfig:
        """
        Loads user preferences from config.json.
        A missing or unreadable file yields the default AppConfig.
        """
        if not self.config_path.exists():
            logger.warning(
                f"Config file not found at '{self.config_path}'. Returning default config."
            )
            return AppConfig()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            if not isinstance(data, dict):
                logger.error("config.json root is not an object. Returning default config.")
                return AppConfig()

            # --- Parse [settings] object ---
            settings = data.get("settings", {})
            display_mode = self._parse_display_mode(settings.get("display_mode"))
            last_player_id = settings.get("last_player_id")
            if last_player_id is not None and not isinstance(last_player_id, int):
                logger.warning(f"last_player_id '{last_player_id}' is not an integer. Ignoring.")
                last_player_id = None

            # --- Parse [clock] object ---
            clock = data.get("clock", {})
            tick_interval_ms = self._parse_tick_interval(
                clock.get("tick_interval_ms", DEFAULT_TICK_INTERVAL_MS)
            )

            # --- Parse [ui] object ---
            ui_prefs = data.get("ui", {})
            geometry = self._parse_geometry(ui_prefs.get("window_geometry"))

            logger.info("Successfully loaded configuration from config.json.")
            return AppConfig(
                display_mode=display_mode,
                last_player_id=last_player_id,
                tick_interval_ms=tick_interval_ms,
                window_geometry=geometry,
            )

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config.json: {e}. Returning default config.")
            return AppConfig()
        except Exception as e:
            logger.critical(f"An unexpected error occurred while loading config: {e}", exc_info=True)
            return AppConfig()

    def save_setting(self, key: str, value: Any, section: str = "settings"):
        """
        Saves a single key-value pair to config.json.
        Reads the entire file, updates one value, and writes it back.
        A root or section that is not an object is replaced by an empty one.
        """
        section = section.lower()

        try:
            config_data: dict = {}
            if self.config_path.exists():
                with open(self.config_path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    config_data = loaded
                else:
                    logger.warning("config.json root is not an object. Rewriting it.")

            section_data = config_data.get(section)
            if not isinstance(section_data, dict):
                section_data = {}
                config_data[section] = section_data
            section_data[key] = value

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config_data, f, indent=4)

            logger.info(f"Saved setting: [{section}] {key} = {value}")

        # ValueError covers JSONDecodeError and UnicodeDecodeError
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Failed to save setting '{key}' to config file: {e}")
            raise ConfigSaveError(f"Failed to update setting '{key}': {e}") from e

    # --- Private Helpers ---

    def _parse_geometry(self, raw: Any) -> tuple[int, int, int, int] | None:
        if raw is None:
            return None
        if not isinstance(raw, list) or len(raw) != 4:
            logger.warning(f"window_geometry {raw!r} is not a list of 4 values. Ignoring.")
            return None
        if any(isinstance(v, bool) or not isinstance(v, int) for v in raw):
            logger.warning(f"window_geometry {raw!r} must hold integers only. Ignoring.")
            return None
        return tuple(raw)

    def _parse_display_mode(self, raw: Any) -> DisplayMode:
        if raw is None:
            return DisplayMode.DAY
        try:
            return DisplayMode(str(raw).lower())
        except ValueError:
            logger.warning(f"Unknown display_mode '{raw}'. Falling back to day.")
            return DisplayMode.DAY

    def _parse_tick_interval(self, raw: Any) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            logger.warning(f"tick_interval_ms '{raw}' is not an integer. Using default.")
            return DEFAULT_TICK_INTERVAL_MS
        if not MIN_TICK_INTERVAL_MS <= raw <= MAX_TICK_INTERVAL_MS:
            logger.warning(
                f"tick_interval_ms {raw} is outside [{MIN_TICK_INTERVAL_MS}, "
                f"{MAX_TICK_INTERVAL_MS}]. Using default {DEFAULT_TICK_INTERVAL_MS}."
            )
            return DEFAULT_TICK_INTERVAL_MS
        return raw
