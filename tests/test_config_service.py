# tests/test_config_service.py
import json

import pytest

from homescreen.core.constants import DEFAULT_TICK_INTERVAL_MS
from homescreen.models import AppConfig, DisplayMode
from homescreen.services.config_service import ConfigSaveError, ConfigService


@pytest.fixture()
def config_path(tmp_path):
    return tmp_path / "config.json"


def write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_file_returns_defaults(config_path):
    assert ConfigService(config_path).load_config() == AppConfig()


def test_broken_json_returns_defaults(config_path):
    config_path.write_text("{not json", encoding="utf-8")
    assert ConfigService(config_path).load_config() == AppConfig()


def test_loads_all_sections(config_path):
    write(
        config_path,
        {
            "settings": {"display_mode": "night", "last_player_id": 3},
            "clock": {"tick_interval_ms": 1000},
            "ui": {"window_geometry": [10, 20, 1280, 720]},
        },
    )
    config = ConfigService(config_path).load_config()

    assert config.display_mode is DisplayMode.NIGHT
    assert config.last_player_id == 3
    assert config.tick_interval_ms == 1000
    assert config.window_geometry == (10, 20, 1280, 720)


@pytest.mark.parametrize("interval", [0, 5, 120_000, "fast", True])
def test_invalid_tick_interval_falls_back_to_default(config_path, interval):
    write(config_path, {"clock": {"tick_interval_ms": interval}})
    assert ConfigService(config_path).load_config().tick_interval_ms == DEFAULT_TICK_INTERVAL_MS


def test_unknown_display_mode_falls_back_to_day(config_path):
    write(config_path, {"settings": {"display_mode": "dusk"}})
    assert ConfigService(config_path).load_config().display_mode is DisplayMode.DAY


def test_bad_geometry_is_ignored(config_path):
    write(config_path, {"ui": {"window_geometry": [1, 2, 3]}})
    assert ConfigService(config_path).load_config().window_geometry is None


def test_save_setting_updates_one_key(config_path):
    write(config_path, {"settings": {"display_mode": "day", "last_player_id": 1}})
    service = ConfigService(config_path)

    service.save_setting("display_mode", "night")

    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data["settings"] == {"display_mode": "night", "last_player_id": 1}


def test_save_setting_creates_missing_file_and_section(config_path):
    ConfigService(config_path).save_setting("window_geometry", [1, 2, 3, 4], section="UI")
    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data["ui"]["window_geometry"] == [1, 2, 3, 4]


def test_save_setting_raises_on_unwritable_path(tmp_path):
    service = ConfigService(tmp_path / "missing_dir" / "config.json")
    with pytest.raises(ConfigSaveError):
        service.save_setting("display_mode", "night")


def test_undecodable_file_returns_defaults(config_path):
    config_path.write_bytes(b'{"settings": {"display_mode": "\xff\xfe"}}')
    assert ConfigService(config_path).load_config() == AppConfig()


def test_null_settings_section_returns_defaults(config_path):
    write(config_path, {"settings": None})
    assert ConfigService(config_path).load_config() == AppConfig()


@pytest.mark.parametrize(
    "geometry",
    [["a", "b", "c", "d"], [1, 2, 3.5, 4], [True, 0, 800, 600], "1,2,3,4", {"x": 1}],
)
def test_non_integer_geometry_is_ignored(config_path, geometry):
    write(config_path, {"ui": {"window_geometry": geometry}})
    assert ConfigService(config_path).load_config().window_geometry is None


def test_save_setting_replaces_a_null_section(config_path):
    write(config_path, {"settings": None, "clock": {"tick_interval_ms": 100}})

    ConfigService(config_path).save_setting("display_mode", "night")

    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data["settings"] == {"display_mode": "night"}
    assert data["clock"] == {"tick_interval_ms": 100}


def test_save_setting_replaces_a_list_root(config_path):
    write(config_path, [1, 2, 3])

    ConfigService(config_path).save_setting("last_player_id", 2)

    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data == {"settings": {"last_player_id": 2}}


@pytest.mark.parametrize("content", [b"{broken", b'{"settings": "\xff"}'])
def test_save_setting_wraps_unreadable_files(config_path, content):
    config_path.write_bytes(content)
    with pytest.raises(ConfigSaveError):
        ConfigService(config_path).save_setting("display_mode", "night")
