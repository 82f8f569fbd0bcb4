# tests/conftest.py
import os
from datetime import datetime, timedelta

import pytest

# Widgets and pixmaps need a platform plugin; tests never open a real display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from homescreen.core.constants import EPOCH  # noqa: E402
from homescreen.models.game_model import Game  # noqa: E402
from homescreen.models.player_model import Player  # noqa: E402
from homescreen.utils.logger_utils import set_log_directory  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp(tmp_path_factory):
    set_log_directory(tmp_path_factory.mktemp("logs"))
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def players():
    return [
        Player(id=1, name="Mário", icon="assets/players/mario.png"),
        Player(id=2, name="Zoë", icon="assets/players/zoe.png"),
        Player(id=3, name="Łukasz", icon=""),
    ]


@pytest.fixture()
def games():
    return [
        Game(id=2, title="Mario Kart 8 Deluxe", icon="assets/games/mario_kart.png"),
        Game(id=44, title="Breath of the Wild", icon="assets/games/zelda_botw.png"),
    ]


def at_ms(ms: int) -> datetime:
    """An aware instant `ms` milliseconds after the epoch."""
    return EPOCH + timedelta(milliseconds=ms)
