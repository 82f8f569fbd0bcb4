# homescreen/viewmodels/home_vm.py

from datetime import tzinfo
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from homescreen.core.constants import CLOCK_FORMAT, HOVER_ALPHA_STEP, QUICK_ACTIONS
from homescreen.core.reducer import initial_state, reduce
from homescreen.core.theme import StyleTable, hover_alpha, resolve_style
from homescreen.models.actions import SelectGame, SelectPlayer, SetTimeZone, Tick, ToggleTheme
from homescreen.models.config_model import AppConfig
from homescreen.models.home_state import DisplayMode, HomeState
from homescreen.services.catalog_service import CatalogService
from homescreen.services.clock_service import ClockService
from homescreen.services.config_service import ConfigSaveError, ConfigService
from homescreen.utils.logger_utils import logger


class HomeViewModel(QObject):
    """
    Owns the home screen state. Every user or timer action goes through
    dispatch(), which replaces the snapshot and tells the view what changed.
    """

    # ---Signals for the View ---
    state_changed = pyqtSignal(object)  # HomeState
    theme_changed = pyqtSignal(object)  # DisplayMode
    style_updated = pyqtSignal(object)  # StyleTable
    player_list_updated = pyqtSignal(list)  # list[dict]
    game_list_updated = pyqtSignal(list)  # list[dict]
    selected_game_changed = pyqtSignal(object)  # dict or None
    clock_text_changed = pyqtSignal(str)
    toast_requested = pyqtSignal(str, str)  # message, level

    def __init__(
        self,
        config_service: ConfigService,
        catalog_service: CatalogService,
        clock_service: ClockService,
    ):
        super().__init__()

        # ---Injected Services ---
        self.config_service = config_service
        self.catalog_service = catalog_service
        self.clock_service = clock_service

        # ---Internal State ---
        self.config: AppConfig = AppConfig()
        self.state: HomeState = HomeState()
        self._alpha: float = 1.0
        self._clock_text: str = ""

        self.clock_service.ticked.connect(lambda instant: self.dispatch(Tick(instant)))
        self.clock_service.time_zone_resolved.connect(self._on_time_zone_resolved)

    # ---Initialization ---

    def start(self):
        """Loads preferences and catalog, publishes the first snapshot, starts the clock."""
        logger.info("Loading configuration and catalog...")
        self.config = self.config_service.load_config()
        catalog = self.catalog_service.load_catalog()

        self.state = initial_state(
            players=catalog.players,
            games=catalog.games,
            mode=self.config.display_mode,
            selected_player_id=self.config.last_player_id,
        )
        self._publish_all()

        self.clock_service.set_interval(self.config.tick_interval_ms)
        self.clock_service.resolve_time_zone()
        self.clock_service.start()

    def stop(self):
        self.clock_service.stop()

    # ---Dispatcher ---

    def dispatch(self, action: object) -> HomeState:
        """Runs one action to completion and emits the signals for what changed."""
        previous = self.state
        current = reduce(previous, action)
        if current == previous:
            return current

        self.state = current

        if current.mode != previous.mode:
            logger.info(f"Display mode switched to {current.mode.value}.")
            self.theme_changed.emit(current.mode)
            self._persist("display_mode", current.mode.value)

        if current.selected_player != previous.selected_player:
            self.player_list_updated.emit(self._players_view_data())
            if current.selected_player is not None:
                logger.info(f"Active player: '{current.selected_player.name}'")
                self._persist("last_player_id", current.selected_player.id)

        if current.games != previous.games or current.selected_game != previous.selected_game:
            self.game_list_updated.emit(self._games_view_data())
            self.selected_game_changed.emit(self._selected_game_view_data())
            if current.selected_game is not None:
                logger.info(f"Playing '{current.selected_game.title}'")

        self._publish_clock()
        self._publish_style(force=current.mode != previous.mode)
        self.state_changed.emit(current)
        return current

    # ---Public Slots (for UI Actions) ---

    def toggle_theme(self):
        self.dispatch(ToggleTheme())

    def select_game_by_id(self, game_id: int):
        game = self.state.find_game(game_id)
        if game is None:
            logger.warning(f"select_game_by_id: no game with id {game_id}.")
            return
        self.dispatch(SelectGame(game))

    def select_player_by_id(self, player_id: int):
        player = self.state.find_player(player_id)
        if player is None:
            logger.warning(f"select_player_by_id: no player with id {player_id}.")
            return
        self.dispatch(SelectPlayer(player))

    def on_quick_action(self, key: str):
        if key == "theme":
            self.toggle_theme()
            return

        label = dict(QUICK_ACTIONS).get(key, key)
        logger.debug(f"Quick action '{key}' has no behavior on this screen.")
        self.toast_requested.emit(f"{label} is not available here.", "info")

    def save_window_geometry(self, geometry: tuple[int, int, int, int]):
        self._persist("window_geometry", list(geometry), section="ui")

    # ---Private Helpers ---

    def _on_time_zone_resolved(self, zone: tzinfo):
        self.dispatch(SetTimeZone(zone))

    def _persist(self, key: str, value, section: str = "settings"):
        try:
            self.config_service.save_setting(key, value, section=section)
        except ConfigSaveError as e:
            logger.error(f"Could not persist '{key}': {e}")
            self.toast_requested.emit(f"Could not save {key.replace('_', ' ')}.", "error")

    def _publish_all(self):
        self.theme_changed.emit(self.state.mode)
        self.player_list_updated.emit(self._players_view_data())
        self.game_list_updated.emit(self._games_view_data())
        self.selected_game_changed.emit(self._selected_game_view_data())
        self._publish_clock()
        self._publish_style(force=True)
        self.state_changed.emit(self.state)

    def _publish_clock(self):
        text = self.state.local_now.strftime(CLOCK_FORMAT)
        if text != self._clock_text:
            self._clock_text = text
            self.clock_text_changed.emit(text)

    def _publish_style(self, force: bool = False):
        # One restyle per HOVER_ALPHA_STEP of change
        alpha = round(round(hover_alpha(self.state.now) / HOVER_ALPHA_STEP) * HOVER_ALPHA_STEP, 2)
        if force or alpha != self._alpha:
            self._alpha = alpha
            self.style_updated.emit(self.current_style())

    def current_style(self) -> StyleTable:
        return resolve_style(self.state.mode, self._alpha)

    def _players_view_data(self) -> list[dict]:
        selected = self.state.selected_player
        return [
            {
                "id": p.id,
                "name": p.name,
                "icon": p.icon,
                "selected": selected is not None and p.id == selected.id,
            }
            for p in self.state.players
        ]

    def _games_view_data(self) -> list[dict]:
        selected = self.state.selected_game
        return [
            {
                "id": g.id,
                "title": g.title,
                "icon": g.icon,
                "selected": selected is not None and g.id == selected.id,
            }
            for g in self.state.games
        ]

    def _selected_game_view_data(self) -> Optional[dict]:
        game = self.state.selected_game
        if game is None:
            return None
        return {"id": game.id, "title": game.title}

    @property
    def display_mode(self) -> DisplayMode:
        return self.state.mode
