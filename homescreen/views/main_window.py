# homescreen/views/main_window.py

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QHBoxLayout, QLayout, QVBoxLayout, QWidget
from qfluentwidgets import SingleDirectionScrollArea, SubtitleLabel, setTheme

from homescreen.core.constants import APP_NAME, AVATAR_SIZE, GAME_TILE_SIZE
from homescreen.core.theme import StyleTable, build_stylesheet, fluent_theme_for
from homescreen.models.home_state import DisplayMode
from homescreen.services.icon_service import IconService
from homescreen.utils.logger_utils import logger
from homescreen.utils.ui_utils import UiUtils
from homescreen.viewmodels.home_vm import HomeViewModel
from homescreen.views.components import (
    GameTileWidget,
    PlayerAvatarWidget,
    QuickActionsWidget,
    StatusBarWidget,
)


class MainWindow(QWidget):
    """The single home screen. It receives a fully constructed ViewModel."""

    def __init__(
        self,
        view_model: HomeViewModel,
        icon_service: IconService,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.home_vm = view_model
        self.icon_service = icon_service

        self._init_ui()
        self._bind_view_model()

        # Publishes the first snapshot through the signals bound above
        self.home_vm.start()
        self._restore_geometry()

    def _init_ui(self) -> None:
        self.setObjectName("HomeScreen")
        self.setWindowTitle(APP_NAME)
        self.resize(1280, 720)
        self.setMinimumSize(960, 540)

        root = QVBoxLayout(self)
        root.setContentsMargins(48, 24, 48, 24)
        root.setSpacing(16)

        # ---------- Header: avatars left, status right ----------
        header = QHBoxLayout()
        header.setSpacing(12)
        self.avatar_row = QHBoxLayout()
        self.avatar_row.setSpacing(12)
        self.status_bar = StatusBarWidget(self)
        header.addLayout(self.avatar_row)
        header.addStretch(1)
        header.addWidget(self.status_bar, 0, Qt.AlignmentFlag.AlignTop)
        root.addLayout(header)
        root.addStretch(1)

        # ---------- Game row ----------
        self.selected_game_label = SubtitleLabel("", self)
        self.selected_game_label.setObjectName("GameCaption")
        root.addWidget(self.selected_game_label)

        self.games_scroll = SingleDirectionScrollArea(self, Qt.Orientation.Horizontal)
        self.games_scroll.setWidgetResizable(True)
        self.games_scroll.setFixedHeight(GAME_TILE_SIZE + 32)
        self.games_scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.games_scroll.setStyleSheet("QScrollArea {border: none; background: transparent;}")
        games_container = QWidget()
        games_container.setStyleSheet("background: transparent;")
        self.game_row = QHBoxLayout(games_container)
        self.game_row.setContentsMargins(4, 4, 4, 4)
        self.game_row.setSpacing(16)
        self.games_scroll.setWidget(games_container)
        root.addWidget(self.games_scroll)
        root.addStretch(1)

        # ---------- Quick actions ----------
        self.quick_actions = QuickActionsWidget(self)
        root.addWidget(self.quick_actions)

    def _bind_view_model(self):
        """Connects signals and slots between this view and its viewmodel."""
        # ---VM -> View ---
        self.home_vm.theme_changed.connect(self._on_theme_changed)
        self.home_vm.style_updated.connect(self._on_style_updated)
        self.home_vm.player_list_updated.connect(self._on_player_list_updated)
        self.home_vm.game_list_updated.connect(self._on_game_list_updated)
        self.home_vm.selected_game_changed.connect(self._on_selected_game_changed)
        self.home_vm.clock_text_changed.connect(self.status_bar.set_clock_text)
        self.home_vm.toast_requested.connect(self._on_toast_requested)

        # ---View -> VM ---
        self.quick_actions.action_triggered.connect(self.home_vm.on_quick_action)

    # ---VM -> View Slots ---

    def _on_theme_changed(self, mode: DisplayMode):
        setTheme(fluent_theme_for(mode))

    def _on_style_updated(self, style: StyleTable):
        self.setStyleSheet(build_stylesheet(style))

    def _on_player_list_updated(self, players: list[dict]):
        self._clear_layout(self.avatar_row)
        for player in players:
            pixmap = self.icon_service.get_icon(
                f"player-{player['id']}", player["icon"], player["name"], AVATAR_SIZE
            )
            avatar = PlayerAvatarWidget(player, pixmap, self)
            avatar.clicked.connect(self.home_vm.select_player_by_id)
            self.avatar_row.addWidget(avatar)

    def _on_game_list_updated(self, games: list[dict]):
        self._clear_layout(self.game_row)
        for game in games:
            pixmap = self.icon_service.get_icon(
                f"game-{game['id']}", game["icon"], game["title"], GAME_TILE_SIZE
            )
            tile = GameTileWidget(game, pixmap)
            tile.clicked.connect(self.home_vm.select_game_by_id)
            self.game_row.addWidget(tile)
        self.game_row.addStretch(1)
        # The most recently played game is always first
        self.games_scroll.horizontalScrollBar().setValue(0)

    def _on_selected_game_changed(self, game: dict | None):
        self.selected_game_label.setText(game["title"] if game else "")

    def _on_toast_requested(self, message: str, level: str):
        UiUtils.show_toast(self, message, level)

    # ---Qt Events ---

    def closeEvent(self, event: QCloseEvent):
        geometry = self.geometry()
        self.home_vm.save_window_geometry(
            (geometry.x(), geometry.y(), geometry.width(), geometry.height())
        )
        self.home_vm.stop()
        logger.info("Main window closed.")
        super().closeEvent(event)

    # ---Private Helpers ---

    def _restore_geometry(self):
        geometry = self.home_vm.config.window_geometry
        if geometry:
            self.setGeometry(*geometry)

    @staticmethod
    def _clear_layout(layout: QLayout):
        while layout.count():
            item = layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
