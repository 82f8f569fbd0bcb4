# homescreen/views/components/game_tile_widget.py

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPixmap
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from homescreen.core.constants import GAME_TILE_SIZE


class GameTileWidget(QFrame):
    """A square game tile. Clicking it plays (or un-selects) the game."""

    clicked = pyqtSignal(int)  # game id

    def __init__(self, game_data: dict, pixmap: QPixmap, parent: QWidget | None = None):
        super().__init__(parent)
        self.game_id: int = game_data["id"]
        self.setObjectName("GameTile")
        self.setFixedSize(GAME_TILE_SIZE + 8, GAME_TILE_SIZE + 8)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(game_data["title"])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setPixmap(
            pixmap.scaled(
                GAME_TILE_SIZE,
                GAME_TILE_SIZE,
                Qt.AspectRatioMode.KeepAspectRatioByExpanding,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
        layout.addWidget(self.image_label)

        self.setProperty("selected", "true" if game_data.get("selected") else "false")

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.game_id)
        super().mousePressEvent(event)
