# homescreen/views/components/player_avatar_widget.py

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPixmap
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from homescreen.core.constants import AVATAR_SIZE


class PlayerAvatarWidget(QFrame):
    """A round, clickable player avatar. Highlighted while selected."""

    clicked = pyqtSignal(int)  # player id

    def __init__(self, player_data: dict, pixmap: QPixmap, parent: QWidget | None = None):
        super().__init__(parent)
        self.player_id: int = player_data["id"]
        self.setObjectName("PlayerAvatar")
        self.setFixedSize(AVATAR_SIZE + 8, AVATAR_SIZE + 8)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(player_data["name"])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setPixmap(
            pixmap.scaled(
                AVATAR_SIZE,
                AVATAR_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
        layout.addWidget(self.image_label)

        self.set_selected(player_data.get("selected", False))

    def set_selected(self, selected: bool):
        self.setProperty("selected", "true" if selected else "false")
        # Dynamic properties need a re-polish to take effect in QSS
        self.style().unpolish(self)
        self.style().polish(self)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.player_id)
        super().mousePressEvent(event)
