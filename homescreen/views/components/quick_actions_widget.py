# homescreen/views/components/quick_actions_widget.py

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QWidget
from qfluentwidgets import FluentIcon, IconWidget

from homescreen.core.constants import QUICK_ACTION_SIZE, QUICK_ACTIONS

QUICK_ACTION_ICONS: dict[str, FluentIcon] = {
    "news": FluentIcon.MESSAGE,
    "shop": FluentIcon.SHOPPING_CART,
    "album": FluentIcon.PHOTO,
    "controllers": FluentIcon.GAME,
    "theme": FluentIcon.BRIGHTNESS,
    "settings": FluentIcon.SETTING,
    "power": FluentIcon.POWER_BUTTON,
}


class QuickActionButton(QFrame):
    """A round icon button of the quick-action row."""

    clicked = pyqtSignal(str)  # action key

    def __init__(self, key: str, label: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.key = key
        self.setObjectName("QuickAction")
        self.setFixedSize(QUICK_ACTION_SIZE, QUICK_ACTION_SIZE)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(label)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        self.icon_widget = IconWidget(QUICK_ACTION_ICONS.get(key, FluentIcon.APPLICATION), self)
        layout.addWidget(self.icon_widget)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.key)
        super().mousePressEvent(event)


class QuickActionsWidget(QWidget):
    """The centered row of quick-action buttons."""

    action_triggered = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 12, 0, 12)
        layout.setSpacing(18)
        layout.addStretch(1)
        for key, label in QUICK_ACTIONS:
            button = QuickActionButton(key, label, self)
            button.clicked.connect(self.action_triggered)
            layout.addWidget(button)
        layout.addStretch(1)
