# homescreen/views/components/status_bar_widget.py

from PyQt6.QtWidgets import QHBoxLayout, QWidget
from qfluentwidgets import FluentIcon, IconWidget, StrongBodyLabel


class StatusBarWidget(QWidget):
    """Clock, wifi and battery glyphs in the top-right corner."""

    # Decorative; there is no real battery reading behind it
    BATTERY_GLYPH = "▮▮▮▮▯"

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        self.clock_label = StrongBodyLabel("--:--", self)
        self.clock_label.setObjectName("ClockText")
        self.wifi_icon = IconWidget(FluentIcon.WIFI, self)
        self.wifi_icon.setFixedSize(18, 18)
        self.battery_label = StrongBodyLabel(self.BATTERY_GLYPH, self)
        self.battery_label.setObjectName("StatusText")

        layout.addWidget(self.clock_label)
        layout.addWidget(self.wifi_icon)
        layout.addWidget(self.battery_label)

    def set_clock_text(self, text: str):
        self.clock_label.setText(text)
