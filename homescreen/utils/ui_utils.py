# homescreen/utils/ui_utils.py
from PyQt6.QtWidgets import QWidget

from qfluentwidgets import InfoBar, InfoBarPosition


class UiUtils:
    """A collection of static utility functions for the UI."""

    @staticmethod
    def show_toast(
        parent: QWidget,
        message: str,
        level: str = "info",
        title: str | None = None,
        duration: int = 3000,
        position: InfoBarPosition = InfoBarPosition.TOP_RIGHT,
    ):
        """
        Creates and shows a non-blocking InfoBar (toast) notification.

        Parameters
        ----------
        parent : QWidget
            The widget over which the toast will be displayed.
        message : str
            The main content of the notification.
        level : str, optional
            The severity level ('info', 'success', 'warning', 'error'), by default 'info'.
        title : str | None, optional
            The title of the notification. If None, a default is used, by default None.
        duration : int, optional
            How long the toast stays visible in milliseconds, by default 3000.
        position : InfoBarPosition, optional
            Where the toast appears on the parent widget, by default InfoBarPosition.TOP_RIGHT.
        """
        level = level.lower()
        final_title = title if title is not None else level.capitalize()

        # Critical messages stay longer
        final_duration = 5000 if level in ("error", "warning") else duration

        factory = {
            "success": InfoBar.success,
            "warning": InfoBar.warning,
            "error": InfoBar.error,
        }.get(level, InfoBar.info)
        factory(
            final_title,
            message,
            duration=final_duration,
            position=position,
            parent=parent,
        )
