# homescreen/services/clock_service.py
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QThreadPool, QTimer, pyqtSignal

from homescreen.core.constants import DEFAULT_TICK_INTERVAL_MS
from homescreen.utils.async_utils import Worker
from homescreen.utils.logger_utils import logger


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_time_zone() -> tzinfo:
    """The time zone the operating system reports for this machine."""
    local_zone = datetime.now().astimezone().tzinfo
    return local_zone if local_zone is not None else timezone.utc


class ClockService(QObject):
    """
    External clock driver. Emits the current instant on a fixed cadence and
    resolves the local time zone once on request.
    """

    ticked = pyqtSignal(object)  # datetime
    time_zone_resolved = pyqtSignal(object)  # tzinfo

    def __init__(
        self,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        now_fn: Callable[[], datetime] = utc_now,
        zone_fn: Callable[[], tzinfo] = local_time_zone,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._now_fn = now_fn
        self._zone_fn = zone_fn

        # --- Tick Timer ---
        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.tick)

    @property
    def interval_ms(self) -> int:
        return self.timer.interval()

    def set_interval(self, interval_ms: int):
        self.timer.setInterval(interval_ms)

    def start(self):
        """Starts the periodic tick. Emits one tick immediately."""
        logger.info(f"Starting clock driver with a {self.interval_ms} ms period.")
        self.tick()
        if not self.timer.isActive():
            self.timer.start()

    def stop(self):
        if self.timer.isActive():
            self.timer.stop()
            logger.info("Clock driver stopped.")

    def tick(self):
        self.ticked.emit(self._now_fn())

    def resolve_time_zone(self):
        """Looks up the local time zone on the global thread pool."""
        worker = Worker(self._zone_fn)
        worker.signals.result.connect(self._on_time_zone_resolved)
        worker.signals.error.connect(self._on_time_zone_error)

        thread_pool = QThreadPool.globalInstance()
        if thread_pool:
            thread_pool.start(worker)
        else:
            logger.critical("Could not retrieve the global QThreadPool instance.")

    # --- Private Slots ---

    def _on_time_zone_resolved(self, zone: tzinfo):
        logger.info(f"Resolved local time zone: {zone}")
        self.time_zone_resolved.emit(zone)

    def _on_time_zone_error(self, error_info: tuple):
        exctype, value, tb = error_info
        logger.error(f"Failed to resolve the local time zone: {value}\n{tb}")
