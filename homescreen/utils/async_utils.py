# homescreen/utils/async_utils.py
import sys
import traceback
from typing import Any, Callable
from PyQt6.QtCore import QObject, pyqtSignal, QRunnable


class WorkerSignals(QObject):
    """
    Defines the signals available from a running worker thread.
    QRunnable is not a QObject, so the signals live on this companion object.
    Connections made from the GUI thread are delivered back on the GUI thread.

    Supported signals are:
    - error: tuple (exctype, value, traceback.format_exc())
    - result: object data returned from processing
    """

    error = pyqtSignal(tuple)  # exctype, value, traceback
    result = pyqtSignal(object)


class Worker(QRunnable):
    """
    A generic, reusable worker thread for running any function.

    The function runs on whatever QThreadPool the worker is started on. Its
    return value is emitted through `signals.result`; any exception is caught
    and emitted through `signals.error` instead of escaping the pool thread.
    """

    def __init__(self, fn: Callable, *args: Any, **kwargs: Any):
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = WorkerSignals()

    def run(self):
        """Execute the worker's task and report the outcome through its signals."""
        try:
            result = self.fn(*self.args, **self.kwargs)
        except Exception:
            exctype, value = sys.exc_info()[:2]
            tb = traceback.format_exc()
            self.signals.error.emit((exctype, value, tb))
        else:
            self.signals.result.emit(result)
