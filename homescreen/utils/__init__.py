from .logger_utils import logger
from .async_utils import Worker, WorkerSignals

__all__ = ["logger", "Worker", "WorkerSignals"]
