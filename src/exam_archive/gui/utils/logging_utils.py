"""
Logging utilities: console set-up and a queue handler for GUI display.
"""
from __future__ import annotations

import logging
from queue import Queue
from typing import Optional

PACKAGE_LOGGER = "exam_archive"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends log records to a queue.

    Used to surface warnings from loaders running in worker threads in the
    window status bar. The GUI drains the queue on its own thread.
    """

    def __init__(self, log_queue: Queue, level: int = logging.WARNING):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Install a console handler on the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_exam_archive_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._exam_archive_console = True
        logger.addHandler(handler)
    return logger


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = PACKAGE_LOGGER) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger.

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    logger.addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = PACKAGE_LOGGER) -> None:
    """Remove a QueueLogHandler from the specified logger."""
    logging.getLogger(logger_name).removeHandler(handler)
