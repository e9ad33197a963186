"""
Background workers for loading resources off the GUI thread.
"""
import logging
from typing import Any, Callable

from PySide6.QtCore import QThread, Signal

from exam_archive.loading import LoadError

logger = logging.getLogger(__name__)


class ResourceWorker(QThread):
    """Runs one loader call and reports the result through signals."""

    loaded = Signal(object)
    failed = Signal(str)

    def __init__(self, name: str, load: Callable[[], Any], parent=None):
        super().__init__(parent)
        self.name = name
        self._load = load

    def run(self):
        try:
            result = self._load()
        except LoadError as e:
            logger.error(f"Failed to load {self.name}: {e}")
            self.failed.emit(str(e))
            return
        except Exception as e:
            logger.exception(f"Unexpected error loading {self.name}")
            self.failed.emit(str(e) or type(e).__name__)
            return
        self.loaded.emit(result)
