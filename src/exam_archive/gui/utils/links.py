"""Opening exam files in the system viewer."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

from exam_archive.fetching import is_remote

logger = logging.getLogger(__name__)


def to_qurl(location: str) -> QUrl:
    """Convert a URL or local path into a QUrl."""
    if is_remote(location) or location.startswith("file:"):
        return QUrl(location)
    return QUrl.fromLocalFile(str(Path(location).resolve()))


def open_exam_file(location: str) -> Tuple[bool, Optional[str]]:
    """
    Open an exam file in the system browser or viewer.

    Args:
        location: Resolved URL or path of the file

    Returns:
        Tuple of (success: bool, error_message: Optional[str])
    """
    url = to_qurl(location)
    if not url.isValid():
        return False, f"Invalid file location: {location}"

    if not is_remote(location) and url.isLocalFile() and not Path(url.toLocalFile()).exists():
        return False, f"File does not exist: {url.toLocalFile()}"

    if not QDesktopServices.openUrl(url):
        return False, f"No application available to open {location}"

    logger.info(f"Opened {location}")
    return True, None
