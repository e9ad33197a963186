"""Tests for the logging helpers."""

import logging
import queue

from exam_archive.gui.utils.logging_utils import (
    PACKAGE_LOGGER,
    QueueLogHandler,
    attach_queue_handler,
    configure_logging,
    detach_queue_handler,
)


def test_queue_handler_forwards_warnings():
    log_queue = queue.Queue()
    handler = attach_queue_handler(log_queue)
    try:
        logger = logging.getLogger(f"{PACKAGE_LOGGER}.tests")
        logger.warning("Fetch attempt 1/3 failed")
        logger.info("not forwarded")
    finally:
        detach_queue_handler(handler)

    assert log_queue.get_nowait() == ("Fetch attempt 1/3 failed", "WARNING")
    assert log_queue.empty()


def test_detach_stops_forwarding():
    log_queue = queue.Queue()
    handler = attach_queue_handler(log_queue)
    detach_queue_handler(handler)

    logging.getLogger(PACKAGE_LOGGER).error("after detach")

    assert log_queue.empty()
    assert handler not in logging.getLogger(PACKAGE_LOGGER).handlers


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    configure_logging("WARNING")

    consoles = [h for h in logger.handlers if getattr(h, "_exam_archive_console", False)]
    assert len(consoles) == 1
    assert logger.level == logging.WARNING


def test_handler_level_defaults_to_warning():
    assert QueueLogHandler(queue.Queue()).level == logging.WARNING
