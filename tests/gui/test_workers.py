"""Tests for ResourceWorker (run() is called directly, on the test thread)."""

from unittest.mock import MagicMock

from exam_archive.gui.workers import ResourceWorker
from exam_archive.loading import LoadError


def test_emits_loaded(qtbot, catalog):
    worker = ResourceWorker("catalog", lambda: catalog)

    with qtbot.waitSignal(worker.loaded) as blocker, qtbot.assertNotEmitted(worker.failed):
        worker.run()

    assert blocker.args == [catalog]


def test_emits_failed_with_message(qtbot):
    load = MagicMock(side_effect=LoadError("Failed to load data/exams.json: 503 Service Unavailable"))
    worker = ResourceWorker("catalog", load)

    with qtbot.waitSignal(worker.failed) as blocker, qtbot.assertNotEmitted(worker.loaded):
        worker.run()

    assert blocker.args == ["Failed to load data/exams.json: 503 Service Unavailable"]
    load.assert_called_once_with()


def test_unexpected_error_still_reports_failure(qtbot):
    """Any loader exception ends in ``failed`` so the window never stays on loading."""
    worker = ResourceWorker("translations", MagicMock(side_effect=RuntimeError("disk exploded")))

    with qtbot.waitSignal(worker.failed) as blocker, qtbot.assertNotEmitted(worker.loaded):
        worker.run()

    assert blocker.args == ["disk exploded"]


def test_unexpected_error_without_message(qtbot):
    worker = ResourceWorker("catalog", MagicMock(side_effect=KeyError()))

    with qtbot.waitSignal(worker.failed) as blocker:
        worker.run()

    assert blocker.args == ["KeyError"]
