"""Tests for opening exam files."""

from unittest.mock import patch

from exam_archive.gui.utils.links import open_exam_file, to_qurl


def test_to_qurl_local_path(tmp_path):
    url = to_qurl(str(tmp_path / "paper.pdf"))
    assert url.isLocalFile()
    assert url.toLocalFile().endswith("paper.pdf")


def test_to_qurl_remote():
    assert to_qurl("https://example.org/p.pdf").toString() == "https://example.org/p.pdf"


def test_missing_local_file(tmp_path):
    with patch("exam_archive.gui.utils.links.QDesktopServices") as services:
        success, error = open_exam_file(str(tmp_path / "missing.pdf"))

    assert not success
    assert "does not exist" in error
    services.openUrl.assert_not_called()


def test_opens_existing_file(tmp_path):
    paper = tmp_path / "paper.pdf"
    paper.write_bytes(b"%PDF-1.4")

    with patch("exam_archive.gui.utils.links.QDesktopServices") as services:
        services.openUrl.return_value = True
        success, error = open_exam_file(str(paper))

    assert success
    assert error is None
    services.openUrl.assert_called_once()


def test_open_failure_is_reported():
    with patch("exam_archive.gui.utils.links.QDesktopServices") as services:
        services.openUrl.return_value = False
        success, error = open_exam_file("https://example.org/p.pdf")

    assert not success
    assert "No application" in error
