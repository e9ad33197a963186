"""Unit tests for ExamCard."""

from exam_archive.gui.widgets.exam_card import ExamCard


def _card(qtbot, record, store, lang="en"):
    card = ExamCard(record, record.file, store, lang)
    qtbot.addWidget(card)
    return card


def test_badge_reflects_mark_scheme(qtbot, catalog, store):
    with_scheme = _card(qtbot, catalog.records[0], store)
    without = _card(qtbot, catalog.records[1], store)

    assert with_scheme.badge.property("hasMarkScheme") is True
    assert with_scheme.badge.text() == "Includes Mark Scheme"
    assert without.badge.property("hasMarkScheme") is False
    assert without.badge.text() == "No Mark Scheme"


def test_labels_are_localized(qtbot, catalog, store):
    card = _card(qtbot, catalog.records[0], store, "fr")
    assert card.download_btn.text() == "Télécharger"


def test_download_button_emits_file(qtbot, catalog, store):
    card = _card(qtbot, catalog.records[0], store)

    with qtbot.waitSignal(card.downloadRequested) as blocker:
        card.download_btn.click()

    assert blocker.args == ["papers/math-2020.pdf"]
    assert card.download_btn.accessibleName() == "Download Algebra Paper 1 2020"
