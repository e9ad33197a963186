"""Unit tests for LanguageBar."""

from exam_archive.gui.widgets.language_bar import LanguageBar


def test_buttons_per_language(qtbot):
    bar = LanguageBar()
    qtbot.addWidget(bar)
    bar.set_languages(["en", "fr"], "en")

    assert list(bar.buttons) == ["en", "fr"]
    assert bar.buttons["fr"].text() == "FR"
    assert bar.buttons["en"].isChecked()
    assert not bar.buttons["fr"].isChecked()


def test_click_selects_language(qtbot):
    bar = LanguageBar()
    qtbot.addWidget(bar)
    bar.set_languages(["en", "fr"], "en")

    with qtbot.waitSignal(bar.languageSelected) as blocker:
        bar.buttons["fr"].click()

    assert blocker.args == ["fr"]


def test_same_languages_keep_buttons(qtbot):
    bar = LanguageBar()
    qtbot.addWidget(bar)
    bar.set_languages(["en", "fr"], "en")
    button = bar.buttons["en"]

    bar.set_languages(["en", "fr"], "fr")

    assert bar.buttons["en"] is button
    assert bar.buttons["fr"].isChecked()
