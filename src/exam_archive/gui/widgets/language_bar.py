"""
Language selector: one checkable link-style button per language.
"""
from typing import Dict, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton, QWidget

from exam_archive.gui.styles.theme import Styles


class LanguageBar(QWidget):
    languageSelected = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(2)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self.buttons: Dict[str, QPushButton] = {}
        self._languages: tuple = ()

    def set_languages(self, languages: Sequence[str], current: str) -> None:
        """Show one button per language; rebuilt only when the list changes."""
        languages = tuple(languages)
        if languages != self._languages:
            for button in self.buttons.values():
                self._group.removeButton(button)
                button.setParent(None)
                button.deleteLater()
            self.buttons = {}
            for lang in languages:
                button = QPushButton(lang.upper())
                button.setCheckable(True)
                button.setStyleSheet(Styles.BUTTON_LINK)
                button.setCursor(Qt.CursorShape.PointingHandCursor)
                button.setProperty("lang", lang)
                button.clicked.connect(lambda _checked=False, l=lang: self.languageSelected.emit(l))
                self._group.addButton(button)
                self._layout.addWidget(button)
                self.buttons[lang] = button
            self._languages = languages

        for lang, button in self.buttons.items():
            button.setChecked(lang == current)
