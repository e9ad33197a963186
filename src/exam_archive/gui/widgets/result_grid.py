"""
Scrollable grid of exam cards.

Every render replaces the previous contents completely; there is no
incremental diffing.
"""
from typing import List, Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QLabel, QScrollArea, QWidget

from exam_archive.core.models import ExamRecord
from exam_archive.fetching import resolve_location
from exam_archive.gui.styles.theme import Styles
from exam_archive.gui.utils.labels import mark_i18n
from exam_archive.gui.widgets.exam_card import ExamCard
from exam_archive.i18n import LocalizationStore

GRID_COLUMNS = 2
NO_RESULTS_DEFAULT = "No exams found. Try different filters."

MESSAGE_INFO = "info"
MESSAGE_ERROR = "error"


class ResultGrid(QScrollArea):
    """Result area: cards, or a single message."""

    downloadRequested = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.container = QWidget()
        self.grid_layout = QGridLayout(self.container)
        self.grid_layout.setContentsMargins(24, 16, 24, 24)
        self.grid_layout.setSpacing(16)
        self.grid_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.setWidget(self.container)

        self._cards: List[ExamCard] = []
        self.message_label: Optional[QLabel] = None

    # ─────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────

    def cards(self) -> List[ExamCard]:
        return list(self._cards)

    def clear(self) -> None:
        """Remove all cards and messages."""
        while self.grid_layout.count():
            item = self.grid_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
        self._cards = []
        self.message_label = None

    def show_message(
        self,
        text: str,
        kind: str = MESSAGE_INFO,
        key: Optional[str] = None,
        default: Optional[str] = None,
    ) -> QLabel:
        """
        Replace the contents with a single message.

        Args:
            text: Message text (already localized)
            kind: MESSAGE_INFO or MESSAGE_ERROR
            key: Optional message key, so a language switch relabels it
            default: Literal used for ``key`` when a language lacks it
                (defaults to ``text``)
        """
        self.clear()
        label = QLabel(text)
        label.setObjectName("gridMessage")
        label.setWordWrap(True)
        label.setStyleSheet(Styles.MESSAGE_ERROR if kind == MESSAGE_ERROR else Styles.MESSAGE_INFO)
        if key:
            mark_i18n(label, key, text if default is None else default)
        self.grid_layout.addWidget(label, 0, 0, 1, GRID_COLUMNS)
        self.message_label = label
        return label

    def render(
        self,
        results: Sequence[ExamRecord],
        store: LocalizationStore,
        lang: str,
        base_location: str = "",
    ) -> None:
        """
        Show one card per record, in order.

        An empty ``results`` shows only the "no results" placeholder.

        Args:
            results: Records to display
            store: Translations for card labels
            lang: Current language
            base_location: Catalog locator that relative file paths are
                resolved against
        """
        if not results:
            self.show_message(
                store.lookup(lang, "noResults", NO_RESULTS_DEFAULT),
                key="noResults",
                default=NO_RESULTS_DEFAULT,
            )
            return

        self.clear()
        for index, record in enumerate(results):
            card = ExamCard(record, resolve_location(base_location, record.file), store, lang)
            card.downloadRequested.connect(self.downloadRequested)
            row, column = divmod(index, GRID_COLUMNS)
            self.grid_layout.addWidget(card, row, column)
            self._cards.append(card)
