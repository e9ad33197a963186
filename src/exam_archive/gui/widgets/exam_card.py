"""
Card widget for one exam paper.
"""
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QVBoxLayout

from exam_archive.core.models import ExamRecord
from exam_archive.gui.styles.theme import Styles
from exam_archive.gui.utils.labels import mark_i18n
from exam_archive.i18n import LocalizationStore

MARK_SCHEME_BADGE = {
    True: ("includesMarkScheme", "Includes Mark Scheme", Styles.BADGE_MARK_SCHEME),
    False: ("noMarkScheme", "No Mark Scheme", Styles.BADGE_NO_MARK_SCHEME),
}


class ExamCard(QFrame):
    """Subject, title, year, mark-scheme badge and a download button."""

    downloadRequested = Signal(str)

    def __init__(self, record: ExamRecord, download_url: str, store: LocalizationStore, lang: str, parent=None):
        super().__init__(parent)
        self.record = record
        self.download_url = download_url

        self.setObjectName("examCard")
        self.setStyleSheet(Styles.CARD)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        # Subject + title on the left, year on the right
        top_row = QHBoxLayout()
        heading = QVBoxLayout()
        heading.setSpacing(4)

        self.subject_label = QLabel(record.subject.upper())
        self.subject_label.setStyleSheet(Styles.CARD_SUBJECT)
        heading.addWidget(self.subject_label)

        self.title_label = QLabel(record.title)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(Styles.CARD_TITLE)
        heading.addWidget(self.title_label)

        top_row.addLayout(heading, stretch=1)

        self.year_label = QLabel(str(record.year))
        self.year_label.setStyleSheet(Styles.CARD_YEAR)
        top_row.addWidget(self.year_label, alignment=Qt.AlignmentFlag.AlignTop)
        layout.addLayout(top_row)

        # Badge + download
        bottom_row = QHBoxLayout()

        key, default, style = MARK_SCHEME_BADGE[record.has_mark_scheme]
        self.badge = QLabel(store.lookup(lang, key, default))
        self.badge.setObjectName("markSchemeBadge")
        self.badge.setProperty("hasMarkScheme", record.has_mark_scheme)
        self.badge.setStyleSheet(style)
        mark_i18n(self.badge, key, default)
        bottom_row.addWidget(self.badge)
        bottom_row.addStretch()

        self.download_btn = QPushButton(store.lookup(lang, "download", "Download"))
        self.download_btn.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.download_btn.setAccessibleName(f"Download {record.title} {record.year}")
        self.download_btn.setToolTip(download_url)
        mark_i18n(self.download_btn, "download", "Download")
        self.download_btn.clicked.connect(self._on_download)
        bottom_row.addWidget(self.download_btn)

        layout.addLayout(bottom_row)

    def _on_download(self):
        self.downloadRequested.emit(self.download_url)

    def mouseReleaseEvent(self, event):
        # The whole card is a link to the file
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self._on_download()
        super().mouseReleaseEvent(event)
