"""
Filter controls: subject, year and mark-scheme selectors, a title query,
and the search / reset buttons.
"""
from typing import Optional, Sequence, Tuple

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLineEdit, QPushButton, QSizePolicy, QWidget

from exam_archive.core.models import FilterSelection, flag_text, is_unset
from exam_archive.gui.styles.theme import Styles
from exam_archive.gui.utils.labels import TARGET_PLACEHOLDER, mark_i18n
from exam_archive.i18n import DEFAULT_LANGUAGE, LocalizationStore
from exam_archive.query import FilterOptions

# (key, default) per selector placeholder and mark-scheme option
PLACEHOLDERS = {
    "subject": ("allSubjects", "All Subjects"),
    "year": ("allYears", "All Years"),
    "mark_scheme": ("allSchemes", "With/Without Mark Scheme"),
}
MARK_SCHEME_LABELS = {
    True: ("includesMarkScheme", "With Mark Scheme"),
    False: ("noMarkScheme", "Without Mark Scheme"),
}


class FilterBar(QWidget):
    """Row of filter controls. Emits one signal per user action."""

    filterChanged = Signal(str, object)
    queryTextChanged = Signal(str)
    searchRequested = Signal()
    resetRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 8)
        layout.setSpacing(8)

        self.combos = {}
        for name in ("subject", "year", "mark_scheme"):
            combo = QComboBox()
            combo.setObjectName(f"{name}Filter")
            combo.setStyleSheet(Styles.COMBOBOX)
            combo.setSizeAdjustPolicy(QComboBox.SizeAdjustPolicy.AdjustToContents)
            combo.currentIndexChanged.connect(lambda _index, n=name: self._on_combo_changed(n))
            layout.addWidget(combo)
            self.combos[name] = combo

        self.query_edit = QLineEdit()
        self.query_edit.setObjectName("queryInput")
        self.query_edit.setStyleSheet(Styles.INPUT_FIELD)
        self.query_edit.setPlaceholderText("Search titles...")
        self.query_edit.setClearButtonEnabled(True)
        self.query_edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        mark_i18n(self.query_edit, "searchPlaceholder", "Search titles...", TARGET_PLACEHOLDER)
        self.query_edit.textChanged.connect(self.queryTextChanged)
        self.query_edit.returnPressed.connect(self.searchRequested)
        layout.addWidget(self.query_edit, stretch=1)

        self.search_btn = QPushButton("Search")
        self.search_btn.setObjectName("searchButton")
        self.search_btn.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.search_btn.setEnabled(False)
        mark_i18n(self.search_btn, "search", "Search")
        self.search_btn.clicked.connect(self.searchRequested)
        layout.addWidget(self.search_btn)

        self.reset_btn = QPushButton("Reset")
        self.reset_btn.setObjectName("resetButton")
        self.reset_btn.setStyleSheet(Styles.BUTTON_SECONDARY)
        mark_i18n(self.reset_btn, "reset", "Reset")
        self.reset_btn.clicked.connect(self.resetRequested)
        layout.addWidget(self.reset_btn)

        self.set_options(FilterOptions(), LocalizationStore(), DEFAULT_LANGUAGE, FilterSelection())

    # ─────────────────────────────────────────────────────────────────────
    # Population
    # ─────────────────────────────────────────────────────────────────────

    @staticmethod
    def option_items(
        options: FilterOptions, store: LocalizationStore, lang: str
    ) -> dict:
        """(label, value) pairs per selector, placeholder first."""
        items = {}
        for name, (key, default) in PLACEHOLDERS.items():
            items[name] = [(store.lookup(lang, key, default), "")]
        items["subject"] += [(subject, subject) for subject in options.subjects]
        items["year"] += [(str(year), str(year)) for year in options.years]
        for flag in options.mark_schemes:
            key, default = MARK_SCHEME_LABELS[flag]
            items["mark_scheme"].append((store.lookup(lang, key, default), flag_text(flag)))
        return items

    def set_options(
        self,
        options: FilterOptions,
        store: LocalizationStore,
        lang: str,
        selection: FilterSelection,
    ) -> None:
        """Rebuild all selectors, keeping the current selection. Emits nothing."""
        for name, entries in self.option_items(options, store, lang).items():
            self._fill_combo(self.combos[name], entries)
        self.set_selection(selection)

    def _fill_combo(self, combo: QComboBox, entries: Sequence[Tuple[str, str]]) -> None:
        combo.blockSignals(True)
        try:
            combo.clear()
            for label, value in entries:
                combo.addItem(label, value)
        finally:
            combo.blockSignals(False)

    def set_selection(self, selection: FilterSelection) -> None:
        """Show ``selection`` in the controls without emitting signals."""
        values = {
            "subject": selection.subject,
            "year": selection.year,
            "mark_scheme": None if is_unset(selection.mark_scheme) else flag_text(selection.mark_scheme),
        }
        for name, value in values.items():
            combo = self.combos[name]
            index = combo.findData("" if is_unset(value) else str(value))
            combo.blockSignals(True)
            combo.setCurrentIndex(max(index, 0))
            combo.blockSignals(False)

        query = selection.query or ""
        if self.query_edit.text() != query:
            self.query_edit.blockSignals(True)
            self.query_edit.setText(query)
            self.query_edit.blockSignals(False)

    def set_search_enabled(self, enabled: bool) -> None:
        self.search_btn.setEnabled(enabled)

    def current_value(self, name: str) -> Optional[str]:
        return self.combos[name].currentData() or None

    # ─────────────────────────────────────────────────────────────────────
    # Slots
    # ─────────────────────────────────────────────────────────────────────

    def _on_combo_changed(self, name: str) -> None:
        self.filterChanged.emit(name, self.combos[name].currentData() or "")
