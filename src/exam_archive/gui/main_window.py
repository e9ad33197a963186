"""
Main Window for the Exam Archive Browser.

The window renders a BrowserState and forwards user actions as signals;
it never filters or loads anything itself.
"""
import logging
import queue
from typing import Optional

from PySide6.QtCore import QLocale, Qt, QTimer
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from exam_archive.config import BrowserConfig
from exam_archive.gui.state import BrowserState, LoadStatus
from exam_archive.gui.styles.theme import apply_shadow
from exam_archive.gui.utils.labels import mark_i18n, relabel
from exam_archive.gui.utils.links import open_exam_file
from exam_archive.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from exam_archive.gui.widgets.filter_bar import FilterBar
from exam_archive.gui.widgets.language_bar import LanguageBar
from exam_archive.gui.widgets.result_grid import MESSAGE_ERROR, ResultGrid

logger = logging.getLogger(__name__)

LOADING_DEFAULT = "Loading..."
ERROR_DEFAULT = "Error loading exams: {message}. Please try again later."
STATUS_MESSAGE_MS = 8000


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[BrowserConfig] = None):
        super().__init__()
        self.config = config or BrowserConfig()
        self._rendered_grid = None
        self._rendered_options = None

        self.setWindowTitle(self.config.window_title)
        self.resize(1100, 780)
        self.setMinimumSize(720, 520)

        # Central Widget
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        # --- Header ---
        self.header = QWidget()
        self.header.setObjectName("mainHeader")
        self.header.setFixedHeight(72)
        header_layout = QHBoxLayout(self.header)
        header_layout.setContentsMargins(24, 12, 24, 12)

        self.title_label = QLabel(self.config.window_title)
        self.title_label.setObjectName("mainTitle")
        mark_i18n(self.title_label, "title", self.config.window_title)
        header_layout.addWidget(self.title_label, alignment=Qt.AlignmentFlag.AlignVCenter)
        header_layout.addStretch()

        self.language_bar = LanguageBar()
        header_layout.addWidget(self.language_bar, alignment=Qt.AlignmentFlag.AlignVCenter)
        apply_shadow(self.header, blur_radius=12, x_offset=0, y_offset=2)
        self.main_layout.addWidget(self.header)

        # --- Filters ---
        self.filter_bar = FilterBar()
        self.main_layout.addWidget(self.filter_bar)

        self.count_label = QLabel("")
        self.count_label.setObjectName("resultCount")
        self.count_label.setContentsMargins(24, 0, 24, 0)
        self.main_layout.addWidget(self.count_label)

        # --- Results ---
        self.result_grid = ResultGrid()
        self.result_grid.downloadRequested.connect(self._open_download)
        self.main_layout.addWidget(self.result_grid, stretch=1)

        # Warnings from worker threads reach the status bar through a queue
        self.log_queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

    # ─────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────

    def available_languages(self, state: BrowserState) -> list:
        languages = list(self.config.languages or state.translations.languages)
        if state.language not in languages:
            languages.append(state.language)
        return languages

    def apply_state(self, state: BrowserState) -> None:
        """Make the window reflect ``state``."""
        store, lang = state.translations, state.language

        self.setLocale(QLocale(lang))
        self.setProperty("lang", lang)
        self.setWindowTitle(store.lookup(lang, "title", self.config.window_title))
        self.language_bar.set_languages(self.available_languages(state), lang)

        options_key = (state.options, lang, id(store))
        if options_key != self._rendered_options:
            self.filter_bar.set_options(state.options, store, lang, state.selection)
            self._rendered_options = options_key
        else:
            self.filter_bar.set_selection(state.selection)
        self.filter_bar.set_search_enabled(state.search_enabled)

        grid_key = (state.status, state.results, state.error, lang, id(store), state.catalog.source)
        if grid_key != self._rendered_grid:
            self._render_grid(state)
            self._rendered_grid = grid_key

        if state.results is None:
            self.count_label.setText("")
        else:
            self.count_label.setText(store.results_text(lang, len(state.results)))

        relabel(self, store, lang)

    def _render_grid(self, state: BrowserState) -> None:
        store, lang = state.translations, state.language
        if state.status is LoadStatus.LOADING:
            self.result_grid.show_message(
                store.lookup(lang, "loading", LOADING_DEFAULT), key="loading", default=LOADING_DEFAULT
            )
        elif state.status is LoadStatus.ERROR:
            default = ERROR_DEFAULT.format(message=state.error)
            self.result_grid.show_message(
                store.lookup(lang, "error", default), MESSAGE_ERROR, key="error", default=default
            )
        elif state.results is None:
            self.result_grid.clear()
        else:
            self.result_grid.render(state.results, store, lang, state.catalog.source)

    # ─────────────────────────────────────────────────────────────────────
    # Downloads and status
    # ─────────────────────────────────────────────────────────────────────

    def _open_download(self, location: str) -> None:
        success, error = open_exam_file(location)
        if not success:
            logger.warning(error)

    def _drain_log_queue(self) -> None:
        while True:
            try:
                message, level = self.log_queue.get_nowait()
            except queue.Empty:
                break
            self.statusBar().showMessage(f"{level.title()}: {message}", STATUS_MESSAGE_MS)

    def closeEvent(self, event):
        self.log_timer.stop()
        detach_queue_handler(self._log_handler)
        super().closeEvent(event)
