"""
Module: gui.controller

Purpose:
    Connect the window to the pure state reducer and the background loaders.

Key Classes:
    - BrowserController: Owns the BrowserState, turns signals into events,
      and starts the two resource loads

Used By:
    - gui.app: Application start-up
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject, Signal, Slot

from exam_archive.config import BrowserConfig
from exam_archive.gui.main_window import MainWindow
from exam_archive.gui.state import (
    BrowserState,
    CatalogFailed,
    CatalogLoaded,
    FilterChanged,
    LanguageChanged,
    QueryTextChanged,
    ResetRequested,
    SearchRequested,
    TranslationsFailed,
    TranslationsLoaded,
    reduce,
)
from exam_archive.gui.workers import ResourceWorker
from exam_archive.loading import load_catalog, load_translations

logger = logging.getLogger(__name__)


class BrowserController(QObject):
    """
    Owns the browser state.

    Every window signal becomes an event; ``dispatch`` reduces it into a new
    state and hands that to ``MainWindow.apply_state``. All dispatching
    happens on the GUI thread: worker results arrive through queued signals.

    Attributes:
        state: Current BrowserState
        window: The rendered MainWindow
    """

    stateChanged = Signal(object)

    def __init__(
        self,
        window: MainWindow,
        config: BrowserConfig,
        *,
        catalog_loader: Optional[Callable[[], Any]] = None,
        translations_loader: Optional[Callable[[], Any]] = None,
    ):
        super().__init__(window)
        self.window = window
        self.config = config
        self.state = BrowserState(language=config.default_language)
        self._workers: List[ResourceWorker] = []

        self._catalog_loader = catalog_loader or partial(
            load_catalog,
            config.catalog_url,
            retries=config.retries,
            delay_ms=config.delay_ms,
            timeout=config.timeout_s,
        )
        self._translations_loader = translations_loader or partial(
            load_translations,
            config.translations_url,
            retries=config.retries,
            delay_ms=config.delay_ms,
            timeout=config.timeout_s,
        )

        bar = window.filter_bar
        bar.filterChanged.connect(self._on_filter_changed)
        bar.queryTextChanged.connect(self._on_query_text_changed)
        bar.searchRequested.connect(self._on_search)
        bar.resetRequested.connect(self._on_reset)
        window.language_bar.languageSelected.connect(self._on_language_selected)

        window.apply_state(self.state)

    # ─────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────

    def dispatch(self, event: object) -> BrowserState:
        """Reduce ``event`` into the state and re-render if it changed."""
        new_state = reduce(self.state, event)
        logger.debug(f"Event {type(event).__name__}")
        if new_state is not self.state:
            self.state = new_state
            self.window.apply_state(new_state)
            self.stateChanged.emit(new_state)
        return self.state

    # ─────────────────────────────────────────────────────────────────────
    # Loading
    # ─────────────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Start both loads concurrently; either may finish first."""
        translations = ResourceWorker("translations", self._translations_loader, self)
        translations.loaded.connect(self._on_translations_loaded)
        translations.failed.connect(self._on_translations_failed)

        catalog = ResourceWorker("catalog", self._catalog_loader, self)
        catalog.loaded.connect(self._on_catalog_loaded)
        catalog.failed.connect(self._on_catalog_failed)

        for worker in (translations, catalog):
            self._workers.append(worker)
            worker.start()

    def shutdown(self) -> None:
        """Block until in-flight loads finish (they cannot be cancelled)."""
        for worker in self._workers:
            if worker.isRunning():
                logger.info(f"Waiting for the {worker.name} load to finish")
                worker.wait()

    @Slot(object)
    def _on_catalog_loaded(self, catalog) -> None:
        self.dispatch(CatalogLoaded(catalog))

    @Slot(str)
    def _on_catalog_failed(self, message: str) -> None:
        self.dispatch(CatalogFailed(message))

    @Slot(object)
    def _on_translations_loaded(self, store) -> None:
        self.dispatch(TranslationsLoaded(store))

    @Slot(str)
    def _on_translations_failed(self, message: str) -> None:
        self.dispatch(TranslationsFailed(message))

    # ─────────────────────────────────────────────────────────────────────
    # User actions
    # ─────────────────────────────────────────────────────────────────────

    @Slot(str, object)
    def _on_filter_changed(self, name: str, value) -> None:
        self.dispatch(FilterChanged(name, value))

    @Slot(str)
    def _on_query_text_changed(self, text: str) -> None:
        self.dispatch(QueryTextChanged(text))

    @Slot()
    def _on_search(self) -> None:
        self.dispatch(SearchRequested())

    @Slot()
    def _on_reset(self) -> None:
        self.dispatch(ResetRequested())

    @Slot(str)
    def _on_language_selected(self, language: str) -> None:
        self.dispatch(LanguageChanged(language))
