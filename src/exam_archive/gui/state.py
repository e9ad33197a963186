"""
Browser state and its reducer.

Every user interaction and every load completion is an event. ``reduce``
turns (state, event) into a new immutable state; the window then renders
that state. Nothing in this module touches Qt.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from exam_archive.core.models import Catalog, ExamRecord, FilterSelection
from exam_archive.i18n import DEFAULT_LANGUAGE, LocalizationStore
from exam_archive.query import FilterOptions, build_options, run_query


class LoadStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


# ─────────────────────────────────────────────────────────────────────────────
# Events
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CatalogLoaded:
    catalog: Catalog


@dataclass(frozen=True)
class CatalogFailed:
    message: str


@dataclass(frozen=True)
class TranslationsLoaded:
    store: LocalizationStore


@dataclass(frozen=True)
class TranslationsFailed:
    message: str


@dataclass(frozen=True)
class FilterChanged:
    """A selector changed. ``field`` is "subject", "year" or "mark_scheme"."""
    field: str
    value: object


@dataclass(frozen=True)
class QueryTextChanged:
    text: str


@dataclass(frozen=True)
class SearchRequested:
    pass


@dataclass(frozen=True)
class ResetRequested:
    pass


@dataclass(frozen=True)
class LanguageChanged:
    language: str


FILTER_FIELDS = ("subject", "year", "mark_scheme")


# ─────────────────────────────────────────────────────────────────────────────
# State
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BrowserState:
    """
    Everything the window renders from (immutable).

    Attributes:
        language: Current language code
        translations: Translation table (empty until loaded)
        catalog: Current catalog (empty until loaded, and after a failure)
        options: Selector values derived from the catalog
        selection: Current filter values
        results: Rendered records; None means the result area is cleared
        status: Catalog load status
        error: Catalog load error text, when status is ERROR
        translation_error: Translation load error text, if any
    """

    language: str = DEFAULT_LANGUAGE
    translations: LocalizationStore = field(default_factory=LocalizationStore)
    catalog: Catalog = field(default_factory=Catalog.empty)
    options: FilterOptions = field(default_factory=FilterOptions)
    selection: FilterSelection = field(default_factory=FilterSelection)
    results: Optional[Tuple[ExamRecord, ...]] = None
    status: LoadStatus = LoadStatus.LOADING
    error: Optional[str] = None
    translation_error: Optional[str] = None

    @property
    def search_enabled(self) -> bool:
        """Search is enabled iff a subject, year or mark-scheme filter is set."""
        return self.selection.has_filters

    @property
    def is_ready(self) -> bool:
        return self.status is LoadStatus.READY


def _with_query(state: BrowserState) -> BrowserState:
    if not state.is_ready:
        return state
    return replace(state, results=run_query(state.catalog, state.selection))


def reduce(state: BrowserState, event: object) -> BrowserState:
    """
    Apply one event.

    Args:
        state: Current state
        event: One of the event dataclasses in this module

    Returns:
        The next state (``state`` itself when nothing changes)

    Raises:
        TypeError: For an unknown event type
    """
    if isinstance(event, CatalogLoaded):
        state = replace(
            state,
            catalog=event.catalog,
            options=build_options(event.catalog),
            status=LoadStatus.READY,
            error=None,
        )
        return _with_query(state)

    if isinstance(event, CatalogFailed):
        return replace(
            state,
            catalog=Catalog.empty(),
            options=FilterOptions(),
            results=None,
            status=LoadStatus.ERROR,
            error=event.message,
        )

    if isinstance(event, TranslationsLoaded):
        return replace(state, translations=event.store, translation_error=None)

    if isinstance(event, TranslationsFailed):
        return replace(state, translation_error=event.message)

    if isinstance(event, FilterChanged):
        if event.field not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter: {event.field!r}")
        selection = state.selection.with_value(event.field, event.value)
        if selection == state.selection:
            return state
        return _with_query(replace(state, selection=selection))

    if isinstance(event, QueryTextChanged):
        # Typing alone does not search; Enter or the search button does.
        return replace(state, selection=state.selection.with_value("query", event.text))

    if isinstance(event, SearchRequested):
        return _with_query(state)

    if isinstance(event, ResetRequested):
        return replace(state, selection=FilterSelection(), results=None)

    if isinstance(event, LanguageChanged):
        if event.language == state.language:
            return state
        return replace(state, language=event.language)

    raise TypeError(f"Unknown event: {event!r}")
