"""
Module: loading.loader

Purpose:
    Load the exam catalog and the translation table, validating both.

Key Functions:
    - load_catalog(): Fetch, validate and wrap exam records in a Catalog
    - load_translations(): Fetch and validate the translation table

Key Classes:
    - LoadError: Exception for loading failures

Dependencies:
    - exam_archive.fetching: fetch_json with retry
    - exam_archive.core.schemas.validator: payload checks
    - exam_archive.core.models: ExamRecord, Catalog
    - exam_archive.i18n: LocalizationStore

Used By:
    - gui.workers.ResourceWorker
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import requests

from exam_archive.core.models import Catalog, ExamRecord
from exam_archive.core.schemas.validator import (
    ValidationError,
    partition_records,
    validate_catalog_payload,
    validate_translations_payload,
)
from exam_archive.fetching import (
    DEFAULT_DELAY_MS,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    FetchError,
    fetch_json,
)
from exam_archive.i18n import LocalizationStore

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Error loading a resource (network, decode or payload shape)."""

    def __init__(self, message: str, location: str = ""):
        super().__init__(message)
        self.location = location


def _fetch(
    location: str,
    retries: int,
    delay_ms: int,
    session: Optional[requests.Session],
    timeout: float,
    sleep: Callable[[float], None],
):
    try:
        return fetch_json(
            location,
            retries=retries,
            delay_ms=delay_ms,
            session=session,
            timeout=timeout,
            sleep=sleep,
        )
    except FetchError as e:
        raise LoadError(str(e), location) from e


def load_catalog(
    location: str,
    *,
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = DEFAULT_DELAY_MS,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    sleep: Callable[[float], None] = time.sleep,
) -> Catalog:
    """
    Load the exam catalog.

    Process:
    1. Fetch the JSON document (with retries)
    2. Check it is an array
    3. Keep only items satisfying the record rules, in source order

    Malformed items are dropped silently (logged, never raised).

    Args:
        location: URL or path of the catalog JSON
        retries: Total fetch attempts
        delay_ms: Fixed wait between attempts
        session: Optional requests session
        timeout: Per-request timeout in seconds
        sleep: Sleep function, replaceable in tests

    Returns:
        Catalog of valid records

    Raises:
        LoadError: If fetching fails, the body is not JSON, or it is not a list

    Example:
        >>> catalog = load_catalog("data/exams.json")
        >>> len(catalog)
        42
    """
    payload = _fetch(location, retries, delay_ms, session, timeout, sleep)

    try:
        items = validate_catalog_payload(payload)
    except ValidationError as e:
        raise LoadError(str(e), location) from e

    valid, dropped = partition_records(items)
    if dropped:
        logger.info(f"Dropped {dropped} malformed record(s) from {location}")

    catalog = Catalog(
        records=tuple(ExamRecord.from_dict(item) for item in valid),
        source=location,
    )
    logger.info(f"Loaded {len(catalog)} exams from {location}")
    return catalog


def load_translations(
    location: str,
    *,
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = DEFAULT_DELAY_MS,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    sleep: Callable[[float], None] = time.sleep,
) -> LocalizationStore:
    """
    Load the translation table.

    Raises:
        LoadError: If fetching fails, the body is not JSON, or it is not an object
    """
    payload = _fetch(location, retries, delay_ms, session, timeout, sleep)

    try:
        tables = validate_translations_payload(payload)
    except ValidationError as e:
        raise LoadError(str(e), location) from e

    store = LocalizationStore(tables)
    logger.info(f"Loaded translations for {', '.join(store.languages) or 'no languages'}")
    return store
