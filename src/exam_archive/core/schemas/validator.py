"""
Payload Validation Utilities

Validates the two JSON documents the browser consumes.

Catalog items are checked one by one: an item that is missing a field, has an
empty value, or whose ``hasMarkScheme`` is not a JSON boolean is dropped.
Dropping is not an error; only a payload of the wrong overall shape raises.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)


RECORD_FIELDS = ("id", "subject", "year", "title", "file", "hasMarkScheme")


class ValidationError(Exception):
    """Raised when a payload does not have the expected overall shape."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_integer(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def record_problems(data: Any) -> List[str]:
    """
    List the reasons a catalog item would be dropped.

    Args:
        data: One item of the catalog array

    Returns:
        Human-readable problems; empty when the item is valid
    """
    if not isinstance(data, dict):
        return [f"Item is not an object: {type(data).__name__}"]

    missing = [f for f in RECORD_FIELDS if f not in data or data[f] is None]
    if missing:
        return [f"Missing field: {f}" for f in missing]

    problems = []
    record_id = data["id"]
    if not (_is_text(record_id) or (_is_integer(record_id) and record_id != 0)):
        problems.append(f"Invalid id: {record_id!r}")
    for name in ("subject", "title", "file"):
        if not _is_text(data[name]):
            problems.append(f"Invalid {name}: {data[name]!r}")
    if not (_is_integer(data["year"]) and data["year"] != 0):
        problems.append(f"Invalid year: {data['year']!r}")
    if not isinstance(data["hasMarkScheme"], bool):
        problems.append(f"hasMarkScheme must be a boolean: {data['hasMarkScheme']!r}")
    return problems


def is_valid_record(data: Any) -> bool:
    """True when the item satisfies every ExamRecord field rule."""
    return not record_problems(data)


def partition_records(payload: List[Any]) -> Tuple[List[Dict[str, Any]], int]:
    """
    Split catalog items into valid ones (source order kept) and a drop count.

    Each dropped item is logged at DEBUG with its problems.
    """
    valid = []
    dropped = 0
    for index, item in enumerate(payload):
        problems = record_problems(item)
        if problems:
            dropped += 1
            logger.debug(f"Dropping catalog item {index}: {'; '.join(problems)}")
            continue
        valid.append(item)
    return valid, dropped


def validate_catalog_payload(payload: Any) -> List[Any]:
    """
    Check the catalog document is an array.

    Raises:
        ValidationError: If the payload is not a list
    """
    if not isinstance(payload, list):
        raise ValidationError(
            f"Catalog payload must be a list, got {type(payload).__name__}",
            path="",
        )
    return payload


def validate_translations_payload(payload: Any) -> Dict[str, Dict[str, str]]:
    """
    Check the translation document and keep only usable entries.

    Language entries that are not objects and templates that are not strings
    are dropped with a warning.

    Raises:
        ValidationError: If the payload is not an object
    """
    if not isinstance(payload, dict):
        raise ValidationError(
            f"Translation payload must be an object, got {type(payload).__name__}",
            path="",
        )

    tables: Dict[str, Dict[str, str]] = {}
    for lang, messages in payload.items():
        if not isinstance(messages, dict):
            logger.warning(f"Ignoring translations for {lang!r}: not an object")
            continue
        table = {k: v for k, v in messages.items() if isinstance(v, str)}
        skipped = len(messages) - len(table)
        if skipped:
            logger.warning(f"Ignoring {skipped} non-string message(s) for {lang!r}")
        tables[str(lang)] = table
    return tables
