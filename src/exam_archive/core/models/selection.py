"""
Module: selection

Purpose:
    FilterSelection - the transient set of user-chosen filter values.
    A new selection is created on every interaction; nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union


YearValue = Union[int, str]
MarkSchemeValue = Union[bool, str]


def is_unset(value: object) -> bool:
    """A filter is unset when it is None or an empty string."""
    return value is None or value == ""


def flag_text(value: MarkSchemeValue) -> str:
    """Normalize a mark-scheme flag to "true" / "false"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class FilterSelection:
    """
    Current filter values.

    Attributes:
        subject: Exact-match subject, or None
        year: Year to match (compared as string), or None
        mark_scheme: True/False (or "true"/"false"), or None
        query: Case-insensitive title substring, or None
    """

    subject: Optional[str] = None
    year: Optional[YearValue] = None
    mark_scheme: Optional[MarkSchemeValue] = None
    query: Optional[str] = None

    @property
    def has_filters(self) -> bool:
        """True when any of subject, year or mark scheme is set.

        The text query does not count: it has its own trigger (Enter).
        """
        return not (
            is_unset(self.subject)
            and is_unset(self.year)
            and is_unset(self.mark_scheme)
        )

    def with_value(self, field_name: str, value: object) -> "FilterSelection":
        """Return a copy with one field changed ("" is stored as None)."""
        if field_name not in ("subject", "year", "mark_scheme", "query"):
            raise ValueError(f"Unknown filter field: {field_name!r}")
        return replace(self, **{field_name: None if is_unset(value) else value})
