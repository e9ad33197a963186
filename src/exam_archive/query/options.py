"""
Module: query.options

Purpose:
    Derive the values offered by the subject and year selectors.

Key Functions:
    - build_options(): Distinct subjects (ascending) and years (descending)

Key Classes:
    - FilterOptions: Container for selector values

Used By:
    - gui.state: Rebuilt on every catalog load
    - gui.main_window: Selector population
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from exam_archive.core.models import Catalog

# Not derived from data: the selector always offers both states.
MARK_SCHEME_VALUES: Tuple[bool, ...] = (True, False)


@dataclass(frozen=True)
class FilterOptions:
    """
    Selector values derived from a catalog.

    Attributes:
        subjects: Distinct subjects, sorted ascending
        years: Distinct years, sorted descending (most recent first)

    Example:
        >>> build_options(catalog)
        FilterOptions(subjects=('Bio', 'Math'), years=(2020, 2019))
    """

    subjects: Tuple[str, ...] = ()
    years: Tuple[int, ...] = ()

    @property
    def mark_schemes(self) -> Tuple[bool, ...]:
        return MARK_SCHEME_VALUES


def build_options(catalog: Catalog) -> FilterOptions:
    """Collect distinct subjects and years from ``catalog``."""
    subjects = {record.subject for record in catalog}
    years = {record.year for record in catalog}
    return FilterOptions(
        subjects=tuple(sorted(subjects)),
        years=tuple(sorted(years, reverse=True)),
    )
