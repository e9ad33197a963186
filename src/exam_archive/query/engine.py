"""
Module: query.engine

Purpose:
    Conjunctive filtering of a catalog by the current selection.

Key Functions:
    - matches(): Whether one record satisfies every set filter
    - run_query(): Matching records, in catalog order

Used By:
    - gui.state: Search, filter change and catalog load
"""

from __future__ import annotations

import logging
from typing import Tuple

from exam_archive.core.models import Catalog, ExamRecord, FilterSelection, flag_text, is_unset

logger = logging.getLogger(__name__)


def matches(record: ExamRecord, selection: FilterSelection) -> bool:
    """
    Test a record against every set filter (logical AND).

    - subject: exact, case-sensitive
    - year: compared as strings
    - mark scheme: compared as "true" / "false"
    - query: case-insensitive substring of the title
    """
    if not is_unset(selection.subject) and record.subject != selection.subject:
        return False
    if not is_unset(selection.year) and str(record.year) != str(selection.year):
        return False
    if not is_unset(selection.mark_scheme) and record.mark_scheme_flag != flag_text(selection.mark_scheme):
        return False
    if not is_unset(selection.query) and selection.query.casefold() not in record.title.casefold():
        return False
    return True


def run_query(catalog: Catalog, selection: FilterSelection) -> Tuple[ExamRecord, ...]:
    """
    Return the records matching ``selection``.

    No ranking: the result is the catalog order with non-matching
    records removed. An empty selection returns the whole catalog.
    """
    results = tuple(record for record in catalog if matches(record, selection))
    logger.debug(f"Query {selection} matched {len(results)}/{len(catalog)} exams")
    return results
