"""
Module: records

Purpose:
    Provides the ExamRecord and Catalog dataclasses - the data passed from
    the loader to the query engine and the presentation layer.

Key Classes:
    - ExamRecord: One downloadable exam paper (immutable)
    - Catalog: Ordered, immutable snapshot of the records of one load

Dependencies:
    - dataclasses (std)

Used By:
    - core.schemas.validator
    - loading.loader
    - query.options, query.engine
    - gui.state, gui.widgets.exam_card
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple, Union


RecordId = Union[str, int]


@dataclass(frozen=True)
class ExamRecord:
    """
    A single exam paper entry (immutable).

    Attributes:
        id: Opaque unique identifier (string or number in the source JSON)
        subject: Short subject label like "Math"
        year: Exam year like 2021
        title: Display title
        file: Locator of the paper, used as the download target
        has_mark_scheme: Whether a mark scheme accompanies the paper

    Example:
        >>> record = ExamRecord.from_dict({
        ...     "id": "m21", "subject": "Math", "year": 2021,
        ...     "title": "Paper 1", "file": "papers/m21.pdf",
        ...     "hasMarkScheme": True,
        ... })
        >>> record.has_mark_scheme
        True
    """

    id: RecordId
    subject: str
    year: int
    title: str
    file: str
    has_mark_scheme: bool

    @property
    def mark_scheme_flag(self) -> str:
        """Mark-scheme flag in its string form ("true" / "false")."""
        return "true" if self.has_mark_scheme else "false"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExamRecord":
        """
        Build a record from a catalog payload item.

        The item must already have passed ``is_valid_record``.
        """
        return cls(
            id=data["id"],
            subject=data["subject"],
            year=data["year"],
            title=data["title"],
            file=data["file"],
            has_mark_scheme=data["hasMarkScheme"],
        )


@dataclass(frozen=True)
class Catalog:
    """
    Validated exam records of one load, in source order.

    A catalog is never edited: a reload produces a new instance.

    Attributes:
        records: Records in the order they appeared in the payload
        source: Locator the catalog was loaded from ("" when not loaded)
    """

    records: Tuple[ExamRecord, ...] = ()
    source: str = ""

    @classmethod
    def empty(cls) -> "Catalog":
        return cls()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ExamRecord]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)
