"""Tests for build_options."""

from exam_archive.core.models import Catalog, ExamRecord
from exam_archive.query import MARK_SCHEME_VALUES, FilterOptions, build_options


def _catalog(pairs):
    return Catalog(records=tuple(
        ExamRecord(id=i, subject=subject, year=year, title=f"Paper {i}",
                   file=f"p{i}.pdf", has_mark_scheme=bool(i % 2))
        for i, (subject, year) in enumerate(pairs, start=1)
    ))


def test_dedup_and_sort():
    """Subjects ascend, years descend, duplicates collapse."""
    options = build_options(_catalog([("Math", 2020), ("Bio", 2019), ("Math", 2020)]))

    assert options.subjects == ("Bio", "Math")
    assert options.years == (2020, 2019)


def test_subjects_sort_case_sensitively():
    options = build_options(_catalog([("biology", 2020), ("Chemistry", 2021), ("Art", 2018)]))
    assert options.subjects == ("Art", "Chemistry", "biology")
    assert options.years == (2021, 2020, 2018)


def test_empty_catalog():
    options = build_options(Catalog.empty())
    assert options == FilterOptions()
    assert options.subjects == ()
    assert options.years == ()


def test_mark_scheme_values_are_fixed():
    """Both states are always offered, even if the data only has one."""
    options = build_options(_catalog([("Math", 2020)]))
    assert options.mark_schemes == MARK_SCHEME_VALUES == (True, False)
