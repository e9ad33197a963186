"""
Unit Tests for ExamRecord, Catalog and FilterSelection.
"""

import dataclasses

import pytest

from exam_archive.core.models import Catalog, ExamRecord, FilterSelection, flag_text, is_unset


class TestExamRecord:
    """Tests for ExamRecord."""

    def test_from_dict_maps_payload_keys(self, record_payload):
        record = ExamRecord.from_dict(record_payload[0])
        assert record.id == 1
        assert record.subject == "Math"
        assert record.year == 2020
        assert record.file == "papers/math-2020.pdf"
        assert record.has_mark_scheme is True

    def test_mark_scheme_flag(self, record_payload):
        assert ExamRecord.from_dict(record_payload[0]).mark_scheme_flag == "true"
        assert ExamRecord.from_dict(record_payload[1]).mark_scheme_flag == "false"

    def test_is_immutable(self, record_payload):
        record = ExamRecord.from_dict(record_payload[0])
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Changed"


class TestCatalog:
    """Tests for Catalog container behaviour."""

    def test_empty(self):
        catalog = Catalog.empty()
        assert len(catalog) == 0
        assert not catalog
        assert catalog.source == ""

    def test_iterates_in_source_order(self, catalog):
        assert [r.id for r in catalog] == [1, "b19", 3]
        assert len(catalog) == 3
        assert catalog


class TestFilterSelection:
    """Tests for FilterSelection."""

    def test_default_is_empty(self):
        selection = FilterSelection()
        assert not selection.has_filters

    @pytest.mark.parametrize("field", ["subject", "year", "mark_scheme"])
    def test_any_selector_counts_as_filter(self, field):
        selection = FilterSelection().with_value(field, "x")
        assert selection.has_filters

    def test_query_alone_is_not_a_filter(self):
        """The text query has its own trigger and does not enable search."""
        selection = FilterSelection(query="paper")
        assert not selection.has_filters

    def test_false_mark_scheme_is_a_filter(self):
        assert FilterSelection(mark_scheme=False).has_filters

    def test_with_value_stores_empty_string_as_none(self):
        selection = FilterSelection(subject="Math").with_value("subject", "")
        assert selection.subject is None

    def test_with_value_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            FilterSelection().with_value("colour", "red")


def test_is_unset():
    assert is_unset(None)
    assert is_unset("")
    assert not is_unset(0)
    assert not is_unset(False)


def test_flag_text():
    assert flag_text(True) == "true"
    assert flag_text(False) == "false"
    assert flag_text("true") == "true"
