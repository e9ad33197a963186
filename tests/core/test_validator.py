"""
Unit Tests for Payload Validation

Tests for the validator module.
"""

import pytest

from exam_archive.core.schemas.validator import (
    ValidationError,
    is_valid_record,
    partition_records,
    record_problems,
    validate_catalog_payload,
    validate_translations_payload,
)


class TestRecordProblems:
    """Tests for record_problems / is_valid_record."""

    @pytest.fixture
    def valid_record(self) -> dict:
        return {
            "id": "m21",
            "subject": "Math",
            "year": 2021,
            "title": "Paper 1",
            "file": "papers/m21.pdf",
            "hasMarkScheme": False,
        }

    def test_valid_record(self, valid_record):
        assert record_problems(valid_record) == []
        assert is_valid_record(valid_record)

    def test_numeric_id_accepted(self, valid_record):
        valid_record["id"] = 7
        assert is_valid_record(valid_record)

    @pytest.mark.parametrize("field", ["id", "subject", "year", "title", "file", "hasMarkScheme"])
    def test_missing_field(self, valid_record, field):
        del valid_record[field]
        assert record_problems(valid_record) == [f"Missing field: {field}"]

    @pytest.mark.parametrize("field", ["subject", "title", "file"])
    def test_empty_text_field(self, valid_record, field):
        valid_record[field] = ""
        assert not is_valid_record(valid_record)

    @pytest.mark.parametrize("value", ["true", 1, 0, None])
    def test_mark_scheme_must_be_boolean(self, valid_record, value):
        valid_record["hasMarkScheme"] = value
        assert not is_valid_record(valid_record)

    @pytest.mark.parametrize("value", [0, "2021", True])
    def test_invalid_year(self, valid_record, value):
        valid_record["year"] = value
        assert not is_valid_record(valid_record)

    @pytest.mark.parametrize("value", ["", 0, False])
    def test_invalid_id(self, valid_record, value):
        valid_record["id"] = value
        assert not is_valid_record(valid_record)

    def test_non_object_item(self):
        assert not is_valid_record(["Math", 2021])


class TestPartitionRecords:
    """Tests for partition_records."""

    def test_drops_only_malformed_items(self, record_payload):
        broken = dict(record_payload[0])
        del broken["file"]
        valid, dropped = partition_records([broken, *record_payload])

        assert dropped == 1
        assert valid == record_payload

    def test_keeps_source_order(self, record_payload):
        valid, dropped = partition_records(list(reversed(record_payload)))
        assert dropped == 0
        assert [item["id"] for item in valid] == [3, "b19", 1]


class TestPayloadShape:
    """Tests for the whole-document checks."""

    def test_catalog_must_be_list(self):
        with pytest.raises(ValidationError, match="must be a list"):
            validate_catalog_payload({"exams": []})

    def test_catalog_list_passes_through(self, record_payload):
        assert validate_catalog_payload(record_payload) is record_payload

    def test_translations_must_be_object(self):
        with pytest.raises(ValidationError):
            validate_translations_payload(["en"])

    def test_translations_drop_unusable_entries(self):
        tables = validate_translations_payload({
            "en": {"download": "Download", "broken": 3},
            "de": "not a table",
        })
        assert tables == {"en": {"download": "Download"}}
