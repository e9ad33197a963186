from .validator import (
    RECORD_FIELDS,
    ValidationError,
    is_valid_record,
    partition_records,
    record_problems,
    validate_catalog_payload,
    validate_translations_payload,
)

__all__ = [
    "RECORD_FIELDS",
    "ValidationError",
    "is_valid_record",
    "partition_records",
    "record_problems",
    "validate_catalog_payload",
    "validate_translations_payload",
]
