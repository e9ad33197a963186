import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import exam_archive
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from exam_archive.core.models import Catalog, ExamRecord
from exam_archive.i18n import LocalizationStore


# Common test fixtures
@pytest.fixture
def record_payload():
    """Return a list of valid catalog items."""
    return [
        {"id": 1, "subject": "Math", "year": 2020, "title": "Algebra Paper 1",
         "file": "papers/math-2020.pdf", "hasMarkScheme": True},
        {"id": "b19", "subject": "Bio", "year": 2019, "title": "Cells and Tissues",
         "file": "papers/bio-2019.pdf", "hasMarkScheme": False},
        {"id": 3, "subject": "Math", "year": 2020, "title": "Geometry Paper 2",
         "file": "papers/math-2020-2.pdf", "hasMarkScheme": False},
    ]


@pytest.fixture
def catalog(record_payload):
    """Catalog built from ``record_payload``."""
    return Catalog(
        records=tuple(ExamRecord.from_dict(item) for item in record_payload),
        source="data/exams.json",
    )


@pytest.fixture
def translations():
    """Return a two-language translation table (French is incomplete)."""
    return {
        "en": {
            "title": "Exam Archive",
            "allSubjects": "All Subjects",
            "download": "Download",
            "results": "{n} results",
            "noResults": "Nothing found",
        },
        "fr": {
            "title": "Archives",
            "allSubjects": "Toutes les matières",
            "download": "Télécharger",
            "results": "{n} résultats",
        },
    }


@pytest.fixture
def store(translations):
    return LocalizationStore(translations)
