"""
Core Models Package

Immutable data models shared by the loader, the query engine and the GUI.

All models in this package are frozen dataclasses, so a catalog can be handed
from a loader thread to the GUI thread without copying.
"""

from .records import Catalog, ExamRecord
from .selection import FilterSelection, flag_text, is_unset

__all__ = [
    "Catalog",
    "ExamRecord",
    "FilterSelection",
    "flag_text",
    "is_unset",
]
