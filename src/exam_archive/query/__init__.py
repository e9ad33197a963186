"""
Module: query

Purpose:
    Pure filtering: selector options and the query engine.
"""

from .engine import matches, run_query
from .options import MARK_SCHEME_VALUES, FilterOptions, build_options

__all__ = [
    "MARK_SCHEME_VALUES",
    "FilterOptions",
    "build_options",
    "matches",
    "run_query",
]
