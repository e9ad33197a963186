"""
Module: loading

Purpose:
    Catalog and translation loading on top of the retrying fetcher.

Key Functions:
    - load_catalog(): Load validated exam records
    - load_translations(): Load the translation table
"""

from .loader import LoadError, load_catalog, load_translations

__all__ = [
    "LoadError",
    "load_catalog",
    "load_translations",
]
