"""
Module: fetching

Purpose:
    JSON resource retrieval with a bounded, fixed-delay retry loop.
"""

from .fetcher import (
    DEFAULT_DELAY_MS,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    DecodeError,
    FetchError,
    NetworkError,
    fetch_json,
    is_remote,
    resolve_location,
)

__all__ = [
    "DEFAULT_DELAY_MS",
    "DEFAULT_RETRIES",
    "DEFAULT_TIMEOUT",
    "DecodeError",
    "FetchError",
    "NetworkError",
    "fetch_json",
    "is_remote",
    "resolve_location",
]
