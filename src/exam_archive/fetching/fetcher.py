"""
Module: fetching.fetcher

Purpose:
    Retrieve a JSON resource, retrying failed attempts with a fixed delay.

Key Functions:
    - fetch_json(): Fetch and decode a JSON document with retries
    - resolve_location(): Resolve a relative locator against another one
    - is_remote(): Whether a locator is an HTTP(S) URL

Key Classes:
    - FetchError: Base class for fetch failures
    - NetworkError: Non-success status or transport failure (retried)
    - DecodeError: Body is not valid JSON (not retried)

Dependencies:
    - requests: HTTP transport

Used By:
    - loading.loader
    - gui.utils.links
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional
from urllib.parse import urljoin, urlparse

import requests

logger = logging.getLogger(__name__)


DEFAULT_RETRIES = 3
DEFAULT_DELAY_MS = 1000
DEFAULT_TIMEOUT = 10.0
HEADERS = {"Accept": "application/json"}


class FetchError(Exception):
    """Base class for failures to retrieve a resource."""

    def __init__(self, message: str, location: str = ""):
        super().__init__(message)
        self.location = location


class NetworkError(FetchError):
    """
    A fetch attempt failed: non-success HTTP status or transport error.

    Attributes:
        status: HTTP status code, or None when no response was received
        status_text: HTTP reason phrase or the transport error text
    """

    def __init__(self, location: str, status: Optional[int], status_text: str):
        if status is None:
            message = f"Failed to load {location}: {status_text}"
        else:
            message = f"Failed to load {location}: {status} {status_text}"
        super().__init__(message, location)
        self.status = status
        self.status_text = status_text


class DecodeError(FetchError):
    """The resource was retrieved but its body is not valid JSON."""


def is_remote(location: str) -> bool:
    return urlparse(location).scheme in ("http", "https")


def _local_path(location: str) -> Path:
    parsed = urlparse(location)
    if parsed.scheme == "file":
        return Path(parsed.path)
    return Path(location)


def resolve_location(base: str, location: str) -> str:
    """
    Resolve ``location`` relative to the resource at ``base``.

    Absolute URLs and absolute paths are returned unchanged.

    Example:
        >>> resolve_location("https://x.org/data/exams.json", "p/1.pdf")
        'https://x.org/data/p/1.pdf'
        >>> resolve_location("/srv/data/exams.json", "p/1.pdf")
        '/srv/data/p/1.pdf'
    """
    if urlparse(location).scheme in ("http", "https", "file"):
        return location
    if is_remote(base):
        return urljoin(base, location)
    if not base or Path(location).is_absolute():
        return location
    return (_local_path(base).parent / location).as_posix()


def _attempt_remote(http: requests.Session, location: str, timeout: float) -> Any:
    try:
        response = http.get(location, timeout=timeout, headers=HEADERS)
    except requests.RequestException as e:
        raise NetworkError(location, None, str(e)) from e

    if not response.ok:
        raise NetworkError(location, response.status_code, response.reason or "")

    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON from {location}: {e}", location) from e


def _attempt_local(location: str) -> Any:
    path = _local_path(location)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Invalid UTF-8 in {location}: {e}", location) from e
    except OSError as e:
        raise NetworkError(location, None, e.strerror or str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON in {location}: {e}", location) from e


def fetch_json(
    location: str,
    *,
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = DEFAULT_DELAY_MS,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    sleep: Callable[[float], None] = time.sleep,
) -> Any:
    """
    Fetch a JSON document, retrying failed attempts.

    HTTP(S) locations go through ``requests``; anything else is read from
    disk. Each failed attempt waits ``delay_ms`` before the next one (fixed,
    not exponential). Only the error of the last attempt is raised.

    Args:
        location: URL or path of the document
        retries: Total number of attempts (>= 1)
        delay_ms: Wait between attempts in milliseconds
        session: Optional requests session (one is created if omitted)
        timeout: Per-request timeout in seconds
        sleep: Sleep function, replaceable in tests

    Returns:
        The decoded JSON value

    Raises:
        NetworkError: If every attempt failed
        DecodeError: If a retrieved body is not JSON (never retried)
        ValueError: If retries < 1
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1: {retries}")

    remote = is_remote(location)
    owns_session = remote and session is None
    http = (session or requests.Session()) if remote else None

    try:
        last_error: Optional[NetworkError] = None
        for attempt in range(1, retries + 1):
            try:
                if remote:
                    return _attempt_remote(http, location, timeout)
                return _attempt_local(location)
            except NetworkError as e:
                last_error = e
                logger.warning(f"Fetch attempt {attempt}/{retries} failed: {e}")
            if attempt < retries:
                sleep(delay_ms / 1000.0)
        raise last_error
    finally:
        if owns_session:
            http.close()
