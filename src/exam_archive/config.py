"""
Module: config

Purpose:
    Configuration dataclass for the browser. Immutable configuration with
    validation on construction, read from defaults, an optional JSON file
    and command-line flags (in increasing precedence).

Key Classes:
    - BrowserConfig: Data locations, retry policy and language settings

Key Functions:
    - load_config(): Read a JSON config file (falls back to defaults)
    - build_arg_parser(): Command-line flags
    - config_from_args(): Merge file and flags into a BrowserConfig

Used By:
    - gui.app: Application start-up
    - gui.controller: Loader parameters
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from exam_archive.fetching import (
    DEFAULT_DELAY_MS,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    is_remote,
)
from exam_archive.i18n import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


DEFAULT_CATALOG_URL = "data/exams.json"
DEFAULT_TRANSLATIONS_URL = "data/lang.json"


@dataclass(frozen=True)
class BrowserConfig:
    """
    Configuration for the exam browser (immutable).

    Attributes:
        catalog_url: URL or path of the exam catalog JSON
        translations_url: URL or path of the translation JSON
        retries: Fetch attempts per resource
        delay_ms: Fixed wait between attempts
        timeout_s: Per-request timeout
        default_language: Language selected at start-up
        languages: Languages offered by the selector; empty means
            "whatever the translation table contains"
        window_title: Fallback window title

    Example:
        >>> config = BrowserConfig(catalog_url="https://example.org/exams.json")
        >>> config.retries
        3
    """

    catalog_url: str = DEFAULT_CATALOG_URL
    translations_url: str = DEFAULT_TRANSLATIONS_URL
    retries: int = DEFAULT_RETRIES
    delay_ms: int = DEFAULT_DELAY_MS
    timeout_s: float = DEFAULT_TIMEOUT
    default_language: str = DEFAULT_LANGUAGE
    languages: Tuple[str, ...] = ()
    window_title: str = "Exam Archive"

    def __post_init__(self) -> None:
        if not self.catalog_url:
            raise ValueError("catalog_url must not be empty")
        if not self.translations_url:
            raise ValueError("translations_url must not be empty")
        if self.retries < 1:
            raise ValueError(f"retries must be >= 1: {self.retries}")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0: {self.delay_ms}")
        if self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be > 0: {self.timeout_s}")
        if not self.default_language:
            raise ValueError("default_language must not be empty")


def _resolve_relative(value: str, base_dir: Path) -> str:
    if is_remote(value) or value.startswith("file:") or Path(value).is_absolute():
        return value
    return (base_dir / value).as_posix()


def _coerce(data: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    known = {f.name for f in fields(BrowserConfig)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        values[key] = value
    if "languages" in values:
        values["languages"] = tuple(values["languages"])
    for key in ("catalog_url", "translations_url"):
        if key in values:
            values[key] = _resolve_relative(str(values[key]), base_dir)
    return values


def load_config(path: Optional[Path]) -> BrowserConfig:
    """
    Load configuration from a JSON file.

    Any malformed data results in a warning and the default configuration,
    never a crash. Relative data locations are resolved against the
    directory of the config file.

    Args:
        path: Config file path, or None for defaults

    Returns:
        BrowserConfig
    """
    if path is None:
        return BrowserConfig()
    if not path.exists():
        logger.warning(f"Config file not found: {path}; using defaults")
        return BrowserConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning(f"Config file is corrupted ({e}); using defaults")
        return BrowserConfig()
    except OSError as e:
        logger.warning(f"Failed to read config ({e}); using defaults")
        return BrowserConfig()

    if not isinstance(data, dict):
        logger.warning("Config file must contain an object; using defaults")
        return BrowserConfig()

    try:
        return BrowserConfig(**_coerce(data, path.resolve().parent))
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid config ({e}); using defaults")
        return BrowserConfig()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-archive",
        description="Browse and download exam papers by subject, year and mark scheme.",
    )
    parser.add_argument("--config", type=Path, help="JSON config file")
    parser.add_argument("--catalog", help="URL or path of the exam catalog JSON")
    parser.add_argument("--translations", help="URL or path of the translation JSON")
    parser.add_argument("--lang", help="Language selected at start-up (e.g. en)")
    parser.add_argument("--retries", type=int, help="Fetch attempts per resource")
    parser.add_argument("--delay-ms", type=int, help="Wait between fetch attempts")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> BrowserConfig:
    """Apply command-line overrides on top of the (optional) config file."""
    config = load_config(args.config)
    overrides = {
        "catalog_url": args.catalog,
        "translations_url": args.translations,
        "default_language": args.lang,
        "retries": args.retries,
        "delay_ms": args.delay_ms,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})

