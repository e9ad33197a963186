"""
Localization store.

Holds the translation table (language -> message key -> template) and
resolves labels. A missing language or key resolves to the literal default
supplied by the caller; there is no fallback from one language to another.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional

DEFAULT_LANGUAGE = "en"
COUNT_PLACEHOLDER = "{n}"
RESULTS_DEFAULT = "{n} results"


class LocalizationStore:
    """Read-only lookup over a translation table."""

    def __init__(self, tables: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._tables: Dict[str, Dict[str, str]] = {
            lang: dict(messages) for lang, messages in (tables or {}).items()
        }

    @property
    def languages(self) -> List[str]:
        """Languages present in the table, in table order."""
        return list(self._tables)

    def __bool__(self) -> bool:
        return bool(self._tables)

    def lookup(self, lang: str, key: str, default: str, *, n: Optional[int] = None) -> str:
        """
        Resolve a message.

        Args:
            lang: Language code like "en"
            key: Message key like "download"
            default: Literal used when the language or key is missing
            n: Optional number substituted for ``{n}``

        Returns:
            The resolved (and substituted) text
        """
        text = self._tables.get(lang, {}).get(key)
        if text is None:
            text = default
        if n is not None:
            text = text.replace(COUNT_PLACEHOLDER, str(n))
        return text

    def results_text(self, lang: str, count: int) -> str:
        """Result counter text, e.g. "3 results"."""
        return self.lookup(lang, "results", RESULTS_DEFAULT, n=count)
