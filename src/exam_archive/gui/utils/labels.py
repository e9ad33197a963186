"""
Localization markers for widgets.

A widget marked with ``mark_i18n`` carries its message key and its literal
default as Qt dynamic properties; ``relabel`` walks a widget tree and resets
every marked widget's text for the current language.
"""
from __future__ import annotations

from PySide6.QtWidgets import QWidget

from exam_archive.i18n import LocalizationStore

KEY_PROPERTY = "i18nKey"
DEFAULT_PROPERTY = "i18nDefault"
TARGET_PROPERTY = "i18nTarget"

TARGET_TEXT = "text"
TARGET_PLACEHOLDER = "placeholder"


def mark_i18n(widget: QWidget, key: str, default: str, target: str = TARGET_TEXT) -> QWidget:
    """Attach a message key and default literal to ``widget``."""
    widget.setProperty(KEY_PROPERTY, key)
    widget.setProperty(DEFAULT_PROPERTY, default)
    widget.setProperty(TARGET_PROPERTY, target)
    return widget


def i18n_key(widget: QWidget) -> str | None:
    return widget.property(KEY_PROPERTY)


def relabel(root: QWidget, store: LocalizationStore, lang: str) -> int:
    """
    Re-label every marked widget under (and including) ``root``.

    Returns:
        Number of widgets relabelled
    """
    count = 0
    for widget in [root, *root.findChildren(QWidget)]:
        key = i18n_key(widget)
        if not key:
            continue
        text = store.lookup(lang, key, widget.property(DEFAULT_PROPERTY) or "")
        if widget.property(TARGET_PROPERTY) == TARGET_PLACEHOLDER:
            widget.setPlaceholderText(text)
        else:
            widget.setText(text)
        count += 1
    return count
