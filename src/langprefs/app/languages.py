"""Catalogue of supported map languages and current-order resolution.

Supplies the inbound side of the preferences editor: the ordered
``(code, display name)`` rows shown in the dialog. Stored codes come first in
their saved order; every other supported language follows in catalogue order
so newly supported languages show up without a settings migration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from langprefs.app.language_store import LanguageSettings, load_language_settings
from langprefs.editing.selection_reorder import Row

__all__ = [
    "SUPPORTED_LANGUAGES",
    "DEFAULT_ORDER",
    "UnknownLanguageError",
    "language_name",
    "is_supported",
    "resolve_order",
    "rows_for_settings",
    "load_current_rows",
]

log = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: Tuple[Tuple[str, str], ...] = (
    ("en", "English"),
    ("ja", "日本語"),
    ("fr", "Français"),
    ("ko_rm", "Korean (Romanized)"),
    ("ar", "العربية"),
    ("de", "Deutsch"),
    ("ru", "Русский"),
    ("sv", "Svenska"),
    ("zh", "中文"),
    ("fi", "Suomi"),
    ("ko", "한국어"),
    ("ka", "ქართული"),
    ("be", "Беларуская"),
    ("nl", "Nederlands"),
    ("ga", "Gaeilge"),
    ("ja_rm", "Japanese (Romanized)"),
    ("el", "Ελληνικά"),
    ("it", "Italiano"),
    ("es", "Español"),
    ("th", "ไทย"),
    ("ca", "Català"),
    ("cy", "Cymraeg"),
    ("hu", "Magyar"),
    ("hy", "Հայերեն"),
    ("eu", "Euskara"),
    ("br", "Brezhoneg"),
    ("pl", "Polski"),
    ("cs", "Čeština"),
    ("uk", "Українська"),
    ("pt", "Português"),
    ("tr", "Türkçe"),
)

DEFAULT_ORDER: Tuple[str, ...] = ("en", "de", "fr", "ru", "es")

_NAMES: Dict[str, str] = dict(SUPPORTED_LANGUAGES)


class UnknownLanguageError(KeyError):
    """Raised when a code is not part of the supported catalogue."""


def is_supported(code: str) -> bool:
    return code in _NAMES


def language_name(code: str) -> str:
    try:
        return _NAMES[code]
    except KeyError:
        raise UnknownLanguageError(code) from None


def resolve_order(stored_codes: Iterable[str]) -> List[Row]:
    """Return the full ordered row list for the editor.

    Unknown and duplicate codes in ``stored_codes`` are dropped.
    """
    rows: List[Row] = []
    seen: set[str] = set()
    for code in stored_codes:
        if code in seen:
            log.debug("Ignoring duplicate language code %r", code)
            continue
        if not is_supported(code):
            log.warning("Ignoring unsupported language code %r", code)
            continue
        seen.add(code)
        rows.append(Row(code, _NAMES[code]))
    for code, name in SUPPORTED_LANGUAGES:
        if code not in seen:
            rows.append(Row(code, name))
    return rows


def rows_for_settings(prefs: LanguageSettings) -> List[Row]:
    """Resolve rows from already loaded settings; nothing stored means defaults."""
    return resolve_order(prefs.languages_order or DEFAULT_ORDER)


def load_current_rows(base_dir: str | Path | None = None) -> List[Row]:
    prefs = load_language_settings(base_dir)
    rows = rows_for_settings(prefs)
    log.info("Loaded %d languages (%d stored)", len(rows), len(prefs.languages_order))
    return rows
