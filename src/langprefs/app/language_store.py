"""Language preference persistence.

Stores the ordered list of preferred language codes plus the automatic
updates toggle shown in the preferences dialog.

Design principles:
- Pure logic (no Qt import) so it can be unit-tested headless.
- Explicit schema with version field to enable future migrations.
- Graceful fallback: corrupt or incompatible files produce defaults instead of raising.
- Atomic writes (temp file + replace).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from langprefs.config import settings
from langprefs.services.event_bus import EventBus, GUIEvent
from langprefs.services.service_locator import services

__all__ = [
    "LanguageSettings",
    "load_language_settings",
    "save_language_settings",
    "save_languages_order",
    "clear_languages_order",
    "SETTINGS_VERSION",
]

log = logging.getLogger(__name__)

SETTINGS_VERSION = 1


@dataclass
class LanguageSettings:
    """Serializable language preferences.

    Attributes
    ----------
    version: Schema version for migration handling.
    languages_order: Preferred language codes, most preferred first. Empty
        means "never saved" and callers fall back to the default order.
    auto_updates_enabled: Whether map data updates are downloaded automatically.
    """

    version: int = SETTINGS_VERSION
    languages_order: List[str] = field(default_factory=list)
    auto_updates_enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageSettings":
        order = data.get("languages_order") or []
        return cls(
            version=int(data.get("version", SETTINGS_VERSION)),
            languages_order=[str(code) for code in order],
            auto_updates_enabled=bool(data.get("auto_updates_enabled", True)),
        )


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path(settings.DATA_DIR)
    return base / settings.SETTINGS_FILENAME


def load_language_settings(base_dir: str | Path | None = None) -> LanguageSettings:
    path = _resolve_path(base_dir)
    if not path.exists():
        return LanguageSettings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        prefs = LanguageSettings.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        log.warning("Discarding unreadable language settings %s: %s", path, exc)
        return LanguageSettings()
    if prefs.version != SETTINGS_VERSION:
        log.info("Language settings version %s reset, keeping order", prefs.version)
        return LanguageSettings(languages_order=prefs.languages_order)
    return prefs


def save_language_settings(prefs: LanguageSettings, base_dir: str | Path | None = None) -> Path:
    """Persist ``prefs`` and return the written path."""
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(prefs.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path


def save_languages_order(
    codes: Sequence[str],
    base_dir: str | Path | None = None,
    *,
    auto_updates_enabled: Optional[bool] = None,
) -> Path:
    """Store a new language order.

    Other settings are kept unless ``auto_updates_enabled`` is given.
    """
    prefs = load_language_settings(base_dir)
    prefs.languages_order = list(codes)
    if auto_updates_enabled is not None:
        prefs.auto_updates_enabled = auto_updates_enabled
    path = save_language_settings(prefs, base_dir)
    log.info("Saved language order: %s", ", ".join(codes))
    bus = services.try_get("event_bus")
    if isinstance(bus, EventBus):
        bus.publish(GUIEvent.LANGUAGES_SAVED, {"codes": list(codes), "path": str(path)})
    return path


def clear_languages_order(base_dir: str | Path | None = None) -> Path:
    prefs = load_language_settings(base_dir)
    prefs.languages_order = []
    return save_language_settings(prefs, base_dir)
