"""Global configuration constants for the language preferences editor."""

from __future__ import annotations

import os
from typing import Final

DATA_DIR: Final = os.environ.get("LANGPREFS_DATA_DIR", "data")
SETTINGS_FILENAME: Final = "language_prefs.json"

# Moves one row per click; keyboard shortcuts reuse the same engine calls.
MOVE_UP_SHORTCUT: Final = "Ctrl+Up"
MOVE_DOWN_SHORTCUT: Final = "Ctrl+Down"
