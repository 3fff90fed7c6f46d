"""Language preferences editor public API.

Curated surface for callers embedding the editor: the headless reorder
engine and session, plus the service infrastructure. Qt views are not
imported here so headless use never needs PyQt6 at import time.
"""

from __future__ import annotations

from .editing import (  # noqa: F401
    Row,
    SelectionRange,
    MoveResult,
    SelectionRangeError,
    move_selection_up,
    move_selection_down,
    ReorderSession,
    SessionClosedError,
)
from .services import services, EventBus, GUIEvent  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Row",
    "SelectionRange",
    "MoveResult",
    "SelectionRangeError",
    "move_selection_up",
    "move_selection_down",
    "ReorderSession",
    "SessionClosedError",
    "services",
    "EventBus",
    "GUIEvent",
]
