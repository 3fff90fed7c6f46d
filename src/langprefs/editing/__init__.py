"""Headless editing logic for the language preference list."""

from .selection_reorder import (  # noqa: F401
    Row,
    SelectionRange,
    Selection,
    MoveResult,
    SelectionRangeError,
    validate_selection,
    selection_from_rows,
    selected_items,
    move_selection_up,
    move_selection_down,
    move_selection,
    interpret_key_command,
)
from .reorder_session import ReorderSession, SessionClosedError  # noqa: F401
