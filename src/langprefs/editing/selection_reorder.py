"""Selection-preserving reordering of an ordered preference list.

Headless counterpart of the Up / Down buttons in the language preferences
dialog. Rows are opaque ``Row`` values; the selection is a tuple of closed
``SelectionRange`` blocks sorted by ``top_row``. Each move call permutes the
rows and shifts the ranges together so that the same logical items stay
selected.

Design goals:
 - Pure logic (no Qt dependency) so the binding layer stays thin.
 - Immutable input -> new tuples returned (caller state is never mutated).
 - Boundary moves are silent no-ops; malformed selections raise
   ``SelectionRangeError``.
 - Rich result object carrying the new order, new selection, the row the view
   should scroll to and an accessible announcement string.

Swap order matters for disjoint blocks: moving up walks ranges top-to-bottom
and rows ascending, moving down walks ranges bottom-to-top and rows
descending. Each block then slides into the single free slot next to it
without disturbing blocks still pending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

__all__ = [
    "Row",
    "SelectionRange",
    "Selection",
    "MoveResult",
    "SelectionRangeError",
    "validate_selection",
    "selection_from_rows",
    "selected_items",
    "move_selection_up",
    "move_selection_down",
    "move_selection",
    "interpret_key_command",
]


class SelectionRangeError(ValueError):
    """Raised when a selection does not describe valid rows of the sequence."""


@dataclass(frozen=True)
class Row:
    code: str
    name: str


@dataclass(frozen=True)
class SelectionRange:
    """Closed block ``[top_row, bottom_row]`` of selected row indices."""

    top_row: int
    bottom_row: int

    @property
    def row_count(self) -> int:
        return self.bottom_row - self.top_row + 1

    def rows(self) -> Iterator[int]:
        return iter(range(self.top_row, self.bottom_row + 1))

    def shifted(self, offset: int) -> "SelectionRange":
        return SelectionRange(self.top_row + offset, self.bottom_row + offset)


Selection = Tuple[SelectionRange, ...]


@dataclass(frozen=True)
class MoveResult:
    rows: Tuple[Row, ...]
    selection: Selection
    changed: bool
    focus_row: Optional[int]
    announcement: str


def validate_selection(selection: Sequence[SelectionRange], row_count: int) -> None:
    """Check bounds, orientation and ordering of ``selection``.

    Raises ``SelectionRangeError`` on the first violation found.
    """
    previous_bottom = -1
    for rng in selection:
        if rng.top_row > rng.bottom_row:
            raise SelectionRangeError(f"Inverted range {rng.top_row}..{rng.bottom_row}")
        if rng.top_row < 0 or rng.bottom_row >= row_count:
            raise SelectionRangeError(
                f"Range {rng.top_row}..{rng.bottom_row} outside 0..{row_count - 1}"
            )
        if rng.top_row <= previous_bottom:
            raise SelectionRangeError(
                f"Range {rng.top_row}..{rng.bottom_row} overlaps or precedes previous range"
            )
        previous_bottom = rng.bottom_row


def selection_from_rows(indices: Iterable[int]) -> Selection:
    """Build a minimal selection covering ``indices`` (duplicates ignored)."""
    ordered = sorted(set(indices))
    ranges: List[SelectionRange] = []
    for idx in ordered:
        if ranges and ranges[-1].bottom_row == idx - 1:
            ranges[-1] = SelectionRange(ranges[-1].top_row, idx)
        else:
            ranges.append(SelectionRange(idx, idx))
    return tuple(ranges)


def selected_items(rows: Sequence[Row], selection: Sequence[SelectionRange]) -> List[Row]:
    return [rows[i] for rng in selection for i in rng.rows()]


def _announce(selection: Selection, verb: str) -> str:
    count = sum(rng.row_count for rng in selection)
    noun = "language" if count == 1 else "languages"
    return f"Moved {count} {noun} {verb}."


def _unchanged(rows: Sequence[Row], selection: Sequence[SelectionRange], focus: Optional[int]) -> MoveResult:
    return MoveResult(tuple(rows), tuple(selection), False, focus, "No change")


def move_selection_up(rows: Sequence[Row], selection: Sequence[SelectionRange]) -> MoveResult:
    validate_selection(selection, len(rows))
    if not selection:
        return _unchanged(rows, selection, None)
    if selection[0].top_row == 0:
        return _unchanged(rows, selection, 0)
    lst = list(rows)
    for rng in selection:
        for j in rng.rows():
            lst[j - 1], lst[j] = lst[j], lst[j - 1]
    shifted = tuple(rng.shifted(-1) for rng in selection)
    return MoveResult(tuple(lst), shifted, True, shifted[0].top_row, _announce(shifted, "up"))


def move_selection_down(rows: Sequence[Row], selection: Sequence[SelectionRange]) -> MoveResult:
    validate_selection(selection, len(rows))
    if not selection:
        return _unchanged(rows, selection, None)
    last = len(rows) - 1
    if selection[-1].bottom_row == last:
        return _unchanged(rows, selection, last)
    lst = list(rows)
    for rng in reversed(selection):
        for j in range(rng.bottom_row, rng.top_row - 1, -1):
            lst[j + 1], lst[j] = lst[j], lst[j + 1]
    shifted = tuple(rng.shifted(1) for rng in selection)
    return MoveResult(tuple(lst), shifted, True, shifted[-1].bottom_row, _announce(shifted, "down"))


def move_selection(
    rows: Sequence[Row], selection: Sequence[SelectionRange], direction: str
) -> MoveResult:
    if direction == "up":
        return move_selection_up(rows, selection)
    if direction == "down":
        return move_selection_down(rows, selection)
    raise ValueError(f"Unknown move direction: {direction!r}")


def interpret_key_command(command: str) -> str:
    """Map a modified arrow shortcut to a move direction.

    Returns ``"up"``, ``"down"`` or an empty string for anything else,
    plain arrows included so they stay navigation keys.
    """
    cmd = command.lower().replace(" ", "")
    if cmd in {"ctrl+up", "alt+up", "ctrl+arrowup", "alt+arrowup"}:
        return "up"
    if cmd in {"ctrl+down", "alt+down", "ctrl+arrowdown", "alt+arrowdown"}:
        return "down"
    return ""
