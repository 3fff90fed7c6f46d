"""Stateful editing session wrapping the selection reorder engine.

One session spans the lifetime of the preferences dialog: it is built from
the loaded rows, mutated by Up / Down actions and closed with a single
``finish()`` that hands the final codes to the save collaborator.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from .selection_reorder import (
    MoveResult,
    Row,
    Selection,
    SelectionRange,
    move_selection,
    selection_from_rows,
    validate_selection,
)
from langprefs.services.event_bus import EventBus, GUIEvent
from langprefs.services.service_locator import services

__all__ = ["ReorderSession", "SessionClosedError"]

log = logging.getLogger(__name__)

SaveCallback = Callable[[List[str]], Any]


class SessionClosedError(RuntimeError):
    """Raised when a finished session is moved or finished again."""


class ReorderSession:
    """Mutable façade over the pure move functions.

    Rows and selection are replaced together after every successful move so
    observers never see one updated without the other.
    """

    def __init__(
        self,
        rows: Iterable[Row],
        save_callback: SaveCallback,
        *,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._rows: Tuple[Row, ...] = tuple(rows)
        self._save = save_callback
        self._bus = event_bus
        self._closed = False
        self._selection: Selection = (SelectionRange(0, 0),) if self._rows else ()
        self._publish(GUIEvent.LANGUAGES_LOADED, {"codes": self.codes()})

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def closed(self) -> bool:
        return self._closed

    def codes(self) -> List[str]:
        return [row.code for row in self._rows]

    def select(self, selection: Sequence[SelectionRange]) -> None:
        validate_selection(selection, len(self._rows))
        self._selection = tuple(selection)

    def select_rows(self, indices: Iterable[int]) -> None:
        self.select(selection_from_rows(indices))

    def move(self, direction: str) -> MoveResult:
        if self._closed:
            raise SessionClosedError("Session already finished")
        result = move_selection(self._rows, self._selection, direction)
        if result.changed:
            self._rows = result.rows
            self._selection = result.selection
            log.debug("%s -> %s", result.announcement, self.codes())
            self._publish(
                GUIEvent.SELECTION_MOVED,
                {"direction": direction, "focus_row": result.focus_row},
            )
        return result

    def move_up(self) -> MoveResult:
        return self.move("up")

    def move_down(self) -> MoveResult:
        return self.move("down")

    def finish(self) -> Any:
        """Hand the final order to the save callback (exactly once)."""
        if self._closed:
            raise SessionClosedError("Session already finished")
        self._closed = True
        return self._save(self.codes())

    def _publish(self, name: GUIEvent, payload: dict) -> None:
        bus = self._bus if self._bus is not None else services.try_get("event_bus")
        if isinstance(bus, EventBus):
            bus.publish(name, payload)
