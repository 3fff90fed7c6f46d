"""Preferences dialog: reorderable language list plus auto-update toggle.

The dialog is a thin binding between ``QTableWidget`` selection ranges and
the headless ``ReorderSession``. Every Up / Down action clears highlighting
on the old ranges, applies the move, rewrites the affected cells, then
re-selects the new ranges and scrolls the focus row into view.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QPushButton,
    QSizePolicy,
    QTableWidget,
    QTableWidgetItem,
    QTableWidgetSelectionRange,
    QVBoxLayout,
    QWidget,
)

from langprefs.app.language_store import load_language_settings, save_languages_order
from langprefs.app.languages import rows_for_settings
from langprefs.config import settings
from langprefs.editing.reorder_session import ReorderSession, SaveCallback
from langprefs.editing.selection_reorder import (
    MoveResult,
    Row,
    Selection,
    interpret_key_command,
    selection_from_rows,
)
from langprefs.services.event_bus import EventBus, GUIEvent
from langprefs.services.service_locator import services

__all__ = ["PreferencesDialog", "ranges_from_qt", "apply_selection"]

log = logging.getLogger(__name__)

_ITEM_FLAGS = Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEnabled


def ranges_from_qt(ranges: Iterable[QTableWidgetSelectionRange]) -> Selection:
    """Normalize Qt's selected ranges (any order, possibly adjacent)."""
    rows: List[int] = []
    for rng in ranges:
        rows.extend(range(rng.topRow(), rng.bottomRow() + 1))
    return selection_from_rows(rows)


def apply_selection(table: QTableWidget, selection: Selection, selected: bool = True) -> None:
    last_column = table.columnCount() - 1
    for rng in selection:
        table.setRangeSelected(
            QTableWidgetSelectionRange(rng.top_row, 0, rng.bottom_row, last_column), selected
        )


class PreferencesDialog(QDialog):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        data_dir: str | Path | None = None,
        rows: Optional[Sequence[Row]] = None,
        save_callback: Optional[SaveCallback] = None,
    ):
        super().__init__(
            parent, Qt.WindowType.WindowTitleHint | Qt.WindowType.WindowSystemMenuHint
        )
        self._data_dir = data_dir
        self.setWindowTitle(self.tr("Preferences"))

        self.table = QTableWidget(0, 2, self)
        self.table.setAlternatingRowColors(True)
        self.table.setShowGrid(False)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)

        prefs = load_language_settings(data_dir)
        if rows is None:
            rows = rows_for_settings(prefs)
        self.session = ReorderSession(rows, save_callback or self._save_to_store)
        self.table.setRowCount(len(self.session.rows))
        for i, row in enumerate(self.session.rows):
            for col, text in enumerate((row.code, row.name)):
                item = QTableWidgetItem(text)
                item.setFlags(_ITEM_FLAGS)
                self.table.setItem(i, col, item)

        self.btn_up = QPushButton()
        self.btn_up.setText("▲")
        self.btn_up.setToolTip(self.tr("Move up"))
        self.btn_up.setAccessibleName("Move selected languages up")
        self.btn_up.setDefault(False)
        self.btn_up.setAutoDefault(False)
        self.btn_up.clicked.connect(self.on_up_click)  # type: ignore

        self.btn_down = QPushButton()
        self.btn_down.setText("▼")
        self.btn_down.setToolTip(self.tr("Move down"))
        self.btn_down.setAccessibleName("Move selected languages down")
        self.btn_down.setDefault(False)
        self.btn_down.setAutoDefault(False)
        self.btn_down.clicked.connect(self.on_down_click)  # type: ignore

        self.chk_auto_updates = QCheckBox(self.tr("Enable automatic updates"))
        self.chk_auto_updates.setChecked(prefs.auto_updates_enabled)

        self.btn_close = QPushButton(self.tr("Close"))
        self.btn_close.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.btn_close.setDefault(True)
        self.btn_close.clicked.connect(self.on_close_click)  # type: ignore

        buttons = QVBoxLayout()
        buttons.addWidget(self.btn_up)
        buttons.addWidget(self.btn_down)
        buttons.addStretch(1)

        body = QHBoxLayout()
        body.addLayout(buttons)
        body.addWidget(self.table)

        bottom = QHBoxLayout()
        bottom.addWidget(self.chk_auto_updates)
        bottom.addStretch(1)
        bottom.setSpacing(0)
        bottom.addWidget(self.btn_close)

        outer = QVBoxLayout(self)
        outer.addLayout(body)
        outer.addLayout(bottom)

        for key, command in (
            (settings.MOVE_UP_SHORTCUT, "ctrl+up"),
            (settings.MOVE_DOWN_SHORTCUT, "ctrl+down"),
        ):
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(lambda c=command: self.handle_key_command(c))  # type: ignore

        if self.session.rows:
            self.table.selectRow(0)

    # Actions -----------------------------------------------------------
    def on_up_click(self) -> MoveResult:
        return self._move("up")

    def on_down_click(self) -> MoveResult:
        return self._move("down")

    def on_close_click(self) -> None:
        self.done(0)

    def handle_key_command(self, command: str) -> Optional[MoveResult]:
        direction = interpret_key_command(command)
        if not direction:
            return None
        return self._move(direction)

    def codes(self) -> List[str]:
        return [self.table.item(i, 0).text() for i in range(self.table.rowCount())]

    def done(self, code: int) -> None:  # type: ignore[override]
        try:
            if not self.session.closed:
                self.session.finish()
        except Exception as exc:  # noqa: BLE001 - a failed save must not keep the dialog open
            log.exception("Saving language order failed")
            self._publish_error(exc)
        finally:
            super().done(code)

    # Internals -----------------------------------------------------------
    def _move(self, direction: str) -> MoveResult:
        old = ranges_from_qt(self.table.selectedRanges())
        self.session.select(old)
        result = self.session.move(direction)
        if not result.changed:
            return result
        apply_selection(self.table, old, False)
        self._write_rows(result)
        apply_selection(self.table, result.selection, True)
        if result.focus_row is not None:
            self.table.scrollToItem(self.table.item(result.focus_row, 0))
        self.setAccessibleDescription(result.announcement)
        return result

    def _write_rows(self, result: MoveResult) -> None:
        # A move touches at most one unselected row beyond either end of the block span.
        lo = max(0, result.selection[0].top_row - 1)
        hi = min(len(result.rows) - 1, result.selection[-1].bottom_row + 1)
        for i in range(lo, hi + 1):
            row = result.rows[i]
            self.table.item(i, 0).setText(row.code)
            self.table.item(i, 1).setText(row.name)

    def _save_to_store(self, codes: List[str]) -> Path:
        return save_languages_order(
            codes, self._data_dir, auto_updates_enabled=self.chk_auto_updates.isChecked()
        )

    def _publish_error(self, exc: BaseException) -> None:
        bus = services.try_get("event_bus")
        if isinstance(bus, EventBus):
            bus.publish(
                GUIEvent.ERROR_OCCURRED,
                {"type": type(exc).__name__, "message": str(exc), "codes": self.session.codes()},
            )
