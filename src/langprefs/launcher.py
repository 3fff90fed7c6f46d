"""Command line entrypoint for ``langprefs`` / ``python -m langprefs``.

Without options the preferences dialog opens; ``--list`` and ``--reset`` work
headless so the stored order can be inspected or cleared from a terminal.

Example:
  langprefs --data-dir ./data --list
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from langprefs.app.bootstrap import create_app
from langprefs.app.language_store import clear_languages_order
from langprefs.app.languages import load_current_rows
from langprefs.config import settings
from langprefs.services.event_bus import Event, GUIEvent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langprefs", description="Edit the preferred map language order."
    )
    parser.add_argument(
        "--data-dir",
        default=settings.DATA_DIR,
        help="Directory holding language_prefs.json (default: %(default)s)",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--list", action="store_true", help="Print the current order and exit")
    group.add_argument("--reset", action="store_true", help="Forget the stored order and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    headless = args.list or args.reset
    ctx = create_app(
        headless=headless,
        data_dir=args.data_dir,
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    if args.list:
        for pos, row in enumerate(load_current_rows(args.data_dir), start=1):
            print(f"{pos:>3}  {row.code:<6} {row.name}")  # noqa: T201
        return 0
    if args.reset:
        path = clear_languages_order(args.data_dir)
        print(f"Cleared language order in {path}")  # noqa: T201
        return 0

    from langprefs.views.preferences_dialog import PreferencesDialog

    failures: List[Event] = []
    ctx.event_bus.subscribe(GUIEvent.ERROR_OCCURRED, failures.append)
    dlg = PreferencesDialog(data_dir=args.data_dir)
    dlg.show()
    status = ctx.qt_app.exec()  # type: ignore[union-attr]
    for evt in failures:
        print(f"Language order not saved: {evt.payload['message']}", file=sys.stderr)  # noqa: T201
    return 1 if failures else status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
