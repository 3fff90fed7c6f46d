"""Application bootstrap for the language preferences editor.

Responsibilities:
 - Configure root logging once for the process
 - Register the event bus on the global locator
 - Optionally create the ``QApplication`` (skipped when headless)
 - Return a single ``AppContext`` with the created references

PyQt6 is imported lazily so headless tests never need a display.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import sys
import time
from typing import Any, Optional

from langprefs.services.event_bus import EventBus
from langprefs.services.service_locator import services, ServiceLocator

__all__ = ["AppContext", "create_app"]

log = logging.getLogger(__name__)


@dataclass
class AppContext:
    """References created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication instance (None when headless)
    headless: Whether headless bootstrap was used
    data_dir: Directory holding the language settings file
    event_bus: Bus registered under ``"event_bus"``
    services: Global service locator after registration
    duration_s: Elapsed bootstrap seconds
    """

    qt_app: Optional[Any]
    headless: bool
    data_dir: Optional[str]
    event_bus: EventBus
    services: ServiceLocator
    duration_s: float


def create_app(
    *, headless: bool = False, data_dir: Optional[str] = None, log_level: int = logging.INFO
) -> AppContext:
    started = time.perf_counter()
    logging.basicConfig(
        level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logging.getLogger().setLevel(log_level)
    bus = services.try_get("event_bus")
    if not isinstance(bus, EventBus):
        bus = EventBus()
        services.register("event_bus", bus, allow_override=True)

    qt_app = None
    if not headless:
        from PyQt6.QtWidgets import QApplication

        qt_app = QApplication.instance() or QApplication(sys.argv)
    duration = time.perf_counter() - started
    log.debug("Bootstrap finished in %.3fs (headless=%s)", duration, headless)
    return AppContext(
        qt_app=qt_app,
        headless=headless,
        data_dir=data_dir,
        event_bus=bus,
        services=services,
        duration_s=duration,
    )
