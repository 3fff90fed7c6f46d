"""Shared infrastructure services (locator, event bus)."""

from .service_locator import (  # noqa: F401
    services,
    ServiceLocator,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .event_bus import EventBus, GUIEvent, Event  # noqa: F401
