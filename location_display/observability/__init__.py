"""Observability module for location change monitoring.

Provides hooks and observers for visibility into resolution and
notification decisions.
"""

from location_display.observability.events import (
    LocationErrorEvent,
    LocationResolvedEvent,
    NotificationEvictedEvent,
    NotificationShownEvent,
    NotificationSuppressedEvent,
)
from location_display.observability.hooks import (
    CompositeHook,
    NullHook,
    ObservabilityHook,
)
from location_display.observability.console_observer import RichConsoleObserver

__all__ = [
    # Events
    "LocationResolvedEvent",
    "NotificationShownEvent",
    "NotificationSuppressedEvent",
    "NotificationEvictedEvent",
    "LocationErrorEvent",
    # Hooks
    "ObservabilityHook",
    "NullHook",
    "CompositeHook",
    # Observers
    "RichConsoleObserver",
]
