"""Observability hook protocol and implementations.

The ObservabilityHook protocol defines the interface for receiving events
from the notification controller. Implementations can render to console,
write to files, or collect events for inspection.
"""

from typing import Protocol, runtime_checkable

from location_display.observability.events import (
    LocationErrorEvent,
    LocationResolvedEvent,
    NotificationEvictedEvent,
    NotificationShownEvent,
    NotificationSuppressedEvent,
)


@runtime_checkable
class ObservabilityHook(Protocol):
    """Protocol for observability hooks."""

    def on_location_resolved(self, event: LocationResolvedEvent) -> None:
        """Called after a location identifier is resolved."""
        ...

    def on_notification_shown(self, event: NotificationShownEvent) -> None:
        """Called when a notification is displayed."""
        ...

    def on_notification_suppressed(self, event: NotificationSuppressedEvent) -> None:
        """Called when a duplicate name is suppressed."""
        ...

    def on_notification_evicted(self, event: NotificationEvictedEvent) -> None:
        """Called when the previous notification is removed."""
        ...

    def on_error(self, event: LocationErrorEvent) -> None:
        """Called when a location change failed."""
        ...


class NullHook:
    """No-op hook for when observability is disabled.

    This is the default hook. Using it avoids null checks in the controller.
    """

    def on_location_resolved(self, event: LocationResolvedEvent) -> None:
        pass

    def on_notification_shown(self, event: NotificationShownEvent) -> None:
        pass

    def on_notification_suppressed(self, event: NotificationSuppressedEvent) -> None:
        pass

    def on_notification_evicted(self, event: NotificationEvictedEvent) -> None:
        pass

    def on_error(self, event: LocationErrorEvent) -> None:
        pass


class CompositeHook:
    """Combines multiple hooks into one.

    Events are dispatched to all hooks in order.
    """

    def __init__(self, hooks: list[ObservabilityHook]) -> None:
        """Initialize with a list of hooks.

        Args:
            hooks: List of hooks to dispatch events to.
        """
        self.hooks = hooks

    def on_location_resolved(self, event: LocationResolvedEvent) -> None:
        for hook in self.hooks:
            hook.on_location_resolved(event)

    def on_notification_shown(self, event: NotificationShownEvent) -> None:
        for hook in self.hooks:
            hook.on_notification_shown(event)

    def on_notification_suppressed(self, event: NotificationSuppressedEvent) -> None:
        for hook in self.hooks:
            hook.on_notification_suppressed(event)

    def on_notification_evicted(self, event: NotificationEvictedEvent) -> None:
        for hook in self.hooks:
            hook.on_notification_evicted(event)

    def on_error(self, event: LocationErrorEvent) -> None:
        for hook in self.hooks:
            hook.on_error(event)
