"""NotificationController: the single on-screen location slot.

On each location change the controller resolves the new name and then
either suppresses it (same name as the one showing), replaces the current
notification, or shows the first one. Expiry belongs to the host's display
timer; the controller never observes it.
"""

from __future__ import annotations

import logging
from typing import Any

from location_display.config import ModConfig
from location_display.host.protocol import HostEnvironment
from location_display.observability.events import (
    LocationErrorEvent,
    LocationResolvedEvent,
    NotificationEvictedEvent,
    NotificationShownEvent,
    NotificationSuppressedEvent,
)
from location_display.observability.hooks import NullHook, ObservabilityHook
from location_display.resolver.name_resolver import NameResolver, Resolution


logger = logging.getLogger(__name__)


class NotificationController:
    """Drives one notification slot from location change events.

    Usage:
        controller = NotificationController(host, resolver, config)
        controller.on_location_changed("Farm")   # shows "Farm"
        controller.on_location_changed("Farm")   # suppressed
        controller.on_location_changed("Town")   # evicts "Farm", shows "Town"
    """

    def __init__(
        self,
        host: HostEnvironment,
        resolver: NameResolver,
        config: ModConfig,
        hook: ObservabilityHook | None = None,
    ) -> None:
        """Initialize NotificationController.

        Args:
            host: Host capabilities (translation, display queue).
            resolver: Name resolver sharing the session cache.
            config: Live mod configuration.
            hook: Observability hook. Defaults to NullHook.
        """
        self.host = host
        self.resolver = resolver
        self.config = config
        self.hook = hook or NullHook()
        self.last_shown_name: str | None = None
        self.active_handle: Any = None

    @property
    def is_showing(self) -> bool:
        return self.active_handle is not None

    def on_location_changed(self, raw_identifier: str | None) -> bool:
        """Handle a location change from the host.

        Host failures are logged and swallowed; the slot is left as it was
        and the next change is handled normally.

        Args:
            raw_identifier: Raw location identifier.

        Returns:
            True if a new notification was shown.
        """
        if not self.config.enable_mod:
            return False

        try:
            resolution = self.resolve(raw_identifier)
            return self.show(resolution.name)
        except Exception as e:
            logger.error(f"Failed to update location display for {raw_identifier!r}: {e}")
            self.hook.on_error(LocationErrorEvent(raw_identifier=raw_identifier, error=str(e)))
            return False

    def resolve(self, raw_identifier: str | None) -> Resolution:
        """Resolve an identifier using the host's language and translations."""
        host_display_name = (
            self.host.get_host_display_name(raw_identifier) if raw_identifier else None
        )
        resolution = self.resolver.resolve_detailed(
            raw_identifier,
            self.host.current_language_tag(),
            self.host.translate,
            host_display_name,
        )
        self.hook.on_location_resolved(
            LocationResolvedEvent(
                raw_identifier=raw_identifier,
                name=resolution.name,
                rule=resolution.rule.value,
                cache_hit=resolution.cache_hit,
            )
        )
        return resolution

    def show(self, name: str) -> bool:
        """Show name in the slot unless it is already the last shown name.

        Returns:
            True if a notification was displayed.
        """
        if name == self.last_shown_name:
            logger.debug(f"Suppressed duplicate location: {name}")
            self.hook.on_notification_suppressed(NotificationSuppressedEvent(name=name))
            return False

        replaced = self.active_handle is not None
        if replaced:
            self._evict()

        duration = self.config.notification_duration
        self.active_handle = self.host.show_notification(name, duration)
        self.last_shown_name = name
        logger.debug(f"Displayed location: {name}")
        self.hook.on_notification_shown(
            NotificationShownEvent(name=name, duration_ms=duration, replaced=replaced)
        )
        return True

    def _evict(self) -> None:
        """Remove the active notification from the host's queue."""
        handle = self.active_handle
        evicted_name = self.last_shown_name or ""
        # Clear first so a failing remove or show never leaves a stale slot
        self.active_handle = None
        self.last_shown_name = None
        self.host.remove_notification(handle)
        self.hook.on_notification_evicted(NotificationEvictedEvent(name=evicted_name))

    def reset(self) -> None:
        """Forget the current slot (new session)."""
        self.last_shown_name = None
        self.active_handle = None
