"""LocationDisplayMod: the entry point a host adapter wires callbacks to.

Owns the session translation cache, the resolver, the notification
controller and the live config. The host calls:
- on_session_start() when a session begins (title screen / relaunch)
- on_location_changed(raw) when the player warps
- describe_current_location() for the debug console command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from location_display.config import ModConfig
from location_display.host.protocol import HostEnvironment
from location_display.notifications.controller import NotificationController
from location_display.observability.hooks import ObservabilityHook
from location_display.resolver.cache import TranslationCache
from location_display.resolver.name_resolver import NameResolver


logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "location_display"


@dataclass(frozen=True)
class LocationDescription:
    """Diagnostic view of the current location."""

    raw: str | None
    host_display_name: str | None
    resolved_name: str | None


class LocationDisplayMod:
    """Wires host callbacks to resolution and display.

    Usage:
        mod = LocationDisplayMod(host, load_config("config.json"))
        mod.on_session_start()
        mod.on_location_changed("UndergroundMine42")
    """

    def __init__(
        self,
        host: HostEnvironment,
        config: ModConfig | None = None,
        hook: ObservabilityHook | None = None,
    ) -> None:
        """Initialize the mod.

        Args:
            host: Host capabilities.
            config: Live configuration. Defaults to ModConfig().
            hook: Observability hook passed to the controller.
        """
        self.host = host
        self.config = config or ModConfig()
        self.cache = TranslationCache()
        self.resolver = NameResolver(self.cache)
        self.controller = NotificationController(host, self.resolver, self.config, hook)
        # Level the package logger had before EnableDebugLogging forced DEBUG
        self._level_before_debug: int | None = None
        self._sync_debug_logging()

    def on_session_start(self) -> None:
        """Clear per-session state; the language may have changed."""
        self.cache.clear()
        self.controller.reset()
        self._sync_debug_logging()
        logger.debug("Session started, translation cache cleared")

    def on_location_changed(self, raw_identifier: str | None) -> bool:
        """Handle a warp. Returns True if a notification was shown."""
        return self.controller.on_location_changed(raw_identifier)

    def describe_current_location(self) -> LocationDescription:
        """Report raw, host and resolved names for the current location.

        Only logs; the notification slot is untouched.
        """
        raw = self.host.current_location()
        if raw is None:
            logger.info("No current location available.")
            return LocationDescription(raw=None, host_display_name=None, resolved_name=None)

        host_display_name = self.host.get_host_display_name(raw) if raw else None
        # Scratch cache keeps the session cache untouched
        scratch = NameResolver(TranslationCache(), self.resolver.patterns)
        resolved_name = scratch.resolve(
            raw,
            self.host.current_language_tag(),
            self.host.translate,
            host_display_name,
        )
        logger.info(
            f"Location Debug: Name='{raw}', DisplayName='{host_display_name}', "
            f"ResolvedName='{resolved_name}'"
        )
        return LocationDescription(
            raw=raw,
            host_display_name=host_display_name,
            resolved_name=resolved_name,
        )

    def _sync_debug_logging(self) -> None:
        """Force DEBUG while EnableDebugLogging is on.

        The package logger level is only touched when the option is on, or
        when it has just been switched off, which restores the prior level.
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if self.config.enable_debug_logging:
            if self._level_before_debug is None:
                self._level_before_debug = package_logger.level
            package_logger.setLevel(logging.DEBUG)
        elif self._level_before_debug is not None:
            package_logger.setLevel(self._level_before_debug)
            self._level_before_debug = None
