"""Host environment adapters."""

from location_display.host.console_host import ConsoleHost, HudMessage
from location_display.host.protocol import HostEnvironment
from location_display.host.translations import JsonTranslationProvider, locale_chain

__all__ = [
    "ConsoleHost",
    "HostEnvironment",
    "HudMessage",
    "JsonTranslationProvider",
    "locale_chain",
]
