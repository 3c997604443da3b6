"""In-process reference host.

ConsoleHost keeps a HUD message queue with per-message countdowns,
answers translation lookups from a JsonTranslationProvider, and tracks the
player's current location. The CLI simulator and the tests drive the mod
through it.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from rich.console import Console

from location_display.host.translations import JsonTranslationProvider


logger = logging.getLogger(__name__)

_message_ids = itertools.count(1)


@dataclass(eq=False)
class HudMessage:
    """A transient corner message in the display queue."""

    text: str
    time_left_ms: int
    message_id: int = field(default_factory=lambda: next(_message_ids))

    @property
    def expired(self) -> bool:
        return self.time_left_ms <= 0


class ConsoleHost:
    """Host environment backed by in-memory state.

    Usage:
        host = ConsoleHost(JsonTranslationProvider(Path("i18n")), language="fr")
        handle = host.show_notification("Ferme", 3000)
        host.tick(1000)
        host.remove_notification(handle)
    """

    def __init__(
        self,
        translations: JsonTranslationProvider | None = None,
        language: str = "default",
        display_names: Mapping[str, str] | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize ConsoleHost.

        Args:
            translations: Translation provider. Defaults to an empty one.
            language: Active locale.
            display_names: Identifier -> display name the host knows natively.
            console: Rich console to echo messages to; None keeps it silent.
        """
        self.translations = translations or JsonTranslationProvider()
        self.language = language
        self.display_names: dict[str, str] = dict(display_names or {})
        self.console = console
        self.hud_messages: list[HudMessage] = []
        self.location: str | None = None

    # ---------------------------------------------------------------------
    # HostEnvironment
    # ---------------------------------------------------------------------

    def get_host_display_name(self, identifier: str) -> str | None:
        return self.display_names.get(identifier)

    def translate(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        return self.translations.get(key, params, language=self.language)

    def show_notification(self, text: str, duration_ms: int) -> HudMessage:
        message = HudMessage(text=text, time_left_ms=duration_ms)
        self.hud_messages.append(message)
        if self.console is not None:
            self.console.print(f"[bold cyan]HUD:[/] {text} [dim]({duration_ms}ms)[/]")
        return message

    def remove_notification(self, handle: Any) -> None:
        # Already expired or removed messages are skipped
        if handle in self.hud_messages:
            self.hud_messages.remove(handle)

    def current_language_tag(self) -> str:
        return self.language

    def current_location(self) -> str | None:
        return self.location

    # ---------------------------------------------------------------------
    # Simulation
    # ---------------------------------------------------------------------

    def warp(self, identifier: str | None) -> None:
        """Move the player; the caller fires the location change event."""
        self.location = identifier

    def tick(self, elapsed_ms: int) -> list[HudMessage]:
        """Advance display timers and drop expired messages.

        Returns:
            Messages that expired during this tick.
        """
        expired: list[HudMessage] = []
        for message in self.hud_messages:
            message.time_left_ms -= elapsed_ms
            if message.expired:
                expired.append(message)
        for message in expired:
            self.hud_messages.remove(message)
            logger.debug(f"HUD message expired: {message.text}")
        return expired

    @property
    def visible_texts(self) -> list[str]:
        return [message.text for message in self.hud_messages]
