"""Host environment protocol.

The capabilities the location display needs from the game host. A real
host adapter wraps the game's API; ConsoleHost is the in-process reference
implementation used by the CLI and tests.
"""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class HostEnvironment(Protocol):
    """Protocol for host capabilities."""

    def get_host_display_name(self, identifier: str) -> str | None:
        """Return the host's own display name for a location, if it has one."""
        ...

    def translate(self, key: str, params: Mapping[str, Any] | None = None) -> str | None:
        """Look up a translation; None or a placeholder means no translation."""
        ...

    def show_notification(self, text: str, duration_ms: int) -> Any:
        """Show a transient message and return a handle for it."""
        ...

    def remove_notification(self, handle: Any) -> None:
        """Remove a message; a handle the host already dismissed is ignored."""
        ...

    def current_language_tag(self) -> str:
        """Return the active locale."""
        ...

    def current_location(self) -> str | None:
        """Return the raw identifier of the player's current location."""
        ...
