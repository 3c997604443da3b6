"""Rich console observer for location change visibility.

Uses the Rich library to print one line per controller event, with the
resolution rule and cache status.
"""

from rich.console import Console

from location_display.observability.events import (
    LocationErrorEvent,
    LocationResolvedEvent,
    NotificationEvictedEvent,
    NotificationShownEvent,
    NotificationSuppressedEvent,
)


class RichConsoleObserver:
    """Pretty console output using Rich."""

    # Icons for visual distinction between resolution rules
    RULE_ICONS = {
        "host_display_name": "[blue]>[/]",
        "pattern": "[cyan]#[/]",
        "translation": "[green]*[/]",
        "fallback": "[yellow]~[/]",
        "unknown": "[red]?[/]",
    }

    def __init__(
        self,
        console: Console | None = None,
        show_resolution: bool = True,
        indent: str = "  ",
    ) -> None:
        """Initialize the console observer.

        Args:
            console: Rich Console instance. Creates new one if not provided.
            show_resolution: Print a line for every resolution.
            indent: Indentation string for nested output.
        """
        self.console = console or Console()
        self.show_resolution = show_resolution
        self.indent = indent
        self.shown_count = 0
        self.suppressed_count = 0
        self.error_count = 0

    def on_location_resolved(self, event: LocationResolvedEvent) -> None:
        """Render the resolution rule."""
        if not self.show_resolution:
            return
        icon = self.RULE_ICONS.get(event.rule, "[dim]-[/]")
        cache_str = " [green](cached)[/]" if event.cache_hit else ""
        self.console.print(
            f"{icon} {event.raw_identifier!r} -> [bold]{event.name}[/] "
            f"[dim]{event.rule}[/]{cache_str}"
        )

    def on_notification_shown(self, event: NotificationShownEvent) -> None:
        self.shown_count += 1
        action = "replaced" if event.replaced else "shown"
        self.console.print(
            f"{self.indent}[green]+[/] {action} [bold]{event.name}[/] "
            f"({event.duration_ms}ms)"
        )

    def on_notification_suppressed(self, event: NotificationSuppressedEvent) -> None:
        self.suppressed_count += 1
        self.console.print(f"{self.indent}[dim]= duplicate {event.name}[/]")

    def on_notification_evicted(self, event: NotificationEvictedEvent) -> None:
        self.console.print(f"{self.indent}[yellow]-[/] evicted {event.name}")

    def on_error(self, event: LocationErrorEvent) -> None:
        self.error_count += 1
        self.console.print(
            f"{self.indent}[red]x[/] {event.raw_identifier!r}: {event.error}",
            style="dim red",
        )

    def print_summary(self) -> None:
        """Print counts of shown, suppressed and failed updates."""
        self.console.print("\n[bold]Summary:[/]")
        self.console.print(f"  shown: {self.shown_count}")
        self.console.print(f"  suppressed: {self.suppressed_count}")
        if self.error_count:
            self.console.print(f"  [red]errors: {self.error_count}[/]")

    def reset(self) -> None:
        """Reset counters for a new session."""
        self.shown_count = 0
        self.suppressed_count = 0
        self.error_count = 0
