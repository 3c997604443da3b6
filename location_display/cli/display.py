"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from location_display.config import ModConfig
from location_display.mod import LocationDescription
from location_display.resolver.name_resolver import Resolution


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def display_resolution(raw_identifier: str, resolution: Resolution) -> None:
    """Display a resolved location name with the rule that produced it."""
    console.print(f"[bold]{resolution.name}[/bold]")
    display_info(f"raw={raw_identifier!r} rule={resolution.rule.value}")


def display_config(config: ModConfig, path: str | None = None) -> None:
    """Display config options as a table.

    Args:
        config: The loaded config.
        path: Where it was loaded from.
    """
    table = Table(title=path or "Configuration", box=box.SIMPLE)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="bold", no_wrap=True)
    table.add_column("Description", style="dim")

    values = config.model_dump(by_alias=True)
    for name, field in type(config).model_fields.items():
        alias = field.alias or name
        table.add_row(alias, str(values[alias]), field.description or "")

    console.print(table)


def display_location_description(description: LocationDescription) -> None:
    """Display the debug view of the current location."""
    if description.raw is None:
        display_info("No current location available.")
        return

    lines = [
        f"[bold]Name:[/bold] {description.raw!r}",
        f"[bold]Host display name:[/bold] {description.host_display_name!r}",
        f"[bold]Resolved name:[/bold] {description.resolved_name}",
    ]
    console.print(Panel("\n".join(lines), title="Location Debug", style="cyan"))
