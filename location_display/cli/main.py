"""Main CLI application for the location display mod."""

import logging
from typing import Any, List, Mapping, Optional

import typer

from location_display.cli.commands import config
from location_display.cli.display import (
    console,
    display_location_description,
    display_resolution,
)
from location_display.config import get_settings, load_config
from location_display.host.console_host import ConsoleHost
from location_display.host.translations import JsonTranslationProvider
from location_display.mod import LocationDisplayMod
from location_display.observability.console_observer import RichConsoleObserver
from location_display.resolver.name_resolver import NameResolver

# Create main app
app = typer.Typer(
    name="location-display",
    help="Resolve location names and simulate the location popup",
    add_completion=False,
)

# Add sub-commands
app.add_typer(config.app, name="config")


@app.command()
def resolve(
    raw_identifier: str = typer.Argument(..., help="Raw location identifier"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Locale"),
    i18n_dir: Optional[str] = typer.Option(None, "--i18n", help="Translation directory"),
    display_name: Optional[str] = typer.Option(
        None, "--display-name", help="Display name the host already provides"
    ),
) -> None:
    """Resolve a single identifier to its display name."""
    settings = get_settings()
    language = language or settings.language
    provider = JsonTranslationProvider(i18n_dir or settings.i18n_dir)

    def lookup(key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return provider.get(key, params, language=language)

    resolution = NameResolver().resolve_detailed(raw_identifier, language, lookup, display_name)
    display_resolution(raw_identifier, resolution)


@app.command()
def simulate(
    identifiers: List[str] = typer.Argument(..., help="Identifiers to warp through, in order"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Locale"),
    i18n_dir: Optional[str] = typer.Option(None, "--i18n", help="Translation directory"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Config file path"),
    tick_ms: int = typer.Option(0, "--tick", help="Milliseconds elapsed between warps"),
    describe: bool = typer.Option(False, "--describe", help="Print the debug view at the end"),
) -> None:
    """Warp through a sequence of locations and show what the player would see."""
    settings = get_settings()
    mod_config = load_config(config_path or settings.config_path)
    host = ConsoleHost(
        JsonTranslationProvider(i18n_dir or settings.i18n_dir),
        language=language or settings.language,
        console=console,
    )
    observer = RichConsoleObserver(console=console)
    mod = LocationDisplayMod(host, mod_config, observer)
    mod.on_session_start()

    for identifier in identifiers:
        host.warp(identifier)
        mod.on_location_changed(identifier)
        if tick_ms:
            host.tick(tick_ms)

    if describe:
        display_location_description(mod.describe_current_location())
    observer.print_summary()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Location display - readable names for game locations.

    Use 'location-display resolve NAME' to check a single identifier.
    """
    level = logging.DEBUG if debug or get_settings().debug else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
