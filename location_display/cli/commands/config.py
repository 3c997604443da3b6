"""Config file commands."""

from typing import Optional

import typer
from pydantic import ValidationError

from location_display.cli.display import (
    display_config,
    display_error,
    display_info,
    display_success,
)
from location_display.config import (
    DURATION_UI_MAX_MS,
    DURATION_UI_MIN_MS,
    get_settings,
    load_config,
    save_config,
)
from location_display.exceptions import ConfigError

app = typer.Typer(help="Show and edit the mod configuration")


def _config_path(path: Optional[str]) -> str:
    return path or get_settings().config_path


@app.command()
def show(
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Config file path"),
) -> None:
    """Show the current configuration."""
    config_path = _config_path(path)
    try:
        config = load_config(config_path, strict=True)
    except ConfigError as e:
        display_error(str(e))
        raise typer.Exit(1)
    display_config(config, config_path)


@app.command("set")
def set_options(
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Config file path"),
    enable: Optional[bool] = typer.Option(
        None, "--enable/--disable", help="Show location popups"
    ),
    duration: Optional[int] = typer.Option(
        None, "--duration", "-d", help="Notification duration in milliseconds"
    ),
    debug_logging: Optional[bool] = typer.Option(
        None, "--debug-logging/--no-debug-logging", help="Enable debug logging"
    ),
) -> None:
    """Change one or more options and save."""
    config_path = _config_path(path)
    try:
        config = load_config(config_path, strict=True)
        if enable is not None:
            config.enable_mod = enable
        if duration is not None:
            config.notification_duration = duration
        if debug_logging is not None:
            config.enable_debug_logging = debug_logging
        save_config(config, config_path)
    except ValidationError as e:
        display_error(f"Invalid value: {e.errors()[0]['msg']}")
        raise typer.Exit(1)
    except ConfigError as e:
        display_error(str(e))
        raise typer.Exit(1)

    if duration is not None and not DURATION_UI_MIN_MS <= duration <= DURATION_UI_MAX_MS:
        display_info(
            f"Duration {duration}ms is outside the recommended "
            f"{DURATION_UI_MIN_MS}-{DURATION_UI_MAX_MS}ms range"
        )
    display_success(f"Saved {config_path}")


@app.command()
def reset(
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Config file path"),
) -> None:
    """Restore default options."""
    config_path = _config_path(path)
    config = load_config(config_path)
    config.reset()
    try:
        save_config(config, config_path)
    except ConfigError as e:
        display_error(str(e))
        raise typer.Exit(1)
    display_success(f"Reset {config_path} to defaults")
