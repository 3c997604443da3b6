"""Configuration for the location display mod.

Two layers:
- ModConfig: the player-facing options persisted as JSON next to the mod.
- Settings: process settings (paths, language, debug) from environment
  variables via pydantic-settings.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from location_display.exceptions import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_DURATION_MS = 3000

# Recommended range for a settings UI slider (not enforced)
DURATION_UI_MIN_MS = 1000
DURATION_UI_MAX_MS = 10000
DURATION_UI_STEP_MS = 500


class ModConfig(BaseModel):
    """Player-facing options.

    Persisted with PascalCase keys (EnableMod, NotificationDuration,
    EnableDebugLogging); attribute access uses snake_case.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    enable_mod: bool = Field(
        default=True,
        alias="EnableMod",
        description="Show location popups when entering new areas",
    )
    notification_duration: int = Field(
        default=DEFAULT_NOTIFICATION_DURATION_MS,
        alias="NotificationDuration",
        gt=0,
        description="How long the location popup stays on screen (in milliseconds)",
        json_schema_extra={
            "ui_min": DURATION_UI_MIN_MS,
            "ui_max": DURATION_UI_MAX_MS,
            "ui_step": DURATION_UI_STEP_MS,
        },
    )
    enable_debug_logging: bool = Field(
        default=False,
        alias="EnableDebugLogging",
        description="Enable debug logging for the mod",
    )

    def reset(self) -> None:
        """Restore every option to its default value."""
        defaults = ModConfig()
        for name in type(self).model_fields:
            setattr(self, name, getattr(defaults, name))


def load_config(path: Path | str, strict: bool = False) -> ModConfig:
    """Load the persisted config, creating it with defaults when missing.

    Args:
        path: Path to the JSON config file.
        strict: Raise ConfigError on unreadable or invalid files instead of
            falling back to defaults.

    Returns:
        The loaded ModConfig.
    """
    path = Path(path)
    if not path.exists():
        config = ModConfig()
        try:
            save_config(config, path)
        except ConfigError as e:
            logger.warning(f"Could not write default config: {e}")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a JSON object", path=str(path))
        return ModConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError, ConfigError) as e:
        if strict:
            if isinstance(e, ConfigError):
                raise
            raise ConfigError(f"Invalid config file {path}: {e}", path=str(path)) from e
        logger.error(f"Error loading config from {path}, using defaults: {e}")
        return ModConfig()


def save_config(config: ModConfig, path: Path | str) -> None:
    """Write the config as JSON using the persisted key names."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(by_alias=True), f, indent=2)
    except OSError as e:
        raise ConfigError(f"Error saving config: {e}", path=str(path)) from e


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LOCATION_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Files
    config_path: str = "config.json"
    i18n_dir: str = "i18n"

    # Active locale ("default" uses only default.json)
    language: str = "default"

    # Debug
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
