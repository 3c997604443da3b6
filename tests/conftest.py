"""Core test fixtures for location display tests."""

from unittest.mock import MagicMock

import pytest

from location_display.config import ModConfig
from location_display.host.console_host import ConsoleHost
from location_display.host.protocol import HostEnvironment
from location_display.host.translations import JsonTranslationProvider
from location_display.resolver.cache import TranslationCache
from location_display.resolver.name_resolver import NameResolver

from tests.factories import RecordingLookup


@pytest.fixture
def cache() -> TranslationCache:
    """Fresh translation cache for each test."""
    return TranslationCache()


@pytest.fixture
def resolver(cache: TranslationCache) -> NameResolver:
    """NameResolver over the fresh cache."""
    return NameResolver(cache)


@pytest.fixture
def lookup() -> RecordingLookup:
    """Lookup with a few location translations."""
    return RecordingLookup(
        {
            "location.Farm": "Farm",
            "location.Town": "Pelican Town",
            "location.Bus_Stop": "Bus Stop",
        }
    )


@pytest.fixture
def config() -> ModConfig:
    """Default mod config."""
    return ModConfig()


@pytest.fixture
def translations() -> JsonTranslationProvider:
    """In-memory translation tables for English and French."""
    return JsonTranslationProvider(
        translations={
            "default": {
                "location.Farm": "Farm",
                "location.Town": "Pelican Town",
                "location.Beach": "The Beach",
                "location.UndergroundMine_Level": "The Mines - Level {{level}}",
            },
            "fr": {
                "location.Farm": "Ferme",
                "location.Town": "Pélican Ville",
            },
        }
    )


@pytest.fixture
def console_host(translations: JsonTranslationProvider) -> ConsoleHost:
    """Silent ConsoleHost with the in-memory translations."""
    return ConsoleHost(translations, language="default")


@pytest.fixture
def mock_host() -> MagicMock:
    """Host double recording every capability call.

    Translations always miss; each show_notification returns a new handle.
    """
    host = MagicMock(spec=HostEnvironment)
    host.get_host_display_name.return_value = None
    host.translate.side_effect = lambda key, params=None: f"(no translation:{key})"
    host.current_language_tag.return_value = "en"
    host.current_location.return_value = None
    host.show_notification.side_effect = lambda text, duration_ms: object()
    return host
