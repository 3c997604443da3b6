"""Tests for LocationDisplayMod host callbacks."""

import logging
from unittest.mock import MagicMock

import pytest

from location_display.config import ModConfig
from location_display.host.console_host import ConsoleHost
from location_display.mod import LocationDisplayMod
from location_display.resolver.sanitizer import UNKNOWN_LOCATION

from tests.factories import GUID


class TestSessionLifecycle:
    """Tests for on_session_start."""

    def test_session_start_clears_cache(self, mock_host: MagicMock) -> None:
        mod = LocationDisplayMod(mock_host)
        mod.on_location_changed("Farm")
        assert len(mod.cache) == 1

        mod.on_session_start()

        assert len(mod.cache) == 0

    def test_language_change_between_sessions(self, console_host: ConsoleHost) -> None:
        mod = LocationDisplayMod(console_host)
        mod.on_session_start()
        mod.on_location_changed("Farm")
        assert console_host.visible_texts == ["Farm"]

        console_host.language = "fr"
        mod.on_session_start()
        mod.on_location_changed("Farm")

        assert console_host.visible_texts == ["Farm", "Ferme"]

    def test_lookup_is_not_repeated_within_session(self, mock_host: MagicMock) -> None:
        mod = LocationDisplayMod(mock_host)

        for raw in ["Farm", "Town", "Farm", "Town"]:
            mod.on_location_changed(raw)

        assert mock_host.translate.call_count == 2
        assert mock_host.show_notification.call_count == 4


class TestEndToEnd:
    """Warp sequences through the in-memory host."""

    def test_mine_without_translation(self, mock_host: MagicMock) -> None:
        mod = LocationDisplayMod(mock_host)

        mod.on_location_changed("UndergroundMine42")

        mock_host.show_notification.assert_called_once_with("Underground Mine Level 42", 3000)

    def test_mine_with_template(self, console_host: ConsoleHost) -> None:
        mod = LocationDisplayMod(console_host)

        mod.on_location_changed("UndergroundMine42")

        assert console_host.visible_texts == ["The Mines - Level 42"]

    def test_guid_instance(self, console_host: ConsoleHost) -> None:
        mod = LocationDisplayMod(console_host)

        mod.on_location_changed(f"Farm_{GUID}")

        assert console_host.visible_texts == ["Farm"]

    def test_empty_identifier(self, mock_host: MagicMock) -> None:
        mod = LocationDisplayMod(mock_host)

        mod.on_location_changed("")

        mock_host.show_notification.assert_called_once_with(UNKNOWN_LOCATION, 3000)
        mock_host.translate.assert_not_called()

    def test_disabled_mod(self, console_host: ConsoleHost) -> None:
        mod = LocationDisplayMod(console_host, ModConfig(EnableMod=False))

        assert mod.on_location_changed("Farm") is False
        assert console_host.visible_texts == []


class TestDescribeCurrentLocation:
    """Tests for the debug query."""

    def test_no_location(self, console_host: ConsoleHost) -> None:
        description = LocationDisplayMod(console_host).describe_current_location()

        assert description.raw is None
        assert description.resolved_name is None

    def test_describes_current_location(self, translations) -> None:
        host = ConsoleHost(translations, display_names={"Saloon": "Stardrop Saloon"})
        mod = LocationDisplayMod(host)
        host.warp("Saloon")

        description = mod.describe_current_location()

        assert description.raw == "Saloon"
        assert description.host_display_name == "Stardrop Saloon"
        assert description.resolved_name == "Stardrop Saloon"

    def test_has_no_side_effects(self, console_host: ConsoleHost) -> None:
        mod = LocationDisplayMod(console_host)
        console_host.warp(f"Farm_{GUID}")

        description = mod.describe_current_location()

        assert description.resolved_name == "Farm"
        assert console_host.visible_texts == []
        assert len(mod.cache) == 0
        assert mod.controller.last_shown_name is None


class TestDebugLogging:
    """Tests for the EnableDebugLogging option."""

    @pytest.fixture
    def package_logger(self):
        """The package logger, with its level restored after the test."""
        package_logger = logging.getLogger("location_display")
        original = package_logger.level
        yield package_logger
        package_logger.setLevel(original)

    def test_enabled_sets_debug_level(
        self, mock_host: MagicMock, package_logger: logging.Logger
    ) -> None:
        LocationDisplayMod(mock_host, ModConfig(EnableDebugLogging=True))

        assert package_logger.level == logging.DEBUG

    def test_disabled_leaves_host_level_alone(
        self, mock_host: MagicMock, package_logger: logging.Logger
    ) -> None:
        package_logger.setLevel(logging.WARNING)

        mod = LocationDisplayMod(mock_host, ModConfig(EnableDebugLogging=False))
        mod.on_session_start()

        assert package_logger.level == logging.WARNING

    def test_switching_off_restores_prior_level(
        self, mock_host: MagicMock, package_logger: logging.Logger
    ) -> None:
        package_logger.setLevel(logging.WARNING)
        config = ModConfig(EnableDebugLogging=True)
        mod = LocationDisplayMod(mock_host, config)
        assert package_logger.level == logging.DEBUG

        config.enable_debug_logging = False
        mod.on_session_start()

        assert package_logger.level == logging.WARNING

    def test_staying_on_keeps_original_level_to_restore(
        self, mock_host: MagicMock, package_logger: logging.Logger
    ) -> None:
        package_logger.setLevel(logging.ERROR)
        config = ModConfig(EnableDebugLogging=True)
        mod = LocationDisplayMod(mock_host, config)
        mod.on_session_start()

        config.enable_debug_logging = False
        mod.on_session_start()

        assert package_logger.level == logging.ERROR
