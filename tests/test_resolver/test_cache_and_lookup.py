"""Tests for TranslationCache and LookupResult classification."""

import pytest

from location_display.resolver.cache import NEGATIVE, CacheKey, TranslationCache
from location_display.resolver.lookup import (
    LookupResult,
    LookupStatus,
    call_lookup,
    has_template_token,
    is_placeholder,
)


class TestTranslationCache:
    """Tests for TranslationCache."""

    def test_miss_returns_none(self, cache: TranslationCache) -> None:
        assert cache.get("en", "location.Farm") is None

    def test_put_and_get(self, cache: TranslationCache) -> None:
        cache.put("en", "location.Farm", "Farm")

        assert cache.get("en", "location.Farm") == "Farm"
        assert CacheKey("en", "location.Farm") in cache

    def test_language_is_part_of_key(self, cache: TranslationCache) -> None:
        cache.put("en", "location.Farm", "Farm")

        assert cache.get("fr", "location.Farm") is None

    def test_negative_entry_is_distinct_from_miss(self, cache: TranslationCache) -> None:
        cache.put("en", "location.Void", NEGATIVE)

        assert cache.get("en", "location.Void") is NEGATIVE
        assert CacheKey("en", "location.Void") in cache
        assert not NEGATIVE

    def test_one_entry_per_key(self, cache: TranslationCache) -> None:
        cache.put("en", "location.Farm", "Farm")
        cache.put("en", "location.Farm", "Big Farm")

        assert len(cache) == 1
        assert cache.get("en", "location.Farm") == "Big Farm"

    def test_clear(self, cache: TranslationCache) -> None:
        cache.put("en", "location.Farm", "Farm")
        cache.put("en", "location.Void", NEGATIVE)

        cache.clear()

        assert len(cache) == 0


class TestLookupResult:
    """Tests for LookupResult.classify."""

    @pytest.mark.parametrize(
        "value,status",
        [
            (None, LookupStatus.NOT_FOUND),
            ("", LookupStatus.EMPTY),
            ("  ", LookupStatus.EMPTY),
            ("(no translation:location.Farm)", LookupStatus.NOT_FOUND),
            ("Farm", LookupStatus.FOUND),
        ],
    )
    def test_classify(self, value, status: LookupStatus) -> None:
        assert LookupResult.classify(value).status is status

    def test_found_keeps_text(self) -> None:
        result = LookupResult.classify("Ferme")

        assert result.found
        assert result.text == "Ferme"

    def test_existing_result_passes_through(self) -> None:
        result = LookupResult.not_found()

        assert LookupResult.classify(result) is result


class TestLookupHelpers:
    """Tests for placeholder and token helpers."""

    def test_is_placeholder(self) -> None:
        assert is_placeholder("(no translation:x)")
        assert not is_placeholder("Farm")
        assert not is_placeholder(None)

    @pytest.mark.parametrize("text", ["Level {{level}}", "Level {{ level }}"])
    def test_has_template_token(self, text: str) -> None:
        assert has_template_token(text)

    def test_substituted_text_has_no_token(self) -> None:
        assert not has_template_token("Level 5")

    def test_call_lookup_omits_params_when_none(self) -> None:
        """Single-argument lookups work for static keys."""
        assert call_lookup(lambda key: key.upper(), "farm").text == "FARM"

    def test_call_lookup_passes_params(self) -> None:
        result = call_lookup(lambda key, params: f"{key}:{params['level']}", "mine", {"level": 3})

        assert result.text == "mine:3"
