"""NameResolver: raw location identifiers to display names.

Resolution strategies (in order):
1. Host-provided display name
2. Sanitization (GUID suffix, empty/short names)
3. Parametric pattern match (numbered mine and volcano levels)
4. Direct translation key lookup, falling back to the normalized base name

Every branch ends in a string; the worst case is "Unknown Location".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from location_display.resolver.cache import NEGATIVE, TranslationCache
from location_display.resolver.lookup import (
    LookupResult,
    TranslationLookup,
    call_lookup,
    has_template_token,
    is_placeholder,
)
from location_display.resolver.patterns import (
    DEFAULT_PATTERNS,
    ParametricPattern,
    match_pattern,
)
from location_display.resolver.sanitizer import UNKNOWN_LOCATION, sanitize


logger = logging.getLogger(__name__)

TRANSLATION_KEY_PREFIX = "location."


class ResolutionRule(str, Enum):
    """Which strategy produced a name."""

    HOST_DISPLAY_NAME = "host_display_name"
    UNKNOWN = "unknown"
    PATTERN = "pattern"
    TRANSLATION = "translation"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Resolution:
    """Resolved name with diagnostics."""

    name: str
    rule: ResolutionRule
    cache_hit: bool = False


def normalize_key(name: str) -> str:
    """Replace spaces and periods with underscores."""
    return name.replace(" ", "_").replace(".", "_")


def translation_key(name: str) -> str:
    """Build the direct translation key for a base name."""
    return f"{TRANSLATION_KEY_PREFIX}{normalize_key(name)}"


class NameResolver:
    """Resolves location identifiers to display names.

    The cache is injected so a host can clear it on session start and tests
    can start from an empty one.

    Usage:
        resolver = NameResolver(TranslationCache())
        name = resolver.resolve("UndergroundMine42", "en", translate)
    """

    def __init__(
        self,
        cache: TranslationCache | None = None,
        patterns: tuple[ParametricPattern, ...] = DEFAULT_PATTERNS,
    ) -> None:
        """Initialize NameResolver.

        Args:
            cache: Translation cache shared for the session.
            patterns: Ordered parametric patterns.
        """
        self.cache = cache if cache is not None else TranslationCache()
        self.patterns = patterns

    def resolve(
        self,
        raw_identifier: str | None,
        language: str,
        lookup: TranslationLookup,
        host_display_name: str | None = None,
    ) -> str:
        """Resolve a raw identifier to a display name.

        Args:
            raw_identifier: Location identifier from the host.
            language: Active language tag (part of the cache key).
            lookup: Translation lookup callable.
            host_display_name: Display name the host already knows, if any.

        Returns:
            A non-empty display name.
        """
        return self.resolve_detailed(
            raw_identifier, language, lookup, host_display_name
        ).name

    def resolve_detailed(
        self,
        raw_identifier: str | None,
        language: str,
        lookup: TranslationLookup,
        host_display_name: str | None = None,
    ) -> Resolution:
        """Resolve a raw identifier, reporting which rule matched."""
        if host_display_name and host_display_name.strip() and not is_placeholder(
            host_display_name
        ):
            logger.debug(f"Using host display name: {host_display_name}")
            return Resolution(host_display_name, ResolutionRule.HOST_DISPLAY_NAME)

        base_name = sanitize(raw_identifier)
        if base_name == UNKNOWN_LOCATION:
            logger.debug(f"Unresolvable identifier: {raw_identifier!r}")
            return Resolution(UNKNOWN_LOCATION, ResolutionRule.UNKNOWN)

        matched = match_pattern(base_name, self.patterns)
        if matched is not None:
            pattern, level = matched
            return self._resolve_pattern(pattern, level, language, lookup)

        return self._resolve_direct(base_name, language, lookup)

    def _resolve_pattern(
        self,
        pattern: ParametricPattern,
        level: int,
        language: str,
        lookup: TranslationLookup,
    ) -> Resolution:
        """Resolve a numbered location through its templated key."""
        key = pattern.cache_key(level)
        cached = self.cache.get(language, key)
        if isinstance(cached, str):
            return Resolution(cached, ResolutionRule.PATTERN, cache_hit=True)

        result = self._safe_lookup(lookup, pattern.template_key, {"level": level})
        if result is None:
            return Resolution(pattern.fallback(level), ResolutionRule.PATTERN)

        if result.found and not has_template_token(result.text):
            name = result.text
        else:
            name = pattern.fallback(level)
            logger.debug(f"No usable translation for {key}, using '{name}'")

        self.cache.put(language, key, name)
        return Resolution(name, ResolutionRule.PATTERN)

    def _resolve_direct(
        self,
        base_name: str,
        language: str,
        lookup: TranslationLookup,
    ) -> Resolution:
        """Resolve a base name through its direct translation key."""
        key = translation_key(base_name)
        fallback = normalize_key(base_name)

        cached = self.cache.get(language, key)
        if cached is NEGATIVE:
            return Resolution(fallback, ResolutionRule.FALLBACK, cache_hit=True)
        if isinstance(cached, str):
            logger.debug(f"Using cached translation for {base_name}: {cached}")
            return Resolution(cached, ResolutionRule.TRANSLATION, cache_hit=True)

        result = self._safe_lookup(lookup, key)
        if result is None:
            return Resolution(fallback, ResolutionRule.FALLBACK)

        if result.found:
            logger.debug(f"Found translation for {base_name}: {result.text}")
            self.cache.put(language, key, result.text)
            return Resolution(result.text, ResolutionRule.TRANSLATION)

        logger.debug(f"No translation found for {key}, using '{fallback}'")
        self.cache.put(language, key, NEGATIVE)
        return Resolution(fallback, ResolutionRule.FALLBACK)

    def _safe_lookup(
        self,
        lookup: TranslationLookup,
        key: str,
        params: Mapping[str, Any] | None = None,
    ) -> LookupResult | None:
        """Call the lookup, returning None if it raised.

        A failed call is not cached, so the next visit tries again.
        """
        try:
            return call_lookup(lookup, key, params)
        except Exception as e:
            logger.warning(f"Translation lookup failed for {key}: {e}")
            return None
