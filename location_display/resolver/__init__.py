"""Location name resolution.

This module resolves raw location identifiers to display names:
- Host display name passthrough
- GUID suffix sanitization
- Parametric (numbered level) patterns
- Cached translation lookup
"""

from location_display.resolver.cache import NEGATIVE, CacheKey, TranslationCache
from location_display.resolver.lookup import LookupResult, LookupStatus
from location_display.resolver.name_resolver import (
    NameResolver,
    Resolution,
    ResolutionRule,
)
from location_display.resolver.patterns import DEFAULT_PATTERNS, ParametricPattern
from location_display.resolver.sanitizer import UNKNOWN_LOCATION, sanitize

__all__ = [
    "CacheKey",
    "DEFAULT_PATTERNS",
    "LookupResult",
    "LookupStatus",
    "NEGATIVE",
    "NameResolver",
    "ParametricPattern",
    "Resolution",
    "ResolutionRule",
    "TranslationCache",
    "UNKNOWN_LOCATION",
    "sanitize",
]
