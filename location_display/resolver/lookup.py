"""Translation lookup results.

The translation backend signals "no translation" in several ways: None, a
blank string, or a placeholder text such as "(no translation:location.Farm)".
LookupResult classifies a raw backend value once so the resolver never
sniffs strings itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Union


MISSING_TRANSLATION_PREFIX = "(no translation:"

# Unsubstituted template tokens like {{level}} or {{ level }}
TEMPLATE_TOKEN_RE = re.compile(r"\{\{\s*[\w.]+\s*\}\}")


class LookupStatus(str, Enum):
    """Outcome of a translation lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    EMPTY = "empty"


@dataclass(frozen=True)
class LookupResult:
    """Classified translation lookup result."""

    status: LookupStatus
    text: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def of(cls, text: str) -> LookupResult:
        """A found translation."""
        return cls(LookupStatus.FOUND, text)

    @classmethod
    def not_found(cls) -> LookupResult:
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def empty(cls) -> LookupResult:
        return cls(LookupStatus.EMPTY)

    @classmethod
    def classify(cls, value: Any) -> LookupResult:
        """Classify a raw backend value.

        Args:
            value: A LookupResult (returned as-is), a string, or None.

        Returns:
            FOUND for usable text, NOT_FOUND for None or a placeholder,
            EMPTY for blank strings.
        """
        if isinstance(value, LookupResult):
            return value
        if value is None:
            return cls.not_found()
        text = str(value)
        if not text.strip():
            return cls.empty()
        if is_placeholder(text):
            return cls.not_found()
        return cls.of(text)


TranslationLookup = Callable[..., Union[str, LookupResult, None]]
"""Lookup callable: lookup(key) or lookup(key, params) -> text, None or LookupResult."""


def is_placeholder(text: str | None) -> bool:
    """Check whether text is the backend's missing-translation placeholder."""
    return bool(text) and text.lstrip().startswith(MISSING_TRANSLATION_PREFIX)


def has_template_token(text: str) -> bool:
    """Check whether text still contains an unsubstituted {{token}}."""
    return TEMPLATE_TOKEN_RE.search(text) is not None


def call_lookup(
    lookup: TranslationLookup,
    key: str,
    params: Mapping[str, Any] | None = None,
) -> LookupResult:
    """Invoke a lookup callable and classify its result.

    Parameters are only passed when given, so single-argument lookup
    callables work for static keys.
    """
    if params is None:
        raw = lookup(key)
    else:
        raw = lookup(key, dict(params))
    return LookupResult.classify(raw)
