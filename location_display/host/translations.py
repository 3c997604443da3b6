"""JSON translation files for the reference host.

Translations live in an i18n directory with one flat JSON object per
locale:

    i18n/
        default.json   {"location.Farm": "Farm", ...}
        fr.json        {"location.Farm": "Ferme", ...}
        pt-BR.json

A key is looked up through the locale chain (pt-BR -> pt -> default).
Missing keys produce the "(no translation:<key>)" placeholder, the same
signal the game's translation helper gives.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping

from location_display.exceptions import TranslationFileError
from location_display.resolver.lookup import MISSING_TRANSLATION_PREFIX


logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "default"

TOKEN_RE = re.compile(r"\{\{\s*([\w.]+)\s*\}\}")


def locale_chain(language: str | None) -> list[str]:
    """Locales to try for a language, most specific first.

    Examples:
        >>> locale_chain("pt-BR")
        ['pt-BR', 'pt', 'default']

        >>> locale_chain("default")
        ['default']
    """
    chain: list[str] = []
    if language and language != DEFAULT_LOCALE:
        chain.append(language)
        if "-" in language:
            chain.append(language.split("-")[0])
    chain.append(DEFAULT_LOCALE)
    return chain


def substitute_tokens(text: str, params: Mapping[str, Any] | None) -> str:
    """Replace {{token}} placeholders with values from params.

    Tokens without a matching parameter are left in place.
    """
    if not params:
        return text
    lowered = {str(k).lower(): v for k, v in params.items()}

    def _replace(match: re.Match) -> str:
        name = match.group(1).lower()
        if name in lowered:
            return str(lowered[name])
        return match.group(0)

    return TOKEN_RE.sub(_replace, text)


def missing_translation(key: str) -> str:
    return f"{MISSING_TRANSLATION_PREFIX}{key})"


class JsonTranslationProvider:
    """Loads locale files lazily and answers translation lookups.

    Usage:
        provider = JsonTranslationProvider(Path("i18n"))
        provider.get("location.Farm", language="fr")
        provider.get("location.UndergroundMine_Level", {"level": 5})
    """

    def __init__(
        self,
        i18n_dir: Path | str | None = None,
        translations: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            i18n_dir: Directory holding <locale>.json files.
            translations: Preloaded locale -> {key: text} tables. These take
                the place of files for the locales they name.
        """
        self.i18n_dir = Path(i18n_dir) if i18n_dir is not None else None
        self._tables: dict[str, dict[str, str]] = {
            locale: dict(table) for locale, table in (translations or {}).items()
        }

    def get(
        self,
        key: str,
        params: Mapping[str, Any] | None = None,
        language: str | None = None,
    ) -> str:
        """Translate key for language, substituting params.

        Returns:
            The translated text, or the missing-translation placeholder.
        """
        for locale in locale_chain(language):
            table = self._table(locale)
            text = table.get(key)
            if text:
                return substitute_tokens(text, params)
        return missing_translation(key)

    def _table(self, locale: str) -> dict[str, str]:
        if locale not in self._tables:
            self._tables[locale] = self._load_file(locale)
        return self._tables[locale]

    def _load_file(self, locale: str) -> dict[str, str]:
        """Read <locale>.json, returning an empty table when absent."""
        if self.i18n_dir is None:
            return {}
        path = self.i18n_dir / f"{locale}.json"
        if not path.exists():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise TranslationFileError(f"Cannot read {path}: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            raise TranslationFileError(f"{path} must contain a JSON object", path=str(path))

        table = {str(k): str(v) for k, v in data.items() if v is not None}
        logger.debug(f"Loaded {len(table)} translations from {path}")
        return table
