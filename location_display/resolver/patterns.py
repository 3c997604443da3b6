"""Parametric location patterns.

Some locations are one of a numbered family ("UndergroundMine42" is level 42
of the mines). A static translation key cannot carry the number, so these
are resolved through a templated key with a {{level}} parameter.

Rules are evaluated in order; the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParametricPattern:
    """A `<prefix><digits>` location family.

    Attributes:
        prefix: Identifier prefix, e.g. "UndergroundMine".
        human_name: Readable family name used for the fallback text.
        template_key: Translation key taking a `level` parameter.
    """

    prefix: str
    human_name: str
    template_key: str

    def match(self, identifier: str) -> int | None:
        """Extract the level number, or None when identifier is not in this family."""
        if not identifier.startswith(self.prefix):
            return None
        digits = identifier[len(self.prefix) :]
        # isdecimal rejects signs, spaces and superscript digits
        if not digits or not digits.isascii() or not digits.isdecimal():
            return None
        try:
            return int(digits)
        except ValueError:
            # Beyond the interpreter's int conversion digit limit
            return None

    def cache_key(self, level: int) -> str:
        return f"{self.prefix}_Level_{level}"

    def fallback(self, level: int) -> str:
        return f"{self.human_name} Level {level}"


DEFAULT_PATTERNS: tuple[ParametricPattern, ...] = (
    ParametricPattern(
        prefix="UndergroundMine",
        human_name="Underground Mine",
        template_key="location.UndergroundMine_Level",
    ),
    ParametricPattern(
        prefix="VolcanoDungeon",
        human_name="Volcano Dungeon",
        template_key="location.VolcanoDungeon_Level",
    ),
)


def match_pattern(
    identifier: str,
    patterns: tuple[ParametricPattern, ...] = DEFAULT_PATTERNS,
) -> tuple[ParametricPattern, int] | None:
    """Find the first pattern matching identifier.

    Returns:
        (pattern, level) or None.
    """
    for pattern in patterns:
        level = pattern.match(identifier)
        if level is not None:
            return pattern, level
    return None
