"""Test doubles and shared constants for location display tests."""

from typing import Any, Mapping


GUID = "a1b2c3d4-e5f6-7890-abcd-ef1234567890"


class RecordingLookup:
    """Translation lookup double that records every call.

    Keys in `table` return their text with {{level}} substituted; any other
    key returns the backend placeholder.
    """

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self.table = dict(table or {})
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    def __call__(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        self.calls.append((key, dict(params) if params is not None else None))
        text = self.table.get(key)
        if text is None:
            return f"(no translation:{key})"
        for name, value in (params or {}).items():
            text = text.replace("{{" + name + "}}", str(value))
        return text

    @property
    def keys(self) -> list[str]:
        return [key for key, _ in self.calls]
