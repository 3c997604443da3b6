"""Sanitization of procedurally generated location identifiers.

Instanced locations get a GUID appended to their base name, e.g.
"Cabin_0f8e1c2a-3b4d-4e5f-8a9b-0c1d2e3f4a5b". The base name is what
translations are keyed on.
"""

import logging
import re


logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown Location"

GUID_LENGTH = 36
MIN_NAME_LENGTH = 2

GUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Characters that join a base name to its GUID suffix
GUID_SEPARATORS = "_-"


def strip_guid_suffix(name: str) -> str:
    """Remove a trailing GUID (and one joining separator) from name.

    Returns name unchanged when it does not end with a GUID.
    """
    if len(name) <= GUID_LENGTH:
        return name

    suffix = name[-GUID_LENGTH:]
    if not GUID_RE.match(suffix):
        return name

    base = name[:-GUID_LENGTH]
    # The separator goes only when the base stays long enough to be a name
    if len(base) > MIN_NAME_LENGTH and base[-1] in GUID_SEPARATORS:
        base = base[:-1]
    logger.debug(f"Sanitized raw name from '{name}' to '{base}'")
    return base


def sanitize(name: str | None) -> str:
    """Recover the base identifier of a raw location name.

    Args:
        name: Raw identifier from the host.

    Returns:
        The base name, or UNKNOWN_LOCATION when it is empty or shorter than
        MIN_NAME_LENGTH after stripping.
    """
    if not name:
        return UNKNOWN_LOCATION

    base = strip_guid_suffix(name)
    if len(base) < MIN_NAME_LENGTH:
        return UNKNOWN_LOCATION
    return base
