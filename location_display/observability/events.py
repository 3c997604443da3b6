"""Event dataclasses for observability hooks.

These events are emitted by the notification controller so a host or the
CLI can see how each location change was handled.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class LocationResolvedEvent:
    """Emitted after a raw identifier is resolved."""

    raw_identifier: str | None
    name: str
    rule: str  # ResolutionRule value
    cache_hit: bool = False
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class NotificationShownEvent:
    """Emitted when a new notification is displayed."""

    name: str
    duration_ms: int
    replaced: bool = False  # An earlier notification was evicted first
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class NotificationSuppressedEvent:
    """Emitted when a repeated name is not shown again."""

    name: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class NotificationEvictedEvent:
    """Emitted when the previous notification is removed."""

    name: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class LocationErrorEvent:
    """Emitted when a host capability raised during a location change."""

    raw_identifier: str | None
    error: str
    timestamp: datetime = field(default_factory=datetime.now)
