"""Single-slot location notifications."""

from location_display.notifications.controller import NotificationController

__all__ = [
    "NotificationController",
]
