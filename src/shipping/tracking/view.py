"""Tracking view: the display-ready answer to "where is my cargo?".

Views are built per request and never persisted or mutated. ``to_dict()``
gives the JSON shape consumed by tracking pages, with keys in display order.
"""

from dataclasses import dataclass
from datetime import UTC, datetime


def format_timestamp(value: datetime | None) -> str | None:
    """Render a timestamp as RFC 3339 to the second, ``Z`` for UTC.

    Naive datetimes are taken to be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat(timespec="seconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class TrackingEvent:
    """One described handling event, flagged against the itinerary."""

    description: str
    expected: bool

    def to_dict(self) -> dict:
        return {"description": self.description, "expected": self.expected}


@dataclass(frozen=True)
class TrackingView:
    tracking_id: str
    status_text: str
    origin: str
    destination: str
    eta: datetime | None
    next_expected_activity: str
    misrouted: bool
    routed: bool
    arrival_deadline: datetime | None
    events: tuple[TrackingEvent, ...] = ()

    def to_dict(self) -> dict:
        return {
            "trackingId": self.tracking_id,
            "statusText": self.status_text,
            "origin": self.origin,
            "destination": self.destination,
            "eta": format_timestamp(self.eta),
            "nextExpectedActivity": self.next_expected_activity,
            "misrouted": self.misrouted,
            "routed": self.routed,
            "arrivalDeadline": format_timestamp(self.arrival_deadline),
            "events": [event.to_dict() for event in self.events],
        }
