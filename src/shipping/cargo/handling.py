"""Handling events: real-world occurrences recorded against a cargo.

Handling events are registered by the handling context (port operators,
customs, claims desk). They are immutable facts; this context never writes
them, only reads a cargo's history in the order they were registered.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, ValueObject

from shipping.cargo.cargo import HandlingActivity
from shipping.domain import shipping


def _utc_now():
    return datetime.now(UTC)


@shipping.aggregate
class HandlingEvent:
    tracking_id = Identifier(required=True)
    activity = ValueObject(HandlingActivity, required=True)
    completion_time = DateTime()
    registration_time = DateTime(default=_utc_now)


@dataclass(frozen=True)
class HandlingHistory:
    """A cargo's handling events, in registration order."""

    handling_events: tuple[HandlingEvent, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "handling_events", tuple(self.handling_events))

    def __iter__(self):
        return iter(self.handling_events)

    def __len__(self) -> int:
        return len(self.handling_events)
