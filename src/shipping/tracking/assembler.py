"""Tracking view assembler: translates cargo state into display text.

Pure functions of (cargo, handling history): no I/O, no mutation. Every
status and activity mapping ends in an explicit fallback, so values added to
the domain enums later render as "Unknown" text instead of raising.

The wording below is shown verbatim on tracking pages; do not rephrase it.
"""

from datetime import datetime
from enum import Enum

from shipping.cargo.cargo import Cargo, HandlingEventType, RoutingStatus, TransportStatus
from shipping.cargo.handling import HandlingHistory
from shipping.tracking.view import TrackingEvent, TrackingView, format_timestamp

NEXT_ACTIVITY_PREFIX = "Next expected activity is to"


class TimestampSource(Enum):
    """Which time an event description reports.

    ASSEMBLY reports when the view was assembled, the same instant for every
    event of a view. COMPLETION reports when each event actually happened.
    """

    ASSEMBLY = "assembly"
    COMPLETION = "completion"


def assemble_status_text(cargo: Cargo) -> str:
    delivery = cargo.delivery
    status = delivery.transport_status

    if status == TransportStatus.NOT_RECEIVED.value:
        return "Not received"
    elif status == TransportStatus.IN_PORT.value:
        return f"In port {delivery.last_known_location or ''}"
    elif status == TransportStatus.ONBOARD_CARRIER.value:
        return f"Onboard voyage {delivery.current_voyage or ''}"
    elif status == TransportStatus.CLAIMED.value:
        return "Claimed"
    else:
        return "Unknown"


def assemble_next_expected_activity(cargo: Cargo) -> str:
    activity = cargo.delivery.next_expected_activity
    if activity is None or activity.type in (None, HandlingEventType.NOT_HANDLED.value):
        return "There are currently no expected activities for this cargo."

    activity_type = activity.type
    location = activity.location or ""
    voyage_number = activity.voyage_number or ""

    if activity_type == HandlingEventType.LOAD.value:
        return f"{NEXT_ACTIVITY_PREFIX} load cargo onto voyage {voyage_number} in {location}."
    elif activity_type == HandlingEventType.UNLOAD.value:
        return f"{NEXT_ACTIVITY_PREFIX} unload cargo off of voyage {voyage_number} in {location}."
    else:
        return f"{NEXT_ACTIVITY_PREFIX} {activity_type.lower()} cargo in {location}."


def describe_event(event, timestamp: str) -> str:
    """Describe one handling event; ``timestamp`` is already rendered."""
    activity = event.activity
    activity_type = activity.type
    location = activity.location or ""
    voyage_number = activity.voyage_number or ""

    if activity_type == HandlingEventType.NOT_HANDLED.value:
        return "Cargo has not yet been received."
    elif activity_type == HandlingEventType.RECEIVE.value:
        return f"Received in {location}, at {timestamp}"
    elif activity_type == HandlingEventType.LOAD.value:
        return f"Loaded onto voyage {voyage_number} in {location}, at {timestamp}."
    elif activity_type == HandlingEventType.UNLOAD.value:
        return f"Unloaded off voyage {voyage_number} in {location}, at {timestamp}."
    elif activity_type == HandlingEventType.CLAIM.value:
        return f"Claimed in {location}, at {timestamp}."
    elif activity_type == HandlingEventType.CUSTOMS.value:
        return f"Cleared customs in {location}, at {timestamp}."
    else:
        return "[Unknown status]"


def _event_timestamp(event, source: TimestampSource, now: datetime) -> str:
    if source == TimestampSource.COMPLETION:
        completed_at = getattr(event, "completion_time", None)
        if completed_at is not None:
            return format_timestamp(completed_at)
    return format_timestamp(now)


def assemble_events(
    cargo: Cargo,
    history: HandlingHistory,
    source: TimestampSource,
    now: datetime,
) -> tuple[TrackingEvent, ...]:
    itinerary = cargo.itinerary
    return tuple(
        TrackingEvent(
            description=describe_event(event, _event_timestamp(event, source, now)),
            expected=itinerary.is_expected(event),
        )
        for event in history
    )


def assemble(
    cargo: Cargo,
    history: HandlingHistory,
    *,
    timestamp_source: TimestampSource = TimestampSource.ASSEMBLY,
    now: datetime,
) -> TrackingView:
    """Build the tracking view for a cargo and its handling history."""
    route = cargo.route_specification
    return TrackingView(
        tracking_id=str(cargo.tracking_id),
        status_text=assemble_status_text(cargo),
        origin=cargo.origin,
        destination=route.destination,
        eta=cargo.delivery.eta,
        next_expected_activity=assemble_next_expected_activity(cargo),
        misrouted=cargo.delivery.routing_status == RoutingStatus.MISROUTED.value,
        routed=not cargo.itinerary.is_empty,
        arrival_deadline=route.arrival_deadline,
        events=assemble_events(cargo, history, TimestampSource(timestamp_source), now),
    )
