"""Cargo aggregate (CQRS): the shipment being tracked.

The Cargo is booked and routed by the booking context; this context only
reads it. Delivery state is derived upstream from the itinerary and the
handling history, so every field here is taken as given.
"""

from enum import Enum

from protean.fields import (
    DateTime,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from shipping.domain import shipping


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class TransportStatus(Enum):
    NOT_RECEIVED = "NotReceived"
    IN_PORT = "InPort"
    ONBOARD_CARRIER = "OnboardCarrier"
    CLAIMED = "Claimed"
    UNKNOWN = "Unknown"


class RoutingStatus(Enum):
    NOT_ROUTED = "NotRouted"
    ROUTED = "Routed"
    MISROUTED = "Misrouted"


class HandlingEventType(Enum):
    NOT_HANDLED = "NotHandled"
    RECEIVE = "Receive"
    LOAD = "Load"
    UNLOAD = "Unload"
    CLAIM = "Claim"
    CUSTOMS = "Customs"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@shipping.value_object
class HandlingActivity:
    """What happens to a cargo, where, and on which voyage.

    ``voyage_number`` is only meaningful for Load and Unload.
    """

    type = String(required=True, max_length=20, choices=HandlingEventType)
    location = String(max_length=50)
    voyage_number = String(max_length=50)


@shipping.value_object(part_of="Cargo")
class RouteSpecification:
    """Where the cargo must go and by when."""

    origin = String(max_length=50)
    destination = String(required=True, max_length=50)
    arrival_deadline = DateTime()


@shipping.value_object(part_of="Cargo")
class Delivery:
    """Actual transportation state of the cargo, as last derived upstream."""

    transport_status = String(
        max_length=20,
        choices=TransportStatus,
        default=TransportStatus.NOT_RECEIVED.value,
    )
    routing_status = String(
        max_length=20,
        choices=RoutingStatus,
        default=RoutingStatus.NOT_ROUTED.value,
    )
    last_known_location = String(max_length=50)
    current_voyage = String(max_length=50)
    next_activity_type = String(
        max_length=20,
        choices=HandlingEventType,
        default=HandlingEventType.NOT_HANDLED.value,
    )
    next_activity_location = String(max_length=50)
    next_activity_voyage_number = String(max_length=50)
    eta = DateTime()

    @property
    def next_expected_activity(self) -> HandlingActivity:
        return HandlingActivity(
            type=self.next_activity_type or HandlingEventType.NOT_HANDLED.value,
            location=self.next_activity_location,
            voyage_number=self.next_activity_voyage_number,
        )


# ---------------------------------------------------------------------------
# Itinerary
# ---------------------------------------------------------------------------
class Itinerary:
    """The planned route of a cargo, ordered by leg sequence.

    An itinerary decides whether a handling event was expected: an event is
    expected when it matches the plan. Unplanned cargo (no legs) cannot be
    off-plan, so every event counts as expected.
    """

    def __init__(self, legs):
        self.legs = sorted(legs, key=lambda leg: leg.sequence)

    def __len__(self) -> int:
        return len(self.legs)

    @property
    def is_empty(self) -> bool:
        return not self.legs

    @property
    def initial_departure_location(self) -> str | None:
        if self.is_empty:
            return None
        return self.legs[0].load_location

    @property
    def final_arrival_location(self) -> str | None:
        if self.is_empty:
            return None
        return self.legs[-1].unload_location

    def is_expected(self, event) -> bool:
        """Return True if the handling event fits this itinerary."""
        if self.is_empty:
            return True

        activity = event.activity
        if activity.type == HandlingEventType.RECEIVE.value:
            return self.initial_departure_location == activity.location
        if activity.type == HandlingEventType.LOAD.value:
            return any(
                leg.load_location == activity.location and leg.voyage_number == activity.voyage_number
                for leg in self.legs
            )
        if activity.type == HandlingEventType.UNLOAD.value:
            return any(
                leg.unload_location == activity.location and leg.voyage_number == activity.voyage_number
                for leg in self.legs
            )
        if activity.type == HandlingEventType.CLAIM.value:
            return self.final_arrival_location == activity.location

        # Customs and anything unrecognised do not depend on the plan
        return True


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@shipping.entity(part_of="Cargo")
class Leg:
    """One voyage segment of the planned itinerary."""

    sequence = Integer(required=True, min_value=0)
    voyage_number = String(required=True, max_length=50)
    load_location = String(required=True, max_length=50)
    unload_location = String(required=True, max_length=50)
    load_time = DateTime()
    unload_time = DateTime()


# ---------------------------------------------------------------------------
# Aggregate Root (CQRS)
# ---------------------------------------------------------------------------
@shipping.aggregate
class Cargo:
    tracking_id = Identifier(identifier=True)
    origin = String(required=True, max_length=50)
    route_specification = ValueObject(RouteSpecification, required=True)
    delivery = ValueObject(Delivery, required=True)
    legs = HasMany(Leg)

    @classmethod
    def create(
        cls,
        tracking_id: str,
        origin: str,
        route_specification: RouteSpecification,
        delivery: Delivery,
        legs_data: list[dict] | None = None,
    ):
        """Build a cargo snapshot with its planned legs, in travel order."""
        cargo = cls(
            tracking_id=tracking_id,
            origin=origin,
            route_specification=route_specification,
            delivery=delivery,
        )
        for sequence, leg_data in enumerate(legs_data or []):
            cargo.add_legs(Leg(sequence=sequence, **leg_data))
        return cargo

    @property
    def itinerary(self) -> Itinerary:
        return Itinerary(self.legs or [])
