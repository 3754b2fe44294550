from datetime import UTC, datetime

import pytest
from protean.integrations.pytest import DomainFixture

ASSEMBLED_AT = datetime(2024, 3, 1, 10, 15, tzinfo=UTC)

DEFAULT_LEGS = [
    {"voyage_number": "V100", "load_location": "CNHKG", "unload_location": "USNYC"},
    {"voyage_number": "V200", "load_location": "USNYC", "unload_location": "SESTO"},
]


@pytest.fixture(scope="session")
def shipping_bed():
    from shipping.domain import shipping

    bed = DomainFixture(shipping)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shipping_bed):
    with shipping_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _reset_ports():
    from shipping.ports import reset_ports

    reset_ports()
    yield
    reset_ports()


@pytest.fixture()
def fixed_clock():
    return lambda: ASSEMBLED_AT


@pytest.fixture()
def make_cargo():
    """Factory for Cargo snapshots; keyword overrides tweak the delivery state."""
    from shipping.cargo.cargo import (
        Cargo,
        Delivery,
        HandlingEventType,
        RouteSpecification,
        RoutingStatus,
        TransportStatus,
    )

    def _make(
        tracking_id="ABC123",
        origin="CNHKG",
        destination="SESTO",
        arrival_deadline=datetime(2024, 3, 20, tzinfo=UTC),
        transport_status=TransportStatus.NOT_RECEIVED.value,
        routing_status=RoutingStatus.ROUTED.value,
        last_known_location=None,
        current_voyage=None,
        next_activity_type=HandlingEventType.NOT_HANDLED.value,
        next_activity_location=None,
        next_activity_voyage_number=None,
        eta=datetime(2024, 3, 18, 12, 0, tzinfo=UTC),
        legs=DEFAULT_LEGS,
    ):
        return Cargo.create(
            tracking_id=tracking_id,
            origin=origin,
            route_specification=RouteSpecification(
                origin=origin,
                destination=destination,
                arrival_deadline=arrival_deadline,
            ),
            delivery=Delivery(
                transport_status=transport_status,
                routing_status=routing_status,
                last_known_location=last_known_location,
                current_voyage=current_voyage,
                next_activity_type=next_activity_type,
                next_activity_location=next_activity_location,
                next_activity_voyage_number=next_activity_voyage_number,
                eta=eta,
            ),
            legs_data=[dict(leg) for leg in legs],
        )

    return _make


@pytest.fixture()
def make_event():
    """Factory for HandlingEvents."""
    from shipping.cargo.cargo import HandlingActivity
    from shipping.cargo.handling import HandlingEvent

    def _make(
        activity_type,
        location,
        voyage_number=None,
        tracking_id="ABC123",
        completion_time=None,
        registration_time=None,
    ):
        kwargs = {
            "tracking_id": tracking_id,
            "activity": HandlingActivity(
                type=activity_type,
                location=location,
                voyage_number=voyage_number,
            ),
            "completion_time": completion_time,
        }
        if registration_time is not None:
            kwargs["registration_time"] = registration_time
        return HandlingEvent(**kwargs)

    return _make
