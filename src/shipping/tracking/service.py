"""Tracking service: assembles a cargo's tracking view on request.

Each call reads the cargo and its handling history fresh through the read
ports and hands them to the assembler. Nothing is written, cached or retried.
"""

import os
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError

from shipping.ports import get_ports
from shipping.ports.port import CargoPort, HandlingEventPort
from shipping.tracking.assembler import TimestampSource, assemble
from shipping.tracking.view import TrackingView
from shipping.utils.logging import get_logger

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TrackingService:
    """Answers track requests from the two read ports.

    Both ports are required. ``clock`` supplies the assembly time and
    defaults to the current UTC time.
    """

    def __init__(
        self,
        cargos: CargoPort,
        handling_events: HandlingEventPort,
        timestamp_source: TimestampSource | str = TimestampSource.ASSEMBLY,
        clock=None,
    ) -> None:
        if cargos is None:
            raise ValueError("TrackingService requires a cargo port")
        if handling_events is None:
            raise ValueError("TrackingService requires a handling event port")

        self.cargos = cargos
        self.handling_events = handling_events
        self.timestamp_source = TimestampSource(timestamp_source)
        self.clock = clock or _utc_now

    def track(self, tracking_id: str) -> TrackingView:
        """Return the tracking view for a cargo.

        Raises:
            ObjectNotFoundError: if the cargo port does not know ``tracking_id``.
        """
        try:
            cargo = self.cargos.find(tracking_id)
        except ObjectNotFoundError:
            logger.warning("Cargo not found for tracking", tracking_id=tracking_id)
            raise

        history = self.handling_events.query_handling_history(str(cargo.tracking_id))
        view = assemble(
            cargo,
            history,
            timestamp_source=self.timestamp_source,
            now=self.clock(),
        )
        logger.info(
            "Cargo tracked",
            tracking_id=view.tracking_id,
            event_count=len(view.events),
            timestamp_source=self.timestamp_source.value,
        )
        return view


def build_tracking_service(clock=None) -> TrackingService:
    """Wire a TrackingService from configuration.

    Ports come from get_ports() (TRACKING_PORT_ADAPTER); the timestamp source
    comes from TRACKING_EVENT_TIMESTAMP ("assembly" or "completion").
    """
    cargos, handling_events = get_ports()
    timestamp_source = os.environ.get("TRACKING_EVENT_TIMESTAMP", TimestampSource.ASSEMBLY.value)
    return TrackingService(cargos, handling_events, timestamp_source=timestamp_source, clock=clock)
