"""In-memory read ports for testing and development.

Hold cargo and handling events in plain dictionaries so the tracking service
can be exercised without a repository. Every lookup is appended to ``calls``
so tests can assert exactly which queries a track performed.
"""

from protean.exceptions import ObjectNotFoundError

from shipping.cargo.cargo import Cargo
from shipping.cargo.handling import HandlingEvent, HandlingHistory
from shipping.ports.port import CargoPort, HandlingEventPort


class FakeCargoPort(CargoPort):
    """Cargo lookup backed by a dict keyed on tracking id."""

    def __init__(self) -> None:
        self.cargos: dict[str, Cargo] = {}
        self.calls: list[dict] = []

    def store(self, cargo: Cargo) -> None:
        self.cargos[str(cargo.tracking_id)] = cargo

    def find(self, tracking_id: str) -> Cargo:
        self.calls.append({"method": "find", "tracking_id": tracking_id})
        try:
            return self.cargos[str(tracking_id)]
        except KeyError:
            raise ObjectNotFoundError({"_entity": [f"Cargo with tracking id `{tracking_id}` does not exist"]})


class FakeHandlingEventPort(HandlingEventPort):
    """Handling history backed by per-cargo lists, kept in recording order."""

    def __init__(self) -> None:
        self.events: dict[str, list[HandlingEvent]] = {}
        self.calls: list[dict] = []

    def record(self, event: HandlingEvent) -> None:
        self.events.setdefault(str(event.tracking_id), []).append(event)

    def query_handling_history(self, tracking_id: str) -> HandlingHistory:
        self.calls.append({"method": "query_handling_history", "tracking_id": tracking_id})
        return HandlingHistory(tuple(self.events.get(str(tracking_id), [])))
