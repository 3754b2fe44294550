"""Repository adapters: read cargo and handling events through Protean repositories.

Must be called inside an active domain context (``current_domain``).
"""

from protean.utils.globals import current_domain

from shipping.cargo.cargo import Cargo
from shipping.cargo.handling import HandlingEvent, HandlingHistory
from shipping.ports.port import CargoPort, HandlingEventPort


class RepositoryCargoPort(CargoPort):
    def find(self, tracking_id: str) -> Cargo:
        # Lets the repository's ObjectNotFoundError through untouched
        return current_domain.repository_for(Cargo).get(tracking_id)


class RepositoryHandlingEventPort(HandlingEventPort):
    def query_handling_history(self, tracking_id: str) -> HandlingHistory:
        repo = current_domain.repository_for(HandlingEvent)
        # QuerySet pages at 100 rows unless the limit is lifted
        events = (
            repo._dao.query.filter(tracking_id=str(tracking_id))
            .order_by("registration_time")
            .limit(None)
            .all()
            .items
        )
        return HandlingHistory(tuple(events))
