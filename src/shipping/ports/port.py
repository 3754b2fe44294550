"""Domain read ports: abstract query interfaces onto cargo and handling data.

The tracking service programs against these ports; adapters are swapped via
configuration. Both ports are read-only: nothing in this context writes
cargo or handling records.
"""

from abc import ABC, abstractmethod

from shipping.cargo.cargo import Cargo
from shipping.cargo.handling import HandlingHistory


class CargoPort(ABC):
    """Looks up cargo by tracking id."""

    @abstractmethod
    def find(self, tracking_id: str) -> Cargo:
        """Return the cargo with this tracking id.

        Raises:
            ObjectNotFoundError: if no cargo is known by that id.
        """
        ...


class HandlingEventPort(ABC):
    """Queries the handling history of a cargo."""

    @abstractmethod
    def query_handling_history(self, tracking_id: str) -> HandlingHistory:
        """Return the cargo's handling events in registration order.

        Returns an empty history, never an error, when nothing was recorded.
        """
        ...
