"""Read port factory: pluggable access to cargo and handling data.

Provides get_ports() / set_ports() / reset_ports() to swap implementations:
- Repository adapters (default) read through the Protean domain
- Fake adapters hold data in memory for development and testing
"""

import os

from shipping.ports.port import CargoPort, HandlingEventPort

_current_ports: tuple[CargoPort, HandlingEventPort] | None = None


def get_ports() -> tuple[CargoPort, HandlingEventPort]:
    """Return the configured (cargo, handling event) ports (singleton).

    Uses the repository adapters by default. Configure via the
    TRACKING_PORT_ADAPTER environment variable ("repository" or "fake").
    """
    global _current_ports
    if _current_ports is None:
        adapter = os.environ.get("TRACKING_PORT_ADAPTER", "repository")
        if adapter == "repository":
            from shipping.ports.repository_adapter import RepositoryCargoPort, RepositoryHandlingEventPort

            _current_ports = (RepositoryCargoPort(), RepositoryHandlingEventPort())
        elif adapter == "fake":
            from shipping.ports.fake_adapter import FakeCargoPort, FakeHandlingEventPort

            _current_ports = (FakeCargoPort(), FakeHandlingEventPort())
        else:
            raise ValueError(f"Unknown tracking port adapter: {adapter}")
    return _current_ports


def set_ports(cargos: CargoPort, handling_events: HandlingEventPort) -> None:
    """Override the active ports (useful for tests)."""
    global _current_ports
    _current_ports = (cargos, handling_events)


def reset_ports() -> None:
    """Reset the ports singleton so the next get_ports() re-reads configuration."""
    global _current_ports
    _current_ports = None
