"""
Connection state labels and their capability predicates.

OctoPrint reports the serial connection state as a free-form label taken
from its communication layer (``"Operational"``, ``"Printing from SD"``,
``"Offline after error"``, ...). The vocabulary is open, so labels are
classified by prefix into families that deliberately overlap: a paused job
is both operational and printing.

The families follow ``MachineCom.getStateString`` in OctoPrint's
``octoprint/util/comm.py``.
"""
from __future__ import annotations

from dataclasses import dataclass

OPERATIONAL = "Operational"

OPERATIONAL_PREFIXES = ("Operational", "Transfering", "Paused")
PRINTING_PREFIXES = ("Printing", "Sending", "Paused")
OFFLINE_PREFIXES = ("Offline", "Closed")
ERROR_PREFIXES = ("Error", "Unknown")
CONNECTING_PREFIXES = ("Opening", "Detecting", "Connecting")


@dataclass(frozen=True)
class ConnectionCapabilities:
    """The five independent predicates derived from one label."""
    operational: bool = False
    printing: bool = False
    offline: bool = False
    error: bool = False
    connecting: bool = False


class ConnectionState(str):
    """
    An opaque connection state label.

    The label is kept exactly as received: matching is case-sensitive and
    nothing is trimmed. A label outside every family is valid and simply
    answers ``False`` to every predicate.
    """

    __slots__ = ()

    @property
    def is_operational(self) -> bool:
        return self.startswith(OPERATIONAL_PREFIXES)

    @property
    def is_printing(self) -> bool:
        return self.startswith(PRINTING_PREFIXES)

    @property
    def is_offline(self) -> bool:
        return self.startswith(OFFLINE_PREFIXES)

    @property
    def is_error(self) -> bool:
        return self.startswith(ERROR_PREFIXES)

    @property
    def is_connecting(self) -> bool:
        return self.startswith(CONNECTING_PREFIXES)

    def capabilities(self) -> ConnectionCapabilities:
        return ConnectionCapabilities(
            operational=self.is_operational,
            printing=self.is_printing,
            offline=self.is_offline,
            error=self.is_error,
            connecting=self.is_connecting,
        )

    def __repr__(self) -> str:
        return f"ConnectionState({str.__repr__(self)})"


def classify(label: str) -> ConnectionCapabilities:
    """Classify a raw label string. Never raises."""
    return ConnectionState(label).capabilities()


__all__ = [
    "OPERATIONAL",
    "OPERATIONAL_PREFIXES",
    "PRINTING_PREFIXES",
    "OFFLINE_PREFIXES",
    "ERROR_PREFIXES",
    "CONNECTING_PREFIXES",
    "ConnectionCapabilities",
    "ConnectionState",
    "classify",
]
