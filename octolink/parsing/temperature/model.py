from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional


def _frozen_mapping(mapping: Mapping[str, "TemperatureReading"]) -> Mapping[str, "TemperatureReading"]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class TemperatureReading:
    """
    Temperature stats for a single tool.

    Attributes:
        actual: Current temperature.
        target: Target temperature, ``None`` if no target is set.
        offset: Configured temperature offset. Left out by the server for
            historic readings, in which case it is ``0.0``.
    """
    actual: float
    target: Optional[float] = None
    offset: float = 0.0


@dataclass(frozen=True)
class HistoricTemperatureEntry:
    """
    One historic temperature sample.

    Attributes:
        time: UTC timestamp of the sample, whole seconds.
        tools: Tool identifier -> reading. The identifier set is open.
    """
    time: datetime
    tools: Mapping[str, TemperatureReading] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tools", _frozen_mapping(self.tools))


@dataclass(frozen=True)
class TemperatureSnapshot:
    """
    The printer's temperature state.

    Attributes:
        current: Tool identifier (``tool0``, ``bed``, ...) -> current reading.
        history: Historic samples, oldest first, as received. Empty when the
            server sent no history.
    """
    current: Mapping[str, TemperatureReading] = field(default_factory=dict)
    history: tuple[HistoricTemperatureEntry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "current", _frozen_mapping(self.current))
        object.__setattr__(self, "history", tuple(self.history))
