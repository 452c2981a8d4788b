"""
Temperature payload decoding.

OctoPrint reports temperatures as flat objects keyed by an open set of tool
identifiers, with a reserved ``history`` (or ``time``) key mixed in. This
sub-package splits those objects and decodes them into frozen models.
"""
from octolink.parsing.temperature.decode import (
    decode_historic_entry,
    decode_reading,
    decode_temperature,
    epoch_to_datetime,
    temperature_from_object,
)
from octolink.parsing.temperature.model import (
    HistoricTemperatureEntry,
    TemperatureReading,
    TemperatureSnapshot,
)

__all__ = [
    "decode_historic_entry",
    "decode_reading",
    "decode_temperature",
    "epoch_to_datetime",
    "temperature_from_object",
    "HistoricTemperatureEntry",
    "TemperatureReading",
    "TemperatureSnapshot",
]
