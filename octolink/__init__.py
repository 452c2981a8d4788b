from octolink.domain import (
    ConnectionResponse,
    ConnectionState,
    FullStateResponse,
    JobResponse,
    VersionResponse,
    classify,
)
from octolink.errors import DecodeError, MalformedPayloadError, MissingKeyError, TypeMismatchError
from octolink.parsing import decode_historic_entry, decode_response, decode_temperature, split_reserved
from octolink.parsing.temperature import HistoricTemperatureEntry, TemperatureReading, TemperatureSnapshot
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ConnectionResponse",
    "ConnectionState",
    "FullStateResponse",
    "JobResponse",
    "VersionResponse",
    "classify",
    "DecodeError",
    "MalformedPayloadError",
    "MissingKeyError",
    "TypeMismatchError",
    "decode_historic_entry",
    "decode_response",
    "decode_temperature",
    "split_reserved",
    "HistoricTemperatureEntry",
    "TemperatureReading",
    "TemperatureSnapshot",
]

try:
    __version__ = version("octolink")
except PackageNotFoundError:
    __version__ = "0.0.0"
