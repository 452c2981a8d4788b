"""
Response records for the OctoPrint REST API.

These models map 1:1 onto the JSON bodies returned by the ``/api/printer``,
``/api/job``, ``/api/connection`` and ``/api/version`` endpoints. Attribute
names are snake_case; the camelCase wire names are accepted as aliases.
Unknown keys are ignored and every field has a default, since the server
leaves fields out depending on printer state.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_camel

from octolink.domain.connection import ConnectionState
from octolink.parsing.temperature import TemperatureReading, TemperatureSnapshot, temperature_from_object


def _temperature(value: Any) -> TemperatureSnapshot:
    if isinstance(value, TemperatureSnapshot):
        return value
    return temperature_from_object(value)


def _reading(reading: TemperatureReading) -> dict[str, Any]:
    return {"actual": reading.actual, "target": reading.target, "offset": reading.offset}


def _dump_temperature(snapshot: TemperatureSnapshot) -> dict[str, Any]:
    # wire shape: tool keys next to "history", epoch seconds under "time"
    body: dict[str, Any] = {tool: _reading(r) for tool, r in snapshot.current.items()}
    body["history"] = [
        {"time": int(entry.time.timestamp()), **{tool: _reading(r) for tool, r in entry.tools.items()}}
        for entry in snapshot.history
    ]
    return body


Temperature = Annotated[
    TemperatureSnapshot,
    PlainValidator(_temperature),
    PlainSerializer(_dump_temperature, return_type=dict),
]
State = Annotated[str, AfterValidator(ConnectionState)]


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"


class Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SDState(Record):
    ready: bool = False


class PrinterStateFlags(Record):
    operational: bool = False
    paused: bool = False
    printing: bool = False
    sd_ready: bool = False
    error: bool = False
    ready: bool = False
    closed_or_error: bool = False


class PrinterState(Record):
    """The printer's general state: a display text plus flag set."""
    text: str = ""
    flags: PrinterStateFlags = Field(default_factory=PrinterStateFlags)


class FullStateResponse(Record):
    """Response of ``GET /api/printer``."""
    temperature: Temperature = Field(default_factory=TemperatureSnapshot)
    sd: SDState = Field(default_factory=SDState)
    state: PrinterState = Field(default_factory=PrinterState)


class FileInformation(Record):
    """
    A file known to the server.

    Attributes:
        name: File name without path, e.g. ``file.gco``.
        path: Path within its location, e.g. ``folder/subfolder/file.gco``.
        type: ``model``, ``machinecode`` or ``folder``.
        type_path: Path in the extension tree, e.g. ``["machinecode", "gcode"]``.
    """
    name: str = ""
    path: str = ""
    type: str = ""
    type_path: List[str] = Field(default_factory=list)
    origin: Optional[str] = None
    size: Optional[int] = None
    date: Optional[int] = None


class FilamentInformation(Record):
    # length in mm, volume in cm³
    length: Optional[float] = None
    volume: Optional[float] = None


class JobInformation(Record):
    """Target of the current print job. Times are in seconds."""
    file: FileInformation = Field(default_factory=FileInformation)
    estimated_print_time: Optional[float] = None
    last_print_time: Optional[float] = None
    filament: Optional[FilamentInformation] = None
    file_position: Optional[int] = Field(None, alias="filepos")


class ProgressInformation(Record):
    """Progress of the current print job. Times are in seconds."""
    completion: Optional[float] = None
    file_position: Optional[int] = Field(None, alias="filepos")
    print_time: Optional[int] = None
    print_time_left: Optional[int] = None


class JobResponse(Record):
    """Response of ``GET /api/job``."""
    job: JobInformation = Field(default_factory=JobInformation)
    progress: ProgressInformation = Field(default_factory=ProgressInformation)
    state: Optional[State] = None


class VersionResponse(Record):
    api: str = ""
    server: str = ""


class Profile(Record):
    id: str = ""
    name: str = ""


class ConnectionCurrent(Record):
    state: State = ConnectionState("")
    port: Optional[str] = None
    baudrate: Optional[int] = None
    printer_profile: Optional[str] = None


class ConnectionOptions(Record):
    ports: List[str] = Field(default_factory=list)
    baudrates: List[int] = Field(default_factory=list)
    printer_profiles: List[Profile] = Field(default_factory=list)
    port_preference: Optional[str] = None
    baudrate_preference: Optional[int] = None
    printer_profile_preference: Optional[str] = None
    autoconnect: bool = False


class ConnectionResponse(Record):
    """Response of ``GET /api/connection``."""
    current: ConnectionCurrent = Field(default_factory=ConnectionCurrent)
    options: ConnectionOptions = Field(default_factory=ConnectionOptions)

    @property
    def state(self) -> ConnectionState:
        return ConnectionState(self.current.state)


__all__ = [
    "Axis",
    "ConnectionCurrent",
    "ConnectionOptions",
    "ConnectionResponse",
    "FileInformation",
    "FilamentInformation",
    "FullStateResponse",
    "JobInformation",
    "JobResponse",
    "PrinterState",
    "PrinterStateFlags",
    "ProgressInformation",
    "Profile",
    "Record",
    "SDState",
    "VersionResponse",
]
