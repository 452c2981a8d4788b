"""
This package defines the domain models for OctoPrint API responses: the
connection state label with its capability predicates, and the response
records built from each endpoint's body.
"""
from octolink.domain.connection import ConnectionCapabilities, ConnectionState, classify
from octolink.domain.records import (
    Axis,
    ConnectionResponse,
    FileInformation,
    FullStateResponse,
    JobInformation,
    JobResponse,
    PrinterState,
    ProgressInformation,
    Profile,
    VersionResponse,
)

__all__ = [
    "Axis",
    "ConnectionCapabilities",
    "ConnectionResponse",
    "ConnectionState",
    "FileInformation",
    "FullStateResponse",
    "JobInformation",
    "JobResponse",
    "PrinterState",
    "ProgressInformation",
    "Profile",
    "VersionResponse",
    "classify",
]
