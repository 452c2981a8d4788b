"""
Decoders for OctoPrint temperature payloads.

The server reports temperatures as a flat object keyed by tool identifier,
with the reserved ``history`` key as a sibling of the tool keys::

    {"tool0": {"actual": 200.1, "target": 200.0, "offset": 0},
     "bed": {"actual": 60.2, "target": 60.0, "offset": 0},
     "history": [{"time": 1610000000, "tool0": {"actual": 199.0, "target": 200.0}}]}

Each history entry repeats the pattern with the reserved ``time`` key.
"""
from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any, Optional

from octolink.errors import DecodeError, MalformedPayloadError, MissingKeyError, TypeMismatchError, type_name
from octolink.parsing.payload import load_json
from octolink.parsing.split import split_reserved
from octolink.parsing.temperature.model import HistoricTemperatureEntry, TemperatureReading, TemperatureSnapshot

HISTORY_KEY = "history"
TIME_KEY = "time"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(obj: Mapping[str, Any], name: str, path: str, required: bool = False) -> Optional[float]:
    key = f"{path}.{name}"
    if name not in obj:
        if required:
            raise MissingKeyError(f"Missing required key '{key}'", key=key, expected="number")
        return None
    value = obj[name]
    if value is None and not required:
        return None
    if not _is_number(value):
        raise TypeMismatchError(
            f"Expected a number at '{key}', got {type_name(value)}",
            key=key,
            expected="number",
            actual=type_name(value),
        )
    try:
        return float(value)
    except OverflowError as exc:
        raise TypeMismatchError(
            f"Number at '{key}' out of range",
            key=key,
            expected="number",
            actual=type_name(value),
        ) from exc


def decode_reading(value: Any, path: str) -> TemperatureReading:
    """Decode one ``{"actual", "target", "offset"}`` object found at ``path``."""
    if not isinstance(value, Mapping):
        raise TypeMismatchError(
            f"Expected a temperature reading object at '{path}', got {type_name(value)}",
            key=path,
            expected="object",
            actual=type_name(value),
        )
    offset = _number(value, "offset", path)
    return TemperatureReading(
        actual=_number(value, "actual", path, required=True),
        target=_number(value, "target", path),
        offset=offset if offset is not None else 0.0,
    )


def decode_tools(bag: Mapping[str, Any], prefix: str = "") -> dict[str, TemperatureReading]:
    """Decode a tool identifier -> reading object, keeping the server's key order."""
    return {tool: decode_reading(value, f"{prefix}{tool}") for tool, value in bag.items()}


def epoch_to_datetime(value: Any, key: str = TIME_KEY) -> dt.datetime:
    """
    Convert Unix epoch seconds to a UTC datetime at second resolution.

    Fractional seconds are truncated.
    """
    if not _is_number(value):
        raise TypeMismatchError(
            f"Expected epoch seconds at '{key}', got {type_name(value)}",
            key=key,
            expected="number",
            actual=type_name(value),
        )
    try:
        seconds = int(value)
        return dt.datetime.fromtimestamp(seconds, tz=dt.timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise TypeMismatchError(
            f"Epoch seconds at '{key}' out of range: {value!r}",
            key=key,
            expected="epoch seconds",
            actual=type_name(value),
        ) from exc


def _require_object(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError(
            f"Expected a {what} object, got {type_name(value)}",
            expected="object",
            actual=type_name(value),
        )
    return value


def historic_entry_from_object(obj: Any) -> HistoricTemperatureEntry:
    """Decode an already-parsed history sample. Strings are not parsed."""
    data = _require_object(obj, "history entry")
    parts = split_reserved(data, TIME_KEY, rest_key="tools", reserved_key=TIME_KEY)
    if TIME_KEY not in data:
        raise MissingKeyError(f"Missing required key '{TIME_KEY}'", key=TIME_KEY, expected="number")
    return HistoricTemperatureEntry(
        time=epoch_to_datetime(parts[TIME_KEY]),
        tools=decode_tools(parts["tools"]),
    )


def decode_historic_entry(payload: Any) -> HistoricTemperatureEntry:
    """
    Decode one historic temperature sample.

    Args:
        payload: JSON text, bytes, or an already-parsed object.

    Raises:
        MalformedPayloadError: If the payload is not a JSON object.
        MissingKeyError: If ``time`` is absent.
        TypeMismatchError: If ``time`` is not numeric or a tool entry is
            not a reading object.
    """
    data = load_json(payload)
    if not isinstance(data, Mapping):
        raise MalformedPayloadError(
            f"Expected a history entry object, got {type_name(data)}",
            expected="object",
            actual=type_name(data),
        )
    return historic_entry_from_object(data)


def decode_history(value: Any) -> tuple[HistoricTemperatureEntry, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TypeMismatchError(
            f"Expected an array at '{HISTORY_KEY}', got {type_name(value)}",
            key=HISTORY_KEY,
            expected="array",
            actual=type_name(value),
        )
    entries = []
    for index, item in enumerate(value):
        try:
            entries.append(historic_entry_from_object(item))
        except DecodeError as exc:
            raise exc.under(f"{HISTORY_KEY}[{index}]") from exc
    return tuple(entries)


def temperature_from_object(obj: Any) -> TemperatureSnapshot:
    """Decode an already-parsed temperature object. Strings are not parsed."""
    data = _require_object(obj, "temperature")
    parts = split_reserved(data, HISTORY_KEY, rest_key="current", reserved_key=HISTORY_KEY)
    return TemperatureSnapshot(
        current=decode_tools(parts["current"]),
        history=decode_history(parts[HISTORY_KEY]),
    )


def decode_temperature(payload: Any) -> TemperatureSnapshot:
    """
    Decode a temperature state object into a :class:`TemperatureSnapshot`.

    Every key other than ``history`` is treated as a tool identifier. A
    missing (or ``null``) ``history`` yields an empty history.

    Args:
        payload: JSON text, bytes, or an already-parsed object.

    Raises:
        MalformedPayloadError: If the payload is not valid JSON or not an object.
        DecodeError: If any tool reading or history entry is malformed. The
            error's ``key`` names the offending location.
    """
    data = load_json(payload)
    if not isinstance(data, Mapping):
        raise MalformedPayloadError(
            f"Expected a temperature object, got {type_name(data)}",
            expected="object",
            actual=type_name(data),
        )
    return temperature_from_object(data)
