"""Tests for response records and whole-body decoding."""
import json

import pytest
from pydantic import ValidationError

from octolink.domain.connection import ConnectionCapabilities, ConnectionState
from octolink.domain.records import (
    Axis,
    ConnectionResponse,
    FullStateResponse,
    JobResponse,
    VersionResponse,
)
from octolink.errors import DecodeError, MalformedPayloadError, MissingKeyError, TypeMismatchError
from octolink.parsing.responses import decode_response

PRINTER_BODY = {
    "temperature": {
        "tool0": {"actual": 214.8821, "target": 220.0, "offset": 0},
        "bed": {"actual": 59.9, "target": 60.0, "offset": 5},
        "history": [
            {"time": 1395651928, "tool0": {"actual": 214.8821, "target": 220.0}, "bed": {"actual": 59.9, "target": 60.0}},
            {"time": 1395651926, "tool0": {"actual": 212.32, "target": 220.0}, "bed": {"actual": 59.7, "target": 60.0}},
        ],
    },
    "sd": {"ready": True},
    "state": {
        "text": "Operational",
        "flags": {
            "operational": True,
            "paused": False,
            "printing": False,
            "cancelling": False,
            "pausing": False,
            "sdReady": True,
            "error": False,
            "ready": True,
            "closedOrError": False,
        },
    },
}

JOB_BODY = {
    "job": {
        "file": {"name": "whistle_v2.gcode", "origin": "local", "size": 1468987, "date": 1378847754},
        "estimatedPrintTime": 8811,
        "filament": {"length": 810, "volume": 5.36},
    },
    "progress": {"completion": 0.2298468264184775, "filepos": 337942, "printTime": 276, "printTimeLeft": 912},
    "state": "Printing",
}

CONNECTION_BODY = {
    "current": {"state": "Paused", "port": "/dev/ttyACM0", "baudrate": 250000, "printerProfile": "_default"},
    "options": {
        "ports": ["/dev/ttyACM0", "VIRTUAL"],
        "baudrates": [250000, 230400, 115200],
        "printerProfiles": [{"name": "Default", "id": "_default"}],
        "portPreference": "/dev/ttyACM0",
        "baudratePreference": 250000,
        "printerProfilePreference": "_default",
        "autoconnect": True,
    },
}


def test_full_state_response():
    response = decode_response(FullStateResponse, json.dumps(PRINTER_BODY))
    assert set(response.temperature.current) == {"tool0", "bed"}
    assert response.temperature.current["bed"].offset == 5.0
    assert [e.time.timestamp() for e in response.temperature.history] == [1395651928, 1395651926]
    assert response.sd.ready is True
    assert response.state.text == "Operational"
    assert response.state.flags.sd_ready is True
    assert response.state.flags.closed_or_error is False


def test_full_state_nested_temperature_error_has_path():
    body = {"temperature": {"tool0": {"actual": 1.0}, "history": [{"tool0": {"actual": 1.0}}]}}
    with pytest.raises(MissingKeyError) as info:
        decode_response(FullStateResponse, body)
    assert info.value.key == "temperature.history[0].time"


def test_full_state_without_temperature():
    response = decode_response(FullStateResponse, {"state": {"text": "Closed"}})
    assert response.temperature.current == {}
    assert response.temperature.history == ()


def test_job_response():
    response = decode_response(JobResponse, JOB_BODY)
    assert response.job.file.name == "whistle_v2.gcode"
    assert response.job.file.size == 1468987
    assert response.job.estimated_print_time == 8811
    assert response.job.filament.volume == pytest.approx(5.36)
    assert response.progress.file_position == 337942
    assert response.progress.print_time_left == 912
    assert isinstance(response.state, ConnectionState)
    assert response.state.is_printing


def test_job_response_null_file_name():
    body = {"job": {"file": {"name": None}}, "progress": {"completion": None, "printTimeLeft": None}}
    with pytest.raises(TypeMismatchError) as info:
        decode_response(JobResponse, body)
    assert info.value.key == "job.file.name"


def test_connection_response():
    response = decode_response(ConnectionResponse, CONNECTION_BODY)
    assert isinstance(response.current.state, ConnectionState)
    assert response.state.is_operational and response.state.is_printing
    assert response.current.printer_profile == "_default"
    assert response.options.printer_profiles[0].id == "_default"
    assert response.options.baudrate_preference == 250000
    assert response.options.autoconnect is True


def test_connection_response_defaults():
    response = decode_response(ConnectionResponse, b"{}")
    assert response.state == ""
    assert response.state.capabilities() == ConnectionCapabilities()
    assert response.options.ports == []


def test_version_response():
    response = decode_response(VersionResponse, '{"api": "0.1", "server": "1.9.3", "text": "OctoPrint 1.9.3"}')
    assert response.api == "0.1"
    assert response.server == "1.9.3"


def test_records_are_frozen():
    response = decode_response(VersionResponse, {"api": "0.1"})
    with pytest.raises(ValidationError):
        response.api = "0.2"


def test_wrong_field_type():
    with pytest.raises(TypeMismatchError) as info:
        decode_response(ConnectionResponse, {"options": {"baudrates": ["fast"]}})
    assert info.value.key == "options.baudrates[0]"


@pytest.mark.parametrize("body", ["[]", "not json", b"\xff\xfe"])
def test_malformed_body(body):
    with pytest.raises(MalformedPayloadError):
        decode_response(VersionResponse, body)


def test_decode_errors_are_value_errors():
    with pytest.raises(DecodeError):
        decode_response(FullStateResponse, {"temperature": []})


def test_axis_values():
    assert [axis.value for axis in Axis] == ["x", "y", "z"]
    assert Axis("z") is Axis.Z


def test_temperature_json_string_is_rejected():
    body = {"temperature": json.dumps(PRINTER_BODY["temperature"])}
    with pytest.raises(TypeMismatchError) as info:
        decode_response(FullStateResponse, body)
    assert info.value.key == "temperature"


def test_full_state_dump_uses_wire_shape():
    response = decode_response(FullStateResponse, PRINTER_BODY)
    dumped = response.model_dump(by_alias=True)
    temperature = dumped["temperature"]
    assert temperature["bed"] == {"actual": 59.9, "target": 60.0, "offset": 5.0}
    assert [entry["time"] for entry in temperature["history"]] == [1395651928, 1395651926]
    assert temperature["history"][0]["tool0"]["actual"] == 214.8821
    assert dumped["state"]["flags"]["sdReady"] is True
    assert decode_response(FullStateResponse, dumped) == response
