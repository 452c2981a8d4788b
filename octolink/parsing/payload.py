from __future__ import annotations

import json
from typing import Any, Union

from octolink.errors import MalformedPayloadError

RawPayload = Union[bytes, bytearray, str]


def load_json(payload: Any) -> Any:
    """
    Parse a raw response body into a JSON value.

    Values that are already decoded (dicts, lists, numbers) are returned as
    they are, so decoders accept both what a transport hands over and what
    an outer decoder has already parsed.
    """
    if not isinstance(payload, (bytes, bytearray, str)):
        return payload
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError(f"Failed to parse JSON payload: {exc}", expected="JSON text") from exc
