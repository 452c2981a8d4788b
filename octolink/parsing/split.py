"""
Reserved-key splitting for flat JSON objects.

Several OctoPrint payloads keep a bag of dynamically-named keys (one per
tool) next to a single well-known key at the same nesting level. Splitting
the well-known key out first lets the remaining bag be decoded as a plain
mapping.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from octolink.errors import MalformedPayloadError, type_name

REST_KEY = "rest"
RESERVED_KEY = "reserved"


def split_reserved(
    obj: Mapping[str, Any],
    reserved: str,
    *,
    rest_key: str = REST_KEY,
    reserved_key: str = RESERVED_KEY,
) -> dict[str, Any]:
    """
    Separate one reserved key from the rest of a JSON object.

    Args:
        obj: The decoded JSON object. It is not modified.
        reserved: Name of the key to pull out.
        rest_key: Key under which the remaining pairs are returned.
        reserved_key: Key under which the reserved value is returned.

    Returns:
        A new dict with exactly two keys: ``reserved_key`` holding the value
        stored under ``reserved`` (``None`` if absent) and ``rest_key``
        holding a new dict of every other pair, values untouched.

    Raises:
        MalformedPayloadError: If ``obj`` is not a JSON object.
    """
    if not isinstance(obj, Mapping):
        raise MalformedPayloadError(
            f"Expected a JSON object to split on '{reserved}', got {type_name(obj)}",
            expected="object",
            actual=type_name(obj),
        )
    rest = {key: value for key, value in obj.items() if key != reserved}
    return {rest_key: rest, reserved_key: obj.get(reserved)}
