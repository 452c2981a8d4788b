"""
Exception hierarchy for payload decoding.

Every decoder in :mod:`octolink.parsing` raises a subclass of
:class:`DecodeError`. The base class derives from ``ValueError`` so callers
that only care about "bad data" can catch that.
"""
from __future__ import annotations

from typing import Any, Optional


class DecodeError(ValueError):
    """
    Raised when a payload cannot be decoded into its typed model.

    Attributes:
        key: Dotted path of the offending value (e.g. ``history[0].time``),
            or ``None`` when the failure concerns the whole payload.
        expected: Short description of the expected shape.
        actual: Name of the type actually found, if any.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.expected = expected
        self.actual = actual

    def details(self) -> dict[str, Any]:
        return {"key": self.key, "expected": self.expected, "actual": self.actual}

    def under(self, prefix: str) -> "DecodeError":
        """Return a copy of this error with ``prefix`` prepended to its key."""
        key = f"{prefix}.{self.key}" if self.key and not self.key.startswith("[") else f"{prefix}{self.key or ''}"
        return type(self)(_relocate(str(self), self.key, key), key=key, expected=self.expected, actual=self.actual)


class MalformedPayloadError(DecodeError):
    """The payload is not valid JSON, or not an object where one is required."""
    pass


class MissingKeyError(DecodeError):
    """A required key is absent from an object."""
    pass


class TypeMismatchError(DecodeError):
    """A value is present but its type does not match the expected shape."""
    pass


def type_name(value: Any) -> str:
    """Return the JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _relocate(message: str, old_key: Optional[str], new_key: str) -> str:
    if old_key and f"'{old_key}'" in message:
        return message.replace(f"'{old_key}'", f"'{new_key}'", 1)
    return f"{message} (at '{new_key}')"
