"""
Decoding of whole API response bodies into response records.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from octolink.errors import DecodeError, MalformedPayloadError, MissingKeyError, TypeMismatchError, type_name
from octolink.logging import get_logger
from octolink.parsing.payload import load_json

ModelT = TypeVar("ModelT", bound=BaseModel)


def _location(loc: tuple) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _from_validation_error(model: Type[BaseModel], exc: ValidationError) -> DecodeError:
    error = exc.errors()[0]
    key = _location(error["loc"]) or None
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, DecodeError):
        return cause.under(key) if key else cause
    if error["type"] == "missing":
        return MissingKeyError(f"Missing required key '{key}' in {model.__name__}", key=key)
    return TypeMismatchError(
        f"Invalid value at '{key}' in {model.__name__}: {error['msg']}",
        key=key,
        expected=error["type"],
        actual=type_name(error.get("input")),
    )


def decode_response(model: Type[ModelT], payload: Any) -> ModelT:
    """
    Decode a response body into a response record.

    Args:
        model: The record class, e.g. ``FullStateResponse``.
        payload: JSON text, bytes, or an already-parsed object.

    Returns:
        An instance of ``model``.

    Raises:
        DecodeError: If the body is not a JSON object or does not fit the
            record. Failures are logged before being raised.
    """
    logger = get_logger()
    try:
        data = load_json(payload)
        if not isinstance(data, Mapping):
            raise MalformedPayloadError(
                f"Expected a JSON object for {model.__name__}, got {type_name(data)}",
                expected="object",
                actual=type_name(data),
            )
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise _from_validation_error(model, exc) from exc
    except DecodeError as exc:
        logger.warning(
            "Failed to decode %s: %s", model.__name__, exc,
            extra={"details": {"model": model.__name__, **exc.details()}},
        )
        raise
