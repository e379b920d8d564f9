"""Envelope codec — bytes to :class:`RequestEnvelope` and back."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from mcpsample.protocol.errors import MalformedEnvelopeError
from mcpsample.protocol.models import ErrorObject, Method, RequestEnvelope, ResponseEnvelope


def decode(data: bytes | str, *, method: Method | None = None) -> RequestEnvelope:
    """Parse a request body into a :class:`RequestEnvelope`.

    When *method* is given the body is bound to that method: a body without
    ``method`` takes it, a body naming a different method is rejected.

    Raises:
        MalformedEnvelopeError: On invalid JSON or an invalid envelope.
    """
    raw: Any = {}
    if data.strip():
        try:
            raw = json.loads(data, parse_constant=_reject_constant)
        except ValueError as exc:
            raise MalformedEnvelopeError(f"Invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise MalformedEnvelopeError("Request envelope must be a JSON object")

    if method is not None:
        declared = raw.get("method")
        if declared is None:
            raw = {**raw, "method": method.value}
        elif declared != method.value:
            msg = f"Method mismatch: expected {method.value}, got {declared}"
            raise MalformedEnvelopeError(msg)

    try:
        return RequestEnvelope.model_validate(raw)
    except ValidationError as exc:
        raise MalformedEnvelopeError(_describe(exc)) from exc


def encode(response: ResponseEnvelope) -> bytes:
    """Serialize a response envelope, dropping the unset member."""
    return response.model_dump_json(by_alias=True, exclude_none=True).encode()


def success(result: dict[str, Any]) -> ResponseEnvelope:
    return ResponseEnvelope(result=result)


def failure(error: ErrorObject) -> ResponseEnvelope:
    return ResponseEnvelope(error=error)


def _reject_constant(name: str) -> Any:
    raise MalformedEnvelopeError(f"Invalid JSON: {name} is not a valid number")


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "Malformed envelope: " + "; ".join(parts)
