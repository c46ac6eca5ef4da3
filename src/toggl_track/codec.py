"""JSON body encoding and typed response decoding."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import DecodeError

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", repr(response_type))


def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(response_type)
    except TypeError:
        return TypeAdapter(response_type)

    if adapter is None:
        adapter = TypeAdapter(response_type)
        _adapter_cache[response_type] = adapter
    return adapter


def to_jsonable(value: Any) -> Any:
    """Convert a typed body into plain JSON values, dropping unset fields."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(nested) for key, nested in value.items() if nested is not None}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def encode_body(body: Any) -> bytes:
    payload = to_jsonable(body)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_body(raw: bytes, response_type: Any, *, envelope: str | None = None) -> Any:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise DecodeError(f"response body is not valid JSON: {error}", raw=raw) from error

    if envelope is not None and payload is not None:
        if not isinstance(payload, dict):
            raise DecodeError(f"expected an object wrapping {envelope!r}", raw=raw)
        payload = payload.get(envelope)

    if payload is None:
        return None

    try:
        return _adapter_for(response_type).validate_python(payload)
    except ValidationError as error:
        raise DecodeError(
            f"response body does not match {_type_name(response_type)}",
            raw=raw,
            errors=error.errors(),
        ) from error
