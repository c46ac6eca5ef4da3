"""URL composition and typed query encoding."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from .errors import BadConfigError, BadQueryError


def parse_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as error:
        raise BadConfigError(f"invalid base URL {base_url!r}: {error}") from error

    if url.scheme not in ("http", "https") or not url.host:
        raise BadConfigError(f"base URL must be an absolute http(s) URL, got {base_url!r}")
    return url


def join_path(base_path: str, fragment: str) -> str:
    """Join two path pieces with exactly one slash between them."""
    head = base_path.rstrip("/")
    tail = fragment.lstrip("/")
    if not tail:
        return head or "/"
    return f"{head}/{tail}"


def api_path(prefix: str, *segments: Any) -> str:
    path = prefix
    for segment in segments:
        path = join_path(path, str(segment))
    return path


def join_ids(ids: Iterable[int]) -> str:
    return ",".join(str(value) for value in ids)


def _render_query_value(key: str, value: Any) -> str:
    # bool first: bool is a subclass of int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return value
    raise BadQueryError(f"query field {key!r} has unsupported value type {type(value).__name__}")


def _query_items(query: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(query, BaseModel):
        return query.model_dump(by_alias=True, exclude_none=True)
    if isinstance(query, Mapping):
        return {str(key): value for key, value in query.items() if value is not None}
    raise BadQueryError(f"query must be a pydantic model or mapping, got {type(query).__name__}")


def encode_query(query: BaseModel | Mapping[str, Any] | None) -> str:
    if query is None:
        return ""

    items = _query_items(query)
    if not items:
        return ""

    pairs = [(key, _render_query_value(key, items[key])) for key in sorted(items)]
    return urlencode(pairs)


def compose_url(base_url: str, path: str, query: BaseModel | Mapping[str, Any] | None = None) -> httpx.URL:
    base = parse_base_url(base_url)
    encoded = encode_query(query)
    return base.copy_with(
        path=join_path(base.path, path),
        query=encoded.encode("ascii") if encoded else None,
    )
