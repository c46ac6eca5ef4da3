"""HTTP transport for the Toggl Track client."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from .codec import decode_body, encode_body
from .config import ClientConfig
from .context import CallContext
from .errors import (
    SUCCESS_STATUSES,
    ClientTimeoutError,
    DeadlineExceededError,
    RequestCancelledError,
    TogglTrackError,
    TransportError,
    classify_response,
)
from .urls import compose_url

logger = logging.getLogger(__name__)

METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
_BODY_METHODS = frozenset({"POST", "PUT"})


@dataclass(slots=True)
class RequestOptions:
    method: str
    path: str
    ctx: CallContext | None = None
    query: Any | None = None
    body: Any | None = None
    response_type: Any | None = None
    envelope: str | None = None
    success_statuses: tuple[int, ...] | None = None


def _coerce_options(
    options: RequestOptions | None = None,
    *,
    method: str | None = None,
    path: str | None = None,
    ctx: CallContext | None = None,
    query: Any | None = None,
    body: Any | None = None,
    response_type: Any | None = None,
    envelope: str | None = None,
    success_statuses: tuple[int, ...] | None = None,
) -> RequestOptions:
    if options is not None:
        return options

    if method is None or path is None:
        raise TypeError("method and path are required when options are not provided")

    return RequestOptions(
        method=method,
        path=path,
        ctx=ctx,
        query=query,
        body=body,
        response_type=response_type,
        envelope=envelope,
        success_statuses=success_statuses,
    )


def build_request(
    client: httpx.Client | httpx.AsyncClient,
    config: ClientConfig,
    options: RequestOptions,
    ctx: CallContext,
) -> httpx.Request:
    """Assemble the outgoing request for ``options``.

    Fails before any I/O when ``ctx`` is already done, the method is not
    supported, or the config cannot produce a URL or credentials.
    """
    ctx.raise_if_done()

    method = options.method.upper()
    if method not in METHODS:
        raise ValueError(f"unsupported HTTP method {options.method!r}")

    url = compose_url(config.base_url, options.path, options.query)
    headers = {
        "Accept": "application/json",
        "Authorization": config.authorization_header(),
    }

    content: bytes | None = None
    if method in _BODY_METHODS and options.body is not None:
        content = encode_body(options.body)
        headers["Content-Type"] = "application/json"

    remaining = ctx.remaining()
    timeout: Any = httpx.USE_CLIENT_DEFAULT if remaining is None else httpx.Timeout(remaining)

    return client.build_request(method, url, content=content, headers=headers, timeout=timeout)


def _transport_failure(ctx: CallContext, error: httpx.HTTPError) -> TogglTrackError:
    if isinstance(error, httpx.TimeoutException):
        # A ctx deadline caps every httpx timeout in build_request.
        if ctx.deadline is not None:
            return DeadlineExceededError(f"context deadline exceeded: {error}")
        return ClientTimeoutError(str(error))
    return TransportError(str(error))


def _finish(
    request: httpx.Request,
    status_code: int,
    headers: httpx.Headers,
    body: bytes,
    options: RequestOptions,
) -> Any:
    logger.debug("%s %s -> %d", request.method, request.url.path, status_code)

    error = classify_response(
        status_code,
        headers,
        body,
        success_statuses=options.success_statuses or SUCCESS_STATUSES,
    )
    if error is not None:
        raise error

    if status_code == 204 or options.response_type is None:
        return None
    return decode_body(body, options.response_type, envelope=options.envelope)


class SyncTransport:
    def __init__(self, config: ClientConfig, client: httpx.Client) -> None:
        self._config = config
        self._client = client

    def request(
        self,
        options: RequestOptions | None = None,
        *,
        method: str | None = None,
        path: str | None = None,
        ctx: CallContext | None = None,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = None,
        success_statuses: tuple[int, ...] | None = None,
    ) -> Any:
        options = _coerce_options(
            options,
            method=method,
            path=path,
            ctx=ctx,
            query=query,
            body=body,
            response_type=response_type,
            envelope=envelope,
            success_statuses=success_statuses,
        )
        ctx = options.ctx or CallContext.background()
        request = build_request(self._client, self._config, options, ctx)

        try:
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as error:
            raise _transport_failure(ctx, error) from error

        try:
            ctx.raise_if_done()
            raw = self._read(response, ctx)
        finally:
            response.close()

        return _finish(request, response.status_code, response.headers, raw, options)

    @staticmethod
    def _read(response: httpx.Response, ctx: CallContext) -> bytes:
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                ctx.raise_if_done()
        except httpx.HTTPError as error:
            raise _transport_failure(ctx, error) from error
        return b"".join(chunks)


class AsyncTransport:
    def __init__(self, config: ClientConfig, client: httpx.AsyncClient) -> None:
        self._config = config
        self._client = client

    async def request(
        self,
        options: RequestOptions | None = None,
        *,
        method: str | None = None,
        path: str | None = None,
        ctx: CallContext | None = None,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = None,
        success_statuses: tuple[int, ...] | None = None,
    ) -> Any:
        options = _coerce_options(
            options,
            method=method,
            path=path,
            ctx=ctx,
            query=query,
            body=body,
            response_type=response_type,
            envelope=envelope,
            success_statuses=success_statuses,
        )
        ctx = options.ctx or CallContext.background()
        request = build_request(self._client, self._config, options, ctx)

        loop = asyncio.get_running_loop()
        exchange = asyncio.ensure_future(self._exchange(request, ctx))

        def on_cancel() -> None:
            loop.call_soon_threadsafe(exchange.cancel)

        ctx.add_cancel_callback(on_cancel)
        try:
            response, raw = await asyncio.wait_for(exchange, timeout=ctx.remaining())
        except asyncio.TimeoutError as error:
            raise DeadlineExceededError("context deadline exceeded") from error
        except asyncio.CancelledError:
            if ctx.cancelled:
                raise RequestCancelledError("context cancelled") from None
            raise
        finally:
            ctx.remove_cancel_callback(on_cancel)

        return _finish(request, response.status_code, response.headers, raw, options)

    async def _exchange(self, request: httpx.Request, ctx: CallContext) -> tuple[httpx.Response, bytes]:
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as error:
            raise _transport_failure(ctx, error) from error

        try:
            raw = await response.aread()
        except httpx.HTTPError as error:
            raise _transport_failure(ctx, error) from error
        finally:
            await response.aclose()
        return response, raw
