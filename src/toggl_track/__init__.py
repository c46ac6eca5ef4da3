"""Toggl Track Python client SDK.

This module uses lazy exports so lightweight utilities (for example config parsing)
can be imported without immediately importing transport dependencies.
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import TYPE_CHECKING, Any

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiError",
    "AsyncRequestExecutor",
    "AsyncTogglTrack",
    "AuthError",
    "BadConfigError",
    "BadQueryError",
    "CallContext",
    "ClientConfig",
    "ClientNotFoundError",
    "ClientTimeoutError",
    "ConflictError",
    "ContextMissingError",
    "DeadlineExceededError",
    "DecodeError",
    "GoneError",
    "GroupNotFoundError",
    "NotFoundError",
    "ProjectNotFoundError",
    "ProjectUserNotFoundError",
    "RateLimitedError",
    "RequestCancelledError",
    "SentinelError",
    "ServerError",
    "SyncRequestExecutor",
    "TagNotFoundError",
    "TimeEntryNotFoundError",
    "TogglTrack",
    "TogglTrackError",
    "TransportError",
    "UserNotFoundError",
    "ValidationError",
    "WorkspaceNotFoundError",
    "WorkspaceUserNotFoundError",
    "is_temporary",
    "is_timeout",
    "with_api_token",
    "with_credentials",
    "with_http_client",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "AsyncTogglTrack": (".client", "AsyncTogglTrack"),
    "TogglTrack": (".client", "TogglTrack"),
    "ClientConfig": (".config", "ClientConfig"),
    "with_api_token": (".config", "with_api_token"),
    "with_credentials": (".config", "with_credentials"),
    "with_http_client": (".config", "with_http_client"),
    "CallContext": (".context", "CallContext"),
    "ApiError": (".errors", "ApiError"),
    "AuthError": (".errors", "AuthError"),
    "BadConfigError": (".errors", "BadConfigError"),
    "BadQueryError": (".errors", "BadQueryError"),
    "ClientNotFoundError": (".errors", "ClientNotFoundError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "ConflictError": (".errors", "ConflictError"),
    "ContextMissingError": (".errors", "ContextMissingError"),
    "DeadlineExceededError": (".errors", "DeadlineExceededError"),
    "DecodeError": (".errors", "DecodeError"),
    "GoneError": (".errors", "GoneError"),
    "GroupNotFoundError": (".errors", "GroupNotFoundError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "ProjectNotFoundError": (".errors", "ProjectNotFoundError"),
    "ProjectUserNotFoundError": (".errors", "ProjectUserNotFoundError"),
    "RateLimitedError": (".errors", "RateLimitedError"),
    "RequestCancelledError": (".errors", "RequestCancelledError"),
    "SentinelError": (".errors", "SentinelError"),
    "ServerError": (".errors", "ServerError"),
    "TagNotFoundError": (".errors", "TagNotFoundError"),
    "TimeEntryNotFoundError": (".errors", "TimeEntryNotFoundError"),
    "TogglTrackError": (".errors", "TogglTrackError"),
    "TransportError": (".errors", "TransportError"),
    "UserNotFoundError": (".errors", "UserNotFoundError"),
    "ValidationError": (".errors", "ValidationError"),
    "WorkspaceNotFoundError": (".errors", "WorkspaceNotFoundError"),
    "WorkspaceUserNotFoundError": (".errors", "WorkspaceUserNotFoundError"),
    "is_temporary": (".errors", "is_temporary"),
    "is_timeout": (".errors", "is_timeout"),
    "AsyncRequestExecutor": (".protocols", "AsyncRequestExecutor"),
    "SyncRequestExecutor": (".protocols", "SyncRequestExecutor"),
}

if TYPE_CHECKING:
    from .client import AsyncTogglTrack, TogglTrack
    from .config import ClientConfig, with_api_token, with_credentials, with_http_client
    from .context import CallContext
    from .errors import (
        ApiError,
        AuthError,
        BadConfigError,
        BadQueryError,
        ClientNotFoundError,
        ClientTimeoutError,
        ConflictError,
        ContextMissingError,
        DeadlineExceededError,
        DecodeError,
        GoneError,
        GroupNotFoundError,
        NotFoundError,
        ProjectNotFoundError,
        ProjectUserNotFoundError,
        RateLimitedError,
        RequestCancelledError,
        SentinelError,
        ServerError,
        TagNotFoundError,
        TimeEntryNotFoundError,
        TogglTrackError,
        TransportError,
        UserNotFoundError,
        ValidationError,
        WorkspaceNotFoundError,
        WorkspaceUserNotFoundError,
        is_temporary,
        is_timeout,
    )
    from .protocols import AsyncRequestExecutor, SyncRequestExecutor


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
