"""Error hierarchy and response classification for the Toggl Track client."""

from __future__ import annotations

from typing import Any

import httpx

from .protocols import TemporaryError, TimeoutCapable

SUCCESS_STATUSES: tuple[int, ...] = (200, 201, 204)
TEMPORARY_STATUSES = frozenset({429, 503})
TIMEOUT_STATUSES = frozenset({408, 504})


class TogglTrackError(Exception):
    """Base class for all client errors."""


class RequestCancelledError(TogglTrackError):
    """Raised when the caller's context is cancelled before or during I/O."""


class DeadlineExceededError(RequestCancelledError):
    """Raised when the caller's context deadline passes."""


class BadConfigError(TogglTrackError):
    """Raised when the base URL or credentials cannot be used."""


class BadQueryError(TogglTrackError):
    """Raised when a query value cannot be rendered into a query string."""


class TransportError(TogglTrackError):
    """Raised on network/transport failures."""


class ClientTimeoutError(TransportError):
    """Raised when the HTTP transport times out on its own."""


class DecodeError(TogglTrackError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, message: str, *, raw: bytes, errors: Any | None = None) -> None:
        super().__init__(message)
        self.raw = raw
        self.errors = errors


class ApiError(TogglTrackError):
    """Raised when the API answers with a status outside the success set."""

    def __init__(self, status_code: int, message: str, headers: httpx.Headers) -> None:
        super().__init__(f"{status_code} {message}")
        self.status_code = status_code
        self.message = message
        self.headers = headers

    def is_temporary(self) -> tuple[bool, str]:
        retry_after = self.headers.get("Retry-After", "")
        return self.status_code in TEMPORARY_STATUSES, retry_after

    def is_timeout(self) -> bool:
        return self.status_code in TIMEOUT_STATUSES


class ValidationError(ApiError):
    """Raised for invalid request payloads."""


class AuthError(ApiError):
    """Raised for authentication/authorization failures."""


class NotFoundError(ApiError):
    """Raised when requested resource does not exist."""


class ConflictError(ApiError):
    """Raised when request conflicts with current state."""


class GoneError(ApiError):
    """Raised when resource is gone."""


class RateLimitedError(ApiError):
    """Raised when the API throttles the caller."""


class ServerError(ApiError):
    """Raised for server-side failures."""


class SentinelError(TogglTrackError):
    """Base class for legacy adapter pre-checks raised before any I/O."""


class ContextMissingError(SentinelError):
    """Raised when a legacy operation receives no context."""


class TimeEntryNotFoundError(SentinelError):
    """Raised when a legacy time entry operation receives no time entry."""


class ClientNotFoundError(SentinelError):
    """Raised when a legacy client operation receives no client."""


class ProjectNotFoundError(SentinelError):
    """Raised when a legacy project operation receives no project."""


class TagNotFoundError(SentinelError):
    """Raised when a legacy tag operation receives no tag."""


class GroupNotFoundError(SentinelError):
    """Raised when a legacy group operation receives no group."""


class ProjectUserNotFoundError(SentinelError):
    """Raised when a legacy project user operation receives no project user."""


class WorkspaceNotFoundError(SentinelError):
    """Raised when a legacy workspace operation receives no workspace."""


class WorkspaceUserNotFoundError(SentinelError):
    """Raised when a legacy workspace user operation receives no workspace user."""


class UserNotFoundError(SentinelError):
    """Raised when a legacy user operation receives no user."""


def classify_response(
    status_code: int,
    headers: httpx.Headers,
    body: bytes,
    *,
    success_statuses: tuple[int, ...] = SUCCESS_STATUSES,
) -> ApiError | None:
    if status_code in success_statuses:
        return None

    message = body.decode("utf-8", errors="replace")
    if status_code == 400:
        return ValidationError(status_code, message, headers)
    if status_code in (401, 403):
        return AuthError(status_code, message, headers)
    if status_code == 404:
        return NotFoundError(status_code, message, headers)
    if status_code == 409:
        return ConflictError(status_code, message, headers)
    if status_code == 410:
        return GoneError(status_code, message, headers)
    if status_code == 429:
        return RateLimitedError(status_code, message, headers)
    if status_code >= 500:
        return ServerError(status_code, message, headers)

    return ApiError(status_code, message, headers)


def is_temporary(error: object) -> tuple[bool, str]:
    """Report whether ``error`` is worth retrying later, with its Retry-After value."""
    if isinstance(error, TemporaryError):
        return error.is_temporary()
    return False, ""


def is_timeout(error: object) -> bool:
    """Report whether ``error`` was caused by a server-side timeout."""
    return isinstance(error, TimeoutCapable) and error.is_timeout()
