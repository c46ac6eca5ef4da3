"""Protocol contracts for Toggl Track client extension points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .context import CallContext


@runtime_checkable
class SyncRequestExecutor(Protocol):
    def request(
        self,
        *,
        method: str,
        path: str,
        ctx: CallContext | None = None,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = None,
        success_statuses: tuple[int, ...] | None = None,
    ) -> Any: ...


@runtime_checkable
class AsyncRequestExecutor(Protocol):
    async def request(
        self,
        *,
        method: str,
        path: str,
        ctx: CallContext | None = None,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = None,
        success_statuses: tuple[int, ...] | None = None,
    ) -> Any: ...


@runtime_checkable
class TemporaryError(Protocol):
    def is_temporary(self) -> tuple[bool, str]: ...


@runtime_checkable
class TimeoutCapable(Protocol):
    def is_timeout(self) -> bool: ...
