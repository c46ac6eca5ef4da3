"""Top-level Toggl Track clients (sync + async)."""

from __future__ import annotations

from typing import Any

import httpx

from .api import (
    ClientsApi,
    GroupsApi,
    MeApi,
    OrganizationsApi,
    ProjectsApi,
    ProjectUsersApi,
    TagsApi,
    TimeEntriesApi,
    WorkspacesApi,
)
from .config import ClientConfig, Option
from .context import CallContext
from .legacy import LegacyApi
from .protocols import AsyncRequestExecutor, SyncRequestExecutor
from .reports import ReportsApi
from .transport import AsyncTransport, SyncTransport
from .webhooks import WebhooksApi


class TogglTrack:
    """Synchronous Toggl Track client.

    ``client.me``, ``client.projects`` and the other v9 namespaces live at the
    top level; the reports, webhooks and legacy v8 APIs hang off
    ``client.reports``, ``client.webhooks`` and ``client.legacy``.
    """

    def __init__(
        self,
        *options: Option,
        config: ClientConfig | None = None,
        request_executor: SyncRequestExecutor | None = None,
    ) -> None:
        self.client_config = config or ClientConfig.build(*options)
        self.client_config.validate()

        self._owns_client = self.client_config.http_client is None
        self._client = self.client_config.http_client or httpx.Client()
        self._transport = SyncTransport(self.client_config, self._client)
        self._executor = request_executor or self._transport

        self.me = MeApi(self._request)
        self.organizations = OrganizationsApi(self._request)
        self.workspaces = WorkspacesApi(self._request)
        self.projects = ProjectsApi(self._request)
        self.clients = ClientsApi(self._request)
        self.tags = TagsApi(self._request)
        self.time_entries = TimeEntriesApi(self._request)
        self.project_users = ProjectUsersApi(self._request)
        self.groups = GroupsApi(self._request)
        self.reports = ReportsApi(self._request)
        self.webhooks = WebhooksApi(self._request)
        self.legacy = LegacyApi(self._request)

    @classmethod
    def from_env(cls) -> "TogglTrack":
        return cls(config=ClientConfig.from_env())

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "TogglTrack":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        ctx: CallContext | None = None,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = None,
        success_statuses: tuple[int, ...] | None = None,
    ) -> Any:
        return self._executor.request(
            method=method,
            path=path,
            ctx=ctx,
            query=query,
            body=body,
            response_type=response_type,
            envelope=envelope,
            success_statuses=success_statuses,
        )


class AsyncTogglTrack:
    """Asynchronous Toggl Track client with the same namespaces as :class:`TogglTrack`."""

    def __init__(
        self,
        *options: Option,
        config: ClientConfig | None = None,
        request_executor: AsyncRequestExecutor | None = None,
    ) -> None:
        self.client_config = config or ClientConfig.build(*options)
        self.client_config.validate()

        self._owns_client = self.client_config.async_http_client is None
        self._client = self.client_config.async_http_client or httpx.AsyncClient()
        self._transport = AsyncTransport(self.client_config, self._client)
        self._executor = request_executor or self._transport

        self.me = MeApi(self._request)
        self.organizations = OrganizationsApi(self._request)
        self.workspaces = WorkspacesApi(self._request)
        self.projects = ProjectsApi(self._request)
        self.clients = ClientsApi(self._request)
        self.tags = TagsApi(self._request)
        self.time_entries = TimeEntriesApi(self._request)
        self.project_users = ProjectUsersApi(self._request)
        self.groups = GroupsApi(self._request)
        self.reports = ReportsApi(self._request)
        self.webhooks = WebhooksApi(self._request)
        self.legacy = LegacyApi(self._request)

    @classmethod
    def from_env(cls) -> "AsyncTogglTrack":
        return cls(config=ClientConfig.from_env())

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncTogglTrack":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        ctx: CallContext | None = None,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = None,
        success_statuses: tuple[int, ...] | None = None,
    ) -> Any:
        return await self._executor.request(
            method=method,
            path=path,
            ctx=ctx,
            query=query,
            body=body,
            response_type=response_type,
            envelope=envelope,
            success_statuses=success_statuses,
        )
