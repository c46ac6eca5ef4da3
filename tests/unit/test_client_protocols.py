from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from toggl_track import AsyncTogglTrack, TogglTrack
from toggl_track.config import with_api_token
from toggl_track.context import CallContext
from toggl_track.errors import TransportError
from toggl_track.models import (
    CreateClientRequestBody,
    CreateGroupRequestBody,
    CreateProjectRequestBody,
    CreateProjectUserRequestBody,
    CreateTagRequestBody,
    CreateTimeEntryRequestBody,
    GetMyProjectsQuery,
    GetProjectQuery,
    GetTimeEntriesQuery,
    Me,
    Project,
    TimeEntry,
    UpdateClientRequestBody,
    UpdateGroupRequestBody,
    UpdateProjectRequestBody,
    UpdateProjectUserRequestBody,
    UpdateTagRequestBody,
    UpdateTimeEntryRequestBody,
    UpdateWorkspaceRequestBody,
)
from toggl_track.protocols import AsyncRequestExecutor, SyncRequestExecutor
from toggl_track.reports import (
    DetailedReport,
    ListProjectsRequestBody,
    LoadProjectSummaryRequestBody,
    SearchDetailedReportRequestBody,
    SearchSummaryReportRequestBody,
    SearchWeeklyReportRequestBody,
)
from toggl_track.webhooks import CreateSubscriptionRequestBody, UpdateSubscriptionRequestBody


@dataclass
class _SyncExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return {"ok": True, "attempt": len(self.calls)}


@dataclass
class _AsyncExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return {"ok": True, "attempt": len(self.calls)}


def _client(executor: _SyncExecutor) -> TogglTrack:
    return TogglTrack(with_api_token("token"), request_executor=executor)


def test_fake_executors_satisfy_protocols() -> None:
    assert isinstance(_SyncExecutor(), SyncRequestExecutor)
    assert isinstance(_AsyncExecutor(), AsyncRequestExecutor)


def test_sync_executor_injection_uses_protocol_executor() -> None:
    executor = _SyncExecutor()
    with _client(executor) as client:
        response = client.me.get()

    assert response["ok"] is True
    call = executor.calls[0]
    assert call["method"] == "GET"
    assert call["path"] == "api/v9/me"
    assert call["response_type"] is Me
    assert call["ctx"] is None


@pytest.mark.asyncio
async def test_async_executor_injection_uses_protocol_executor() -> None:
    executor = _AsyncExecutor()
    ctx = CallContext.background()
    async with AsyncTogglTrack(with_api_token("token"), request_executor=executor) as client:
        response = await client.time_entries.current(ctx=ctx)

    assert response["ok"] is True
    call = executor.calls[0]
    assert call["method"] == "GET"
    assert call["path"] == "api/v9/me/time_entries/current"
    assert call["response_type"] is TimeEntry
    assert call["ctx"] is ctx


def test_executor_errors_propagate_unchanged() -> None:
    class FailingExecutor(_SyncExecutor):
        def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            raise TransportError("down")

    executor = FailingExecutor()
    with _client(executor) as client:
        with pytest.raises(TransportError, match="down"):
            client.tags.list(1)

    assert len(executor.calls) == 1


V9_ROUTES: list[tuple[str, Any, str, str]] = [
    ("me.update", lambda c: c.me.update(body=None), "PUT", "api/v9/me"),
    ("me.organizations", lambda c: c.me.organizations(), "GET", "api/v9/me/organizations"),
    ("me.projects", lambda c: c.me.projects(), "GET", "api/v9/me/projects"),
    ("me.projects_paginated", lambda c: c.me.projects_paginated(), "GET", "api/v9/me/projects/paginated"),
    ("me.tags", lambda c: c.me.tags(), "GET", "api/v9/me/tags"),
    ("me.clients", lambda c: c.me.clients(), "GET", "api/v9/me/clients"),
    ("me.workspaces", lambda c: c.me.workspaces(), "GET", "api/v9/me/workspaces"),
    ("organizations.get", lambda c: c.organizations.get(11), "GET", "api/v9/organizations/11"),
    ("organizations.users", lambda c: c.organizations.users(11), "GET", "api/v9/organizations/11/users"),
    ("workspaces.get", lambda c: c.workspaces.get(22), "GET", "api/v9/workspaces/22"),
    ("workspaces.users", lambda c: c.workspaces.users(11, 22), "GET", "api/v9/organizations/11/workspaces/22"),
    (
        "workspaces.update",
        lambda c: c.workspaces.update(22, UpdateWorkspaceRequestBody(name="w")),
        "PUT",
        "api/v9/workspaces/22",
    ),
    ("projects.list", lambda c: c.projects.list(22), "GET", "api/v9/workspaces/22/projects"),
    ("projects.get", lambda c: c.projects.get(22, 33), "GET", "api/v9/workspaces/22/projects/33"),
    (
        "projects.create",
        lambda c: c.projects.create(22, CreateProjectRequestBody(name="p")),
        "POST",
        "api/v9/workspaces/22/projects",
    ),
    (
        "projects.update",
        lambda c: c.projects.update(22, 33, UpdateProjectRequestBody(name="p")),
        "PUT",
        "api/v9/workspaces/22/projects/33",
    ),
    ("projects.delete", lambda c: c.projects.delete(22, 33), "DELETE", "api/v9/workspaces/22/projects/33"),
    ("clients.list", lambda c: c.clients.list(22), "GET", "api/v9/workspaces/22/clients"),
    ("clients.get", lambda c: c.clients.get(22, 44), "GET", "api/v9/workspaces/22/clients/44"),
    (
        "clients.create",
        lambda c: c.clients.create(22, CreateClientRequestBody(name="c")),
        "POST",
        "api/v9/workspaces/22/clients",
    ),
    (
        "clients.update",
        lambda c: c.clients.update(22, 44, UpdateClientRequestBody(name="c")),
        "PUT",
        "api/v9/workspaces/22/clients/44",
    ),
    ("clients.delete", lambda c: c.clients.delete(22, 44), "DELETE", "api/v9/workspaces/22/clients/44"),
    ("tags.list", lambda c: c.tags.list(22), "GET", "api/v9/workspaces/22/tags"),
    ("tags.create", lambda c: c.tags.create(22, CreateTagRequestBody(name="t")), "POST", "api/v9/workspaces/22/tags"),
    (
        "tags.update",
        lambda c: c.tags.update(22, 55, UpdateTagRequestBody(name="t")),
        "PUT",
        "api/v9/workspaces/22/tags/55",
    ),
    ("tags.delete", lambda c: c.tags.delete(22, 55), "DELETE", "api/v9/workspaces/22/tags/55"),
    ("time_entries.list", lambda c: c.time_entries.list(), "GET", "api/v9/me/time_entries"),
    (
        "time_entries.create",
        lambda c: c.time_entries.create(22, CreateTimeEntryRequestBody(description="d")),
        "POST",
        "api/v9/workspaces/22/time_entries",
    ),
    (
        "time_entries.update",
        lambda c: c.time_entries.update(22, 66, UpdateTimeEntryRequestBody(description="d")),
        "PUT",
        "api/v9/workspaces/22/time_entries/66",
    ),
    (
        "time_entries.delete",
        lambda c: c.time_entries.delete(22, 66),
        "DELETE",
        "api/v9/workspaces/22/time_entries/66",
    ),
    ("project_users.list", lambda c: c.project_users.list(22), "GET", "api/v9/workspaces/22/project_users"),
    (
        "project_users.create",
        lambda c: c.project_users.create(22, CreateProjectUserRequestBody(project_id=33, user_id=77)),
        "POST",
        "api/v9/workspaces/22/project_users",
    ),
    (
        "project_users.update",
        lambda c: c.project_users.update(22, 88, UpdateProjectUserRequestBody(manager=True)),
        "PUT",
        "api/v9/workspaces/22/project_users/88",
    ),
    (
        "project_users.delete",
        lambda c: c.project_users.delete(22, 88),
        "DELETE",
        "api/v9/workspaces/22/project_users/88",
    ),
    ("groups.list", lambda c: c.groups.list(11, 22), "GET", "api/v9/organizations/11/workspaces/22/groups"),
    (
        "groups.create",
        lambda c: c.groups.create(11, CreateGroupRequestBody(name="g")),
        "POST",
        "api/v9/organizations/11/groups",
    ),
    (
        "groups.update",
        lambda c: c.groups.update(11, 99, UpdateGroupRequestBody(name="g")),
        "PUT",
        "api/v9/organizations/11/groups/99",
    ),
    ("groups.delete", lambda c: c.groups.delete(11, 99), "DELETE", "api/v9/organizations/11/groups/99"),
    (
        "reports.search_detailed",
        lambda c: c.reports.search_detailed(22, SearchDetailedReportRequestBody()),
        "POST",
        "reports/api/v3/workspace/22/search/time_entries",
    ),
    (
        "reports.search_summary",
        lambda c: c.reports.search_summary(22, SearchSummaryReportRequestBody()),
        "POST",
        "reports/api/v3/workspace/22/summary/time_entries",
    ),
    (
        "reports.project_summary",
        lambda c: c.reports.project_summary(22, 33, LoadProjectSummaryRequestBody()),
        "POST",
        "reports/api/v3/workspace/22/projects/33/summary",
    ),
    (
        "reports.search_weekly",
        lambda c: c.reports.search_weekly(22, SearchWeeklyReportRequestBody()),
        "POST",
        "reports/api/v3/workspace/22/weekly/time_entries",
    ),
    (
        "reports.list_projects",
        lambda c: c.reports.list_projects(22, ListProjectsRequestBody()),
        "POST",
        "reports/api/v3/workspace/22/filters/projects",
    ),
    ("webhooks.event_filters", lambda c: c.webhooks.event_filters(), "GET", "webhooks/api/v1/event_filters"),
    ("webhooks.subscriptions", lambda c: c.webhooks.subscriptions(22), "GET", "webhooks/api/v1/subscriptions/22"),
    (
        "webhooks.create_subscription",
        lambda c: c.webhooks.create_subscription(22, CreateSubscriptionRequestBody(description="hook")),
        "POST",
        "webhooks/api/v1/subscriptions/22",
    ),
    (
        "webhooks.update_subscription",
        lambda c: c.webhooks.update_subscription(22, 5, UpdateSubscriptionRequestBody(enabled=False)),
        "PUT",
        "webhooks/api/v1/subscriptions/22/5",
    ),
    (
        "webhooks.delete_subscription",
        lambda c: c.webhooks.delete_subscription(22, 5),
        "DELETE",
        "webhooks/api/v1/subscriptions/22/5",
    ),
    ("webhooks.ping", lambda c: c.webhooks.ping(22, 5), "POST", "webhooks/api/v1/ping/22/5"),
    ("webhooks.limits", lambda c: c.webhooks.limits(22), "GET", "webhooks/api/v1/limits/22"),
    ("webhooks.status", lambda c: c.webhooks.status(), "GET", "webhooks/api/v1/status"),
]


@pytest.mark.parametrize(
    ("invoke", "method", "path"),
    [(invoke, method, path) for _, invoke, method, path in V9_ROUTES],
    ids=[name for name, *_ in V9_ROUTES],
)
def test_operation_routes(invoke: Any, method: str, path: str) -> None:
    executor = _SyncExecutor()
    with _client(executor) as client:
        invoke(client)

    call = executor.calls[0]
    assert call["method"] == method
    assert call["path"] == path
    assert call["envelope"] is None


def test_deletes_discard_response_bodies() -> None:
    executor = _SyncExecutor()
    with _client(executor) as client:
        client.projects.delete(22, 33)
        client.tags.delete(22, 55)

    assert all(call["response_type"] is None for call in executor.calls)


def test_queries_and_bodies_reach_executor_as_models() -> None:
    executor = _SyncExecutor()
    query = GetMyProjectsQuery(include_archived="true")
    body = CreateProjectRequestBody(name="Secret project", is_private=True)
    with _client(executor) as client:
        client.me.projects(query=query)
        client.projects.get(22, 33, query=GetProjectQuery(with_first_time_entry=True))
        client.projects.create(22, body)

    assert executor.calls[0]["query"] is query
    assert executor.calls[0]["response_type"] == list[Project]
    assert executor.calls[1]["query"] == GetProjectQuery(with_first_time_entry=True)
    assert executor.calls[2]["body"] is body
    assert executor.calls[2]["response_type"] is Project


def test_time_entries_list_forwards_query() -> None:
    executor = _SyncExecutor()
    query = GetTimeEntriesQuery(start_date="2024-01-01", end_date="2024-01-31")
    with _client(executor) as client:
        client.time_entries.list(query=query)

    assert executor.calls[0]["query"] is query
    assert executor.calls[0]["response_type"] == list[TimeEntry]


def test_reports_decode_into_typed_rows() -> None:
    executor = _SyncExecutor()
    with _client(executor) as client:
        client.reports.search_detailed(22, SearchDetailedReportRequestBody(start_date="2006-01-02"))

    assert executor.calls[0]["response_type"] == DetailedReport
