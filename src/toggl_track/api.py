"""Resource adapters for the current (v9) Toggl Track API."""

from __future__ import annotations

from typing import Any, Callable

from .context import CallContext
from .models import (
    Client,
    CreateClientRequestBody,
    CreateGroupRequestBody,
    CreateProjectRequestBody,
    CreateProjectUserRequestBody,
    CreateTagRequestBody,
    CreateTimeEntryRequestBody,
    GetMyProjectsPaginatedQuery,
    GetMyProjectsQuery,
    GetOrganizationUsersQuery,
    GetProjectQuery,
    GetProjectsQuery,
    GetTimeEntriesQuery,
    Group,
    Me,
    Organization,
    OrganizationUser,
    Project,
    ProjectUser,
    Tag,
    TimeEntry,
    UpdateClientRequestBody,
    UpdateGroupRequestBody,
    UpdateMeRequestBody,
    UpdateProjectRequestBody,
    UpdateProjectUserRequestBody,
    UpdateTagRequestBody,
    UpdateTimeEntryRequestBody,
    UpdateWorkspaceRequestBody,
    Workspace,
    WorkspaceUser,
)
from .urls import api_path

RequestFn = Callable[..., Any]

API_V9 = "api/v9"


def _v9(*segments: Any) -> str:
    return api_path(API_V9, *segments)


class MeApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("me"), ctx=ctx, response_type=Me)

    def update(self, body: UpdateMeRequestBody, *, ctx: CallContext | None = None) -> Any:
        return self._request("PUT", _v9("me"), ctx=ctx, body=body, response_type=Me)

    def organizations(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("me", "organizations"), ctx=ctx, response_type=list[Organization])

    def projects(self, *, query: GetMyProjectsQuery | None = None, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("me", "projects"), ctx=ctx, query=query, response_type=list[Project])

    def projects_paginated(
        self,
        *,
        query: GetMyProjectsPaginatedQuery | None = None,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "GET",
            _v9("me", "projects", "paginated"),
            ctx=ctx,
            query=query,
            response_type=list[Project],
        )

    def tags(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("me", "tags"), ctx=ctx, response_type=list[Tag])

    def clients(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("me", "clients"), ctx=ctx, response_type=list[Client])

    def workspaces(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("me", "workspaces"), ctx=ctx, response_type=list[Workspace])


class OrganizationsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get(self, organization_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("organizations", organization_id), ctx=ctx, response_type=Organization)

    def users(
        self,
        organization_id: int,
        *,
        query: GetOrganizationUsersQuery | None = None,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "GET",
            _v9("organizations", organization_id, "users"),
            ctx=ctx,
            query=query,
            response_type=list[OrganizationUser],
        )


class WorkspacesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get(self, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("workspaces", workspace_id), ctx=ctx, response_type=Workspace)

    def users(self, organization_id: int, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "GET",
            _v9("organizations", organization_id, "workspaces", workspace_id),
            ctx=ctx,
            response_type=list[WorkspaceUser],
        )

    def update(
        self,
        workspace_id: int,
        body: UpdateWorkspaceRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request("PUT", _v9("workspaces", workspace_id), ctx=ctx, body=body, response_type=Workspace)


class ProjectsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(
        self,
        workspace_id: int,
        *,
        query: GetProjectsQuery | None = None,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "GET",
            _v9("workspaces", workspace_id, "projects"),
            ctx=ctx,
            query=query,
            response_type=list[Project],
        )

    def get(
        self,
        workspace_id: int,
        project_id: int,
        *,
        query: GetProjectQuery | None = None,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "GET",
            _v9("workspaces", workspace_id, "projects", project_id),
            ctx=ctx,
            query=query,
            response_type=Project,
        )

    def create(self, workspace_id: int, body: CreateProjectRequestBody, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "POST",
            _v9("workspaces", workspace_id, "projects"),
            ctx=ctx,
            body=body,
            response_type=Project,
        )

    def update(
        self,
        workspace_id: int,
        project_id: int,
        body: UpdateProjectRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            _v9("workspaces", workspace_id, "projects", project_id),
            ctx=ctx,
            body=body,
            response_type=Project,
        )

    def delete(self, workspace_id: int, project_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("DELETE", _v9("workspaces", workspace_id, "projects", project_id), ctx=ctx)


class ClientsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("workspaces", workspace_id, "clients"), ctx=ctx, response_type=list[Client])

    def get(self, workspace_id: int, client_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "GET",
            _v9("workspaces", workspace_id, "clients", client_id),
            ctx=ctx,
            response_type=Client,
        )

    def create(self, workspace_id: int, body: CreateClientRequestBody, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "POST",
            _v9("workspaces", workspace_id, "clients"),
            ctx=ctx,
            body=body,
            response_type=Client,
        )

    def update(
        self,
        workspace_id: int,
        client_id: int,
        body: UpdateClientRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            _v9("workspaces", workspace_id, "clients", client_id),
            ctx=ctx,
            body=body,
            response_type=Client,
        )

    def delete(self, workspace_id: int, client_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("DELETE", _v9("workspaces", workspace_id, "clients", client_id), ctx=ctx)


class TagsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", _v9("workspaces", workspace_id, "tags"), ctx=ctx, response_type=list[Tag])

    def create(self, workspace_id: int, body: CreateTagRequestBody, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "POST",
            _v9("workspaces", workspace_id, "tags"),
            ctx=ctx,
            body=body,
            response_type=Tag,
        )

    def update(
        self,
        workspace_id: int,
        tag_id: int,
        body: UpdateTagRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            _v9("workspaces", workspace_id, "tags", tag_id),
            ctx=ctx,
            body=body,
            response_type=Tag,
        )

    def delete(self, workspace_id: int, tag_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("DELETE", _v9("workspaces", workspace_id, "tags", tag_id), ctx=ctx)


class TimeEntriesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, *, query: GetTimeEntriesQuery | None = None, ctx: CallContext | None = None) -> Any:
        return self._request(
            "GET",
            _v9("me", "time_entries"),
            ctx=ctx,
            query=query,
            response_type=list[TimeEntry],
        )

    def current(self, *, ctx: CallContext | None = None) -> Any:
        # The API answers ``null`` when no entry is running.
        return self._request("GET", _v9("me", "time_entries", "current"), ctx=ctx, response_type=TimeEntry)

    def create(self, workspace_id: int, body: CreateTimeEntryRequestBody, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "POST",
            _v9("workspaces", workspace_id, "time_entries"),
            ctx=ctx,
            body=body,
            response_type=TimeEntry,
        )

    def update(
        self,
        workspace_id: int,
        time_entry_id: int,
        body: UpdateTimeEntryRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            _v9("workspaces", workspace_id, "time_entries", time_entry_id),
            ctx=ctx,
            body=body,
            response_type=TimeEntry,
        )

    def delete(self, workspace_id: int, time_entry_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("DELETE", _v9("workspaces", workspace_id, "time_entries", time_entry_id), ctx=ctx)


class ProjectUsersApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "GET",
            _v9("workspaces", workspace_id, "project_users"),
            ctx=ctx,
            response_type=list[ProjectUser],
        )

    def create(
        self,
        workspace_id: int,
        body: CreateProjectUserRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            _v9("workspaces", workspace_id, "project_users"),
            ctx=ctx,
            body=body,
            response_type=ProjectUser,
        )

    def update(
        self,
        workspace_id: int,
        project_user_id: int,
        body: UpdateProjectUserRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            _v9("workspaces", workspace_id, "project_users", project_user_id),
            ctx=ctx,
            body=body,
            response_type=ProjectUser,
        )

    def delete(self, workspace_id: int, project_user_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("DELETE", _v9("workspaces", workspace_id, "project_users", project_user_id), ctx=ctx)


class GroupsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, organization_id: int, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "GET",
            _v9("organizations", organization_id, "workspaces", workspace_id, "groups"),
            ctx=ctx,
            response_type=list[Group],
        )

    def create(self, organization_id: int, body: CreateGroupRequestBody, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "POST",
            _v9("organizations", organization_id, "groups"),
            ctx=ctx,
            body=body,
            response_type=Group,
        )

    def update(
        self,
        organization_id: int,
        group_id: int,
        body: UpdateGroupRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            _v9("organizations", organization_id, "groups", group_id),
            ctx=ctx,
            body=body,
            response_type=Group,
        )

    def delete(self, organization_id: int, group_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("DELETE", _v9("organizations", organization_id, "groups", group_id), ctx=ctx)
