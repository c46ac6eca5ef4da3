"""Models and adapter for the legacy (v8) Toggl Track API.

Legacy operations take the call context as their first argument and check
their inputs before any I/O: a missing context raises
:class:`~toggl_track.errors.ContextMissingError` and a missing resource (or a
resource without the id the path needs) raises that resource's sentinel, for
example :class:`~toggl_track.errors.TimeEntryNotFoundError`.

Request bodies are wrapped under the resource name (``{"time_entry": {...}}``)
and most single-resource responses come back wrapped as ``{"data": {...}}``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from .api import RequestFn
from .context import CallContext
from .errors import (
    ClientNotFoundError,
    ContextMissingError,
    GroupNotFoundError,
    ProjectNotFoundError,
    ProjectUserNotFoundError,
    SentinelError,
    TagNotFoundError,
    TimeEntryNotFoundError,
    UserNotFoundError,
    WorkspaceNotFoundError,
    WorkspaceUserNotFoundError,
)
from .models import TogglModel
from .urls import api_path, join_ids

API_V8 = "api/v8"
DATA_ENVELOPE = "data"


class TimeEntry(TogglModel):
    id: int | None = None
    description: str | None = None
    wid: int | None = None
    pid: int | None = None
    tid: int | None = None
    billable: bool | None = None
    start: str | None = None
    stop: str | None = None
    duration: int | None = None
    created_with: str | None = None
    tags: list[str] | None = None
    duronly: bool | None = None
    at: str | None = None


class Client(TogglModel):
    id: int | None = None
    name: str | None = None
    wid: int | None = None
    notes: str | None = None
    at: str | None = None


class Project(TogglModel):
    id: int | None = None
    name: str | None = None
    wid: int | None = None
    cid: int | None = None
    active: bool | None = None
    is_private: bool | None = None
    template: bool | None = None
    template_id: int | None = None
    billable: bool | None = None
    auto_estimates: bool | None = None
    estimated_hours: int | None = None
    at: str | None = None
    color: str | None = None
    rate: float | None = None
    created_at: str | None = None


class GetClientProjectsQuery(TogglModel):
    # "true", "false" or "both"
    active: str | None = None


class Tag(TogglModel):
    id: int | None = None
    name: str | None = None
    wid: int | None = None


class Group(TogglModel):
    id: int | None = None
    name: str | None = None
    wid: int | None = None
    at: str | None = None


class ProjectUser(TogglModel):
    id: int | None = None
    pid: int | None = None
    uid: int | None = None
    wid: int | None = None
    manager: bool | None = None
    rate: float | None = None
    at: str | None = None


class Workspace(TogglModel):
    id: int | None = None
    name: str | None = None
    premium: bool | None = None
    admin: bool | None = None
    default_hourly_rate: float | None = None
    default_currency: str | None = None
    only_admins_may_create_projects: bool | None = None
    only_admins_see_billable_rates: bool | None = None
    rounding: int | None = None
    rounding_minutes: int | None = None
    at: str | None = None
    logo_url: str | None = None


class WorkspaceUser(TogglModel):
    id: int | None = None
    uid: int | None = None
    wid: int | None = None
    admin: bool | None = None
    active: bool | None = None
    invite_url: str | None = None


class NewBlogPost(TogglModel):
    title: str | None = None
    url: str | None = None


class User(TogglModel):
    id: int | None = None
    api_token: str | None = None
    default_wid: int | None = None
    email: str | None = None
    password: str | None = None
    fullname: str | None = None
    jquery_timeofday_format: str | None = None
    jquery_date_format: str | None = None
    timeofday_format: str | None = None
    date_format: str | None = None
    store_start_and_stop_time: bool | None = None
    beginning_of_week: int | None = None
    language: str | None = None
    image_url: str | None = None
    sidebar_piechart: bool | None = None
    at: str | None = None
    new_blog_post: NewBlogPost | None = None
    send_product_emails: bool | None = None
    send_weekly_report: bool | None = None
    send_timer_notifications: bool | None = None
    openid_enabled: bool | None = None
    timezone: str | None = None
    created_with: str | None = None


class GetUserQuery(TogglModel):
    with_related_data: bool | None = None


class DashboardActivity(TogglModel):
    user_id: int | None = None
    project_id: int | None = None
    duration: int | None = None
    description: str | None = None
    stop: str | None = None
    tid: int | None = None


class MostActiveUser(TogglModel):
    user_id: int | None = None
    duration: int | None = None


class Dashboard(TogglModel):
    activity: list[DashboardActivity] | None = None
    most_active_user: list[MostActiveUser] | None = None


def _v8(*segments: Any) -> str:
    return api_path(API_V8, *segments)


def _require_ctx(ctx: CallContext | None) -> CallContext:
    if ctx is None:
        raise ContextMissingError("context is required")
    return ctx


def _require(resource: BaseModel | None, sentinel: type[SentinelError]) -> BaseModel:
    if resource is None:
        raise sentinel(f"{sentinel.__name__.removesuffix('Error')}: no value given")
    return resource


def _require_id(resource: BaseModel | None, sentinel: type[SentinelError]) -> int:
    resource_id = getattr(_require(resource, sentinel), "id", None)
    if resource_id is None:
        raise sentinel(f"{sentinel.__name__.removesuffix('Error')}: value has no id")
    return resource_id


def _require_ids(resources: Sequence[BaseModel | None] | None, sentinel: type[SentinelError]) -> str:
    if not resources:
        raise sentinel(f"{sentinel.__name__.removesuffix('Error')}: no values given")
    return join_ids(_require_id(resource, sentinel) for resource in resources)


class LegacyApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def _call(
        self,
        ctx: CallContext,
        method: str,
        path: str,
        *,
        query: Any | None = None,
        body: Any | None = None,
        response_type: Any | None = None,
        envelope: str | None = DATA_ENVELOPE,
    ) -> Any:
        return self._request(
            method,
            path,
            ctx=ctx,
            query=query,
            body=body,
            response_type=response_type,
            envelope=envelope if response_type is not None else None,
        )

    # --- time entries ---

    def start_time_entry(self, ctx: CallContext | None, time_entry: TimeEntry | None) -> Any:
        ctx = _require_ctx(ctx)
        time_entry = _require(time_entry, TimeEntryNotFoundError)
        return self._call(
            ctx,
            "POST",
            _v8("time_entries", "start"),
            body={"time_entry": time_entry},
            response_type=TimeEntry,
        )

    def stop_time_entry(self, ctx: CallContext | None, time_entry: TimeEntry | None) -> Any:
        ctx = _require_ctx(ctx)
        time_entry_id = _require_id(time_entry, TimeEntryNotFoundError)
        return self._call(ctx, "PUT", _v8("time_entries", time_entry_id, "stop"), response_type=TimeEntry)

    def create_time_entry(self, ctx: CallContext | None, time_entry: TimeEntry | None) -> Any:
        ctx = _require_ctx(ctx)
        time_entry = _require(time_entry, TimeEntryNotFoundError)
        return self._call(
            ctx,
            "POST",
            _v8("time_entries"),
            body={"time_entry": time_entry},
            response_type=TimeEntry,
        )

    def get_time_entry(self, ctx: CallContext | None, time_entry: TimeEntry | None) -> Any:
        ctx = _require_ctx(ctx)
        time_entry_id = _require_id(time_entry, TimeEntryNotFoundError)
        return self._call(ctx, "GET", _v8("time_entries", time_entry_id), response_type=TimeEntry)

    def get_running_time_entry(self, ctx: CallContext | None) -> Any:
        ctx = _require_ctx(ctx)
        return self._call(ctx, "GET", _v8("time_entries", "current"), response_type=TimeEntry)

    def update_time_entry(self, ctx: CallContext | None, time_entry: TimeEntry | None) -> Any:
        ctx = _require_ctx(ctx)
        time_entry_id = _require_id(time_entry, TimeEntryNotFoundError)
        return self._call(
            ctx,
            "PUT",
            _v8("time_entries", time_entry_id),
            body={"time_entry": time_entry},
            response_type=TimeEntry,
        )

    def delete_time_entry(self, ctx: CallContext | None, time_entry: TimeEntry | None) -> Any:
        ctx = _require_ctx(ctx)
        time_entry_id = _require_id(time_entry, TimeEntryNotFoundError)
        return self._call(ctx, "DELETE", _v8("time_entries", time_entry_id))

    # --- clients ---

    def create_client(self, ctx: CallContext | None, client: Client | None) -> Any:
        ctx = _require_ctx(ctx)
        client = _require(client, ClientNotFoundError)
        return self._call(ctx, "POST", _v8("clients"), body={"client": client}, response_type=Client)

    def get_client(self, ctx: CallContext | None, client: Client | None) -> Any:
        ctx = _require_ctx(ctx)
        client_id = _require_id(client, ClientNotFoundError)
        return self._call(ctx, "GET", _v8("clients", client_id), response_type=Client)

    def get_clients(self, ctx: CallContext | None) -> Any:
        ctx = _require_ctx(ctx)
        return self._call(ctx, "GET", _v8("clients"), response_type=list[Client], envelope=None)

    def get_client_projects(
        self,
        ctx: CallContext | None,
        client: Client | None,
        query: GetClientProjectsQuery | None = None,
    ) -> Any:
        ctx = _require_ctx(ctx)
        client_id = _require_id(client, ClientNotFoundError)
        return self._call(
            ctx,
            "GET",
            _v8("clients", client_id, "projects"),
            query=query,
            response_type=list[Project],
            envelope=None,
        )

    def update_client(self, ctx: CallContext | None, client: Client | None) -> Any:
        ctx = _require_ctx(ctx)
        client_id = _require_id(client, ClientNotFoundError)
        return self._call(ctx, "PUT", _v8("clients", client_id), body={"client": client}, response_type=Client)

    def delete_client(self, ctx: CallContext | None, client: Client | None) -> Any:
        ctx = _require_ctx(ctx)
        client_id = _require_id(client, ClientNotFoundError)
        return self._call(ctx, "DELETE", _v8("clients", client_id))

    # --- projects ---

    def create_project(self, ctx: CallContext | None, project: Project | None) -> Any:
        ctx = _require_ctx(ctx)
        project = _require(project, ProjectNotFoundError)
        return self._call(ctx, "POST", _v8("projects"), body={"project": project}, response_type=Project)

    def get_project(self, ctx: CallContext | None, project: Project | None) -> Any:
        ctx = _require_ctx(ctx)
        project_id = _require_id(project, ProjectNotFoundError)
        return self._call(ctx, "GET", _v8("projects", project_id), response_type=Project)

    def update_project(self, ctx: CallContext | None, project: Project | None) -> Any:
        ctx = _require_ctx(ctx)
        project_id = _require_id(project, ProjectNotFoundError)
        return self._call(
            ctx,
            "PUT",
            _v8("projects", project_id),
            body={"project": project},
            response_type=Project,
        )

    def delete_projects(self, ctx: CallContext | None, projects: Sequence[Project | None] | None) -> Any:
        ctx = _require_ctx(ctx)
        project_ids = _require_ids(projects, ProjectNotFoundError)
        return self._call(ctx, "DELETE", _v8("projects", project_ids))

    # --- tags ---

    def create_tag(self, ctx: CallContext | None, tag: Tag | None) -> Any:
        ctx = _require_ctx(ctx)
        tag = _require(tag, TagNotFoundError)
        return self._call(ctx, "POST", _v8("tags"), body={"tag": tag}, response_type=Tag)

    def update_tag(self, ctx: CallContext | None, tag: Tag | None) -> Any:
        ctx = _require_ctx(ctx)
        tag_id = _require_id(tag, TagNotFoundError)
        return self._call(ctx, "PUT", _v8("tags", tag_id), body={"tag": tag}, response_type=Tag)

    def delete_tag(self, ctx: CallContext | None, tag: Tag | None) -> Any:
        ctx = _require_ctx(ctx)
        tag_id = _require_id(tag, TagNotFoundError)
        return self._call(ctx, "DELETE", _v8("tags", tag_id))

    # --- groups ---

    def create_group(self, ctx: CallContext | None, group: Group | None) -> Any:
        ctx = _require_ctx(ctx)
        group = _require(group, GroupNotFoundError)
        return self._call(ctx, "POST", _v8("groups"), body={"group": group}, response_type=Group)

    def update_group(self, ctx: CallContext | None, group: Group | None) -> Any:
        ctx = _require_ctx(ctx)
        group_id = _require_id(group, GroupNotFoundError)
        return self._call(ctx, "PUT", _v8("groups", group_id), body={"group": group}, response_type=Group)

    def delete_group(self, ctx: CallContext | None, group: Group | None) -> Any:
        ctx = _require_ctx(ctx)
        group_id = _require_id(group, GroupNotFoundError)
        return self._call(ctx, "DELETE", _v8("groups", group_id))

    # --- project users ---

    def create_project_user(self, ctx: CallContext | None, project_user: ProjectUser | None) -> Any:
        ctx = _require_ctx(ctx)
        project_user = _require(project_user, ProjectUserNotFoundError)
        return self._call(
            ctx,
            "POST",
            _v8("project_users"),
            body={"project_user": project_user},
            response_type=ProjectUser,
        )

    def update_project_user(self, ctx: CallContext | None, project_user: ProjectUser | None) -> Any:
        ctx = _require_ctx(ctx)
        project_user_id = _require_id(project_user, ProjectUserNotFoundError)
        return self._call(
            ctx,
            "PUT",
            _v8("project_users", project_user_id),
            body={"project_user": project_user},
            response_type=ProjectUser,
        )

    def delete_project_users(
        self,
        ctx: CallContext | None,
        project_users: Sequence[ProjectUser | None] | None,
    ) -> Any:
        ctx = _require_ctx(ctx)
        project_user_ids = _require_ids(project_users, ProjectUserNotFoundError)
        return self._call(ctx, "DELETE", _v8("project_users", project_user_ids))

    def get_project_users_in_workspace(self, ctx: CallContext | None, workspace: Workspace | None) -> Any:
        ctx = _require_ctx(ctx)
        workspace_id = _require_id(workspace, WorkspaceNotFoundError)
        return self._call(
            ctx,
            "GET",
            _v8("workspaces", workspace_id, "project_users"),
            response_type=list[ProjectUser],
            envelope=None,
        )

    # --- workspaces and workspace users ---

    def get_workspaces(self, ctx: CallContext | None) -> Any:
        ctx = _require_ctx(ctx)
        return self._call(ctx, "GET", _v8("workspaces"), response_type=list[Workspace], envelope=None)

    def get_workspace(self, ctx: CallContext | None, workspace: Workspace | None) -> Any:
        ctx = _require_ctx(ctx)
        workspace_id = _require_id(workspace, WorkspaceNotFoundError)
        return self._call(ctx, "GET", _v8("workspaces", workspace_id), response_type=Workspace)

    def get_workspace_users(self, ctx: CallContext | None, workspace: Workspace | None) -> Any:
        ctx = _require_ctx(ctx)
        workspace_id = _require_id(workspace, WorkspaceNotFoundError)
        return self._call(
            ctx,
            "GET",
            _v8("workspaces", workspace_id, "workspace_users"),
            response_type=list[WorkspaceUser],
            envelope=None,
        )

    def invite_users_to_workspace(
        self,
        ctx: CallContext | None,
        workspace: Workspace | None,
        users: Sequence[User | None] | None,
    ) -> Any:
        ctx = _require_ctx(ctx)
        workspace_id = _require_id(workspace, WorkspaceNotFoundError)
        if not users:
            raise UserNotFoundError("UserNotFound: no values given")

        emails: list[str] = []
        for user in users:
            if user is None or not user.email:
                raise UserNotFoundError("UserNotFound: value has no email")
            emails.append(user.email)

        return self._call(
            ctx,
            "POST",
            _v8("workspaces", workspace_id, "invite"),
            body={"emails": emails},
            response_type=list[WorkspaceUser],
        )

    def update_workspace_user(self, ctx: CallContext | None, workspace_user: WorkspaceUser | None) -> Any:
        ctx = _require_ctx(ctx)
        workspace_user_id = _require_id(workspace_user, WorkspaceUserNotFoundError)
        return self._call(
            ctx,
            "PUT",
            _v8("workspace_users", workspace_user_id),
            body={"workspace_user": workspace_user},
            response_type=WorkspaceUser,
        )

    def delete_workspace_user(self, ctx: CallContext | None, workspace_user: WorkspaceUser | None) -> Any:
        ctx = _require_ctx(ctx)
        workspace_user_id = _require_id(workspace_user, WorkspaceUserNotFoundError)
        return self._call(ctx, "DELETE", _v8("workspace_users", workspace_user_id))

    # --- users ---

    def get_user(self, ctx: CallContext | None, query: GetUserQuery | None = None) -> Any:
        ctx = _require_ctx(ctx)
        return self._call(ctx, "GET", _v8("me"), query=query, response_type=User)

    def update_user(self, ctx: CallContext | None, user: User | None) -> Any:
        ctx = _require_ctx(ctx)
        user = _require(user, UserNotFoundError)
        return self._call(ctx, "PUT", _v8("me"), body={"user": user}, response_type=User)

    def reset_api_token(self, ctx: CallContext | None) -> Any:
        ctx = _require_ctx(ctx)
        return self._call(ctx, "POST", _v8("reset_token"), response_type=str, envelope=None)

    def sign_up(self, ctx: CallContext | None, user: User | None) -> Any:
        ctx = _require_ctx(ctx)
        user = _require(user, UserNotFoundError)
        return self._call(ctx, "POST", _v8("signups"), body={"user": user}, response_type=User)

    # --- dashboard ---

    def get_dashboard(self, ctx: CallContext | None, workspace: Workspace | None) -> Any:
        ctx = _require_ctx(ctx)
        workspace_id = _require_id(workspace, WorkspaceNotFoundError)
        return self._call(ctx, "GET", _v8("dashboard", workspace_id), response_type=Dashboard, envelope=None)
