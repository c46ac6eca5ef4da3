"""Public data models for the current (v9) Toggl Track API.

Every field is optional: ``None`` means "not set" and is left out of encoded
bodies and query strings, while any other value (``0``, ``""``, ``False``)
is sent as is.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TogglModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Me ---


class Me(TogglModel):
    id: int | None = None
    api_token: str | None = None
    email: str | None = None
    fullname: str | None = None
    timezone: str | None = None
    default_workspace_id: int | None = None
    beginning_of_week: int | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    openid_email: bool | None = None
    openid_enabled: bool | None = None
    country_id: int | None = None
    at: datetime | None = None
    intercom_hash: str | None = None
    has_password: bool | None = None


class UpdateMeRequestBody(TogglModel):
    beginning_of_week: int | None = None
    country_id: int | None = None
    current_password: str | None = None
    default_workspace_id: int | None = None
    email: str | None = None
    fullname: str | None = None
    password: str | None = None
    timezone: str | None = None


class GetMyProjectsQuery(TogglModel):
    include_archived: str | None = None


class GetMyProjectsPaginatedQuery(TogglModel):
    start_project_id: int | None = None


# --- Organizations ---


class TrialInfo(TogglModel):
    trial: bool | None = None
    trial_available: bool | None = None
    trial_end_date: str | None = None
    next_payment_date: str | None = None
    last_pricing_plan_id: int | None = None


class Organization(TogglModel):
    id: int | None = None
    name: str | None = None
    pricing_plan_id: int | None = None
    created_at: datetime | None = None
    at: datetime | None = None
    server_deleted_at: datetime | None = None
    is_multi_workspace_enabled: bool | None = None
    suspended_at: str | None = None
    user_count: int | None = None
    trial_info: TrialInfo | None = None
    is_chargify: bool | None = None
    max_workspaces: int | None = None
    admin: bool | None = None
    owner: bool | None = None


class OrganizationUserWorkspace(TogglModel):
    workspace_id: int | None = None
    admin: bool | None = None
    name: str | None = None


class OrganizationUser(TogglModel):
    id: int | None = None
    name: str | None = None
    email: str | None = None
    user_id: int | None = None
    avatar_url: str | None = None
    admin: bool | None = None
    owner: bool | None = None
    joined: bool | None = None
    invitation_code: str | None = None
    inactive: bool | None = None
    can_edit_email: bool | None = None
    workspaces: list[OrganizationUserWorkspace] | None = None


class GetOrganizationUsersQuery(TogglModel):
    filter: str | None = None
    active_status: str | None = None
    only_admins: str | None = None
    groups: str | None = None
    workspaces: str | None = None
    page: int | None = None
    per_page: int | None = None
    sort_dir: str | None = None


# --- Workspaces ---


class CsvUpload(TogglModel):
    at: str | None = None
    log_id: int | None = None


class Subscription(TogglModel):
    auto_renew: bool | None = None
    company_id: int | None = None
    created_at: datetime | None = None
    currency: str | None = None
    customer_id: int | None = None
    deleted_at: datetime | None = None
    last_pricing_plan_id: int | None = None
    organization_id: int | None = None
    pricing_plan_id: int | None = None
    renewal_at: datetime | None = None
    subscription_id: int | None = None
    workspace_id: int | None = None


class TeConstraints(TogglModel):
    description_present: bool | None = None
    project_present: bool | None = None
    tag_present: bool | None = None
    task_present: bool | None = None
    time_entry_constraints_enabled: bool | None = None


class Workspace(TogglModel):
    id: int | None = None
    organization_id: int | None = None
    name: str | None = None
    profile: int | None = None
    premium: bool | None = None
    business_ws: bool | None = None
    admin: bool | None = None
    suspended_at: datetime | None = None
    server_deleted_at: datetime | None = None
    default_hourly_rate: int | None = None
    rate_last_updated: str | None = None
    default_currency: str | None = None
    only_admins_may_create_projects: bool | None = None
    only_admins_may_create_tags: bool | None = None
    only_admins_see_billable_rates: bool | None = None
    only_admins_see_team_dashboard: bool | None = None
    projects_billable_by_default: bool | None = None
    reports_collapse: bool | None = None
    rounding: int | None = None
    rounding_minutes: int | None = None
    api_token: str | None = None
    at: datetime | None = None
    logo_url: str | None = None
    ical_url: str | None = None
    ical_enabled: bool | None = None
    csv_upload: CsvUpload | None = None
    subscription: Subscription | None = None
    te_constraints: TeConstraints | None = None


class WorkspaceUser(TogglModel):
    id: int | None = None
    user_id: int | None = None
    workspace_id: int | None = None
    admin: bool | None = None
    organization_admin: bool | None = None
    workspace_admin: bool | None = None
    active: bool | None = None
    email: str | None = None
    timezone: str | None = None
    inactive: bool | None = None
    at: datetime | None = None
    name: str | None = None
    rate: int | None = None
    rate_last_updated: str | None = None
    labour_cost: int | None = None
    invite_url: str | None = None
    invitation_code: str | None = None
    avatar_file_name: str | None = None
    group_ids: list[int] | None = None
    is_direct: bool | None = None


class UpdateWorkspaceRequestBody(TogglModel):
    admins: list[int] | None = None
    default_currency: str | None = None
    default_hourly_rate: int | None = None
    initial_pricing_plan: int | None = None
    name: str | None = None
    only_admins_may_create_projects: bool | None = None
    only_admins_may_create_tags: bool | None = None
    only_admins_see_billable_rates: bool | None = None
    only_admins_see_team_dashboard: bool | None = None
    organization_id: int | None = None
    projects_billable_by_default: bool | None = None
    rate_change_mode: str | None = None
    reports_collapse: bool | None = None
    rounding: int | None = None
    rounding_minutes: int | None = None


# --- Projects ---


class RecurringParameter(TogglModel):
    custom_period: int | None = None
    estimated_seconds: int | None = None
    parameter_start_date: str | None = None
    parameter_end_date: str | None = None
    period: str | None = None
    project_start_date: str | None = None


class RecurringParameters(TogglModel):
    items: list[RecurringParameter] | None = None


class CurrentPeriod(TogglModel):
    start_date: str | None = None
    end_date: str | None = None


class Project(TogglModel):
    id: int | None = None
    workspace_id: int | None = None
    client_id: int | None = None
    name: str | None = None
    is_private: bool | None = None
    active: bool | None = None
    at: datetime | None = None
    created_at: datetime | None = None
    server_deleted_at: datetime | None = None
    color: str | None = None
    billable: bool | None = None
    template: bool | None = None
    auto_estimates: bool | None = None
    estimated_hours: int | None = None
    rate: int | None = None
    rate_last_updated: str | None = None
    currency: str | None = None
    recurring: bool | None = None
    recurring_parameters: RecurringParameters | None = None
    current_period: CurrentPeriod | None = None
    fixed_fee: int | None = None
    actual_hours: int | None = None
    wid: int | None = None
    cid: int | None = None
    foreign_id: str | None = None
    first_time_entry: str | None = None


class GetProjectsQuery(TogglModel):
    active: bool | None = None
    since: int | None = None
    billable: bool | None = None
    name: str | None = None
    page: int | None = None
    sort_field: str | None = None
    sort_order: str | None = None
    only_templates: bool | None = None


class GetProjectQuery(TogglModel):
    with_first_time_entry: bool | None = None


class CreateProjectRequestBody(TogglModel):
    active: bool | None = None
    auto_estimates: bool | None = None
    billable: bool | None = None
    cid: int | None = None
    client_id: int | None = None
    client_name: str | None = None
    color: str | None = None
    currency: str | None = None
    estimated_hours: int | None = None
    fixed_fee: int | None = None
    foreign_id: str | None = None
    is_private: bool | None = None
    name: str | None = None
    posted_fields: list[str] | None = Field(default=None, alias="postedFields")
    rate: int | None = None
    rate_change_mode: str | None = None
    recurring: bool | None = None
    recurring_parameters: RecurringParameters | None = None
    template: bool | None = None
    template_id: int | None = None


class UpdateProjectRequestBody(CreateProjectRequestBody):
    pass


# --- Clients ---


class Client(TogglModel):
    id: int | None = None
    wid: int | None = None
    name: str | None = None
    at: datetime | None = None
    foreign_id: str | None = None
    server_deleted_at: datetime | None = None


class CreateClientRequestBody(TogglModel):
    name: str | None = None
    wid: int | None = None


class UpdateClientRequestBody(TogglModel):
    name: str | None = None
    wid: int | None = None


# --- Tags ---


class Tag(TogglModel):
    id: int | None = None
    workspace_id: int | None = None
    name: str | None = None
    at: datetime | None = None
    deleted_at: datetime | None = None


class CreateTagRequestBody(TogglModel):
    name: str | None = None
    workspace_id: int | None = None


class UpdateTagRequestBody(TogglModel):
    name: str | None = None
    workspace_id: int | None = None


# --- Time entries ---


class TimeEntry(TogglModel):
    id: int | None = None
    workspace_id: int | None = None
    project_id: int | None = None
    task_id: int | None = None
    billable: bool | None = None
    start: datetime | None = None
    stop: datetime | None = None
    duration: int | None = None
    description: str | None = None
    tags: list[str] | None = None
    tag_ids: list[int] | None = None
    duronly: bool | None = None
    at: datetime | None = None
    server_deleted_at: str | None = None
    user_id: int | None = None
    uid: int | None = None
    wid: int | None = None
    pid: int | None = None
    tid: int | None = None


class GetTimeEntriesQuery(TogglModel):
    before: str | None = None
    since: int | None = None
    start_date: str | None = None
    end_date: str | None = None


class CreateTimeEntryRequestBody(TogglModel):
    billable: bool | None = None
    created_with: str | None = None
    description: str | None = None
    duration: int | None = None
    duronly: bool | None = None
    pid: int | None = None
    posted_fields: list[str] | None = Field(default=None, alias="postedFields")
    project_id: int | None = None
    start: datetime | None = None
    start_date: str | None = None
    stop: datetime | None = None
    tag_action: str | None = None
    tag_ids: list[int] | None = None
    tags: list[str] | None = None
    task_id: int | None = None
    tid: int | None = None
    uid: int | None = None
    user_id: int | None = None
    wid: int | None = None
    workspace_id: int | None = None


class UpdateTimeEntryRequestBody(CreateTimeEntryRequestBody):
    pass


# --- Project users ---


class ProjectUser(TogglModel):
    id: int | None = None
    project_id: int | None = None
    user_id: int | None = None
    workspace_id: int | None = None
    group_id: int | None = None
    manager: bool | None = None
    rate: float | None = None
    rate_last_updated: str | None = None
    labor_cost: float | None = None
    at: datetime | None = None


class CreateProjectUserRequestBody(TogglModel):
    project_id: int | None = None
    user_id: int | None = None
    group_id: int | None = None
    manager: bool | None = None
    rate: float | None = None
    rate_change_mode: str | None = None
    labor_cost: float | None = None


class UpdateProjectUserRequestBody(TogglModel):
    manager: bool | None = None
    rate: float | None = None
    rate_change_mode: str | None = None
    labor_cost: float | None = None


# --- Groups ---


class GroupUser(TogglModel):
    user_id: int | None = None
    name: str | None = None
    avatar_url: str | None = None
    joined: bool | None = None


class Group(TogglModel):
    group_id: int | None = None
    name: str | None = None
    workspaces: list[int] | None = None
    users: list[GroupUser] | None = None
    at: datetime | None = None


class CreateGroupRequestBody(TogglModel):
    name: str | None = None
    users: list[int] | None = None
    workspaces: list[int] | None = None


class UpdateGroupRequestBody(TogglModel):
    name: str | None = None
    users: list[int] | None = None
    workspaces: list[int] | None = None
