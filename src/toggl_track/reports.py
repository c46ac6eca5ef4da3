"""Models and adapter for the Toggl Track reports (v3) API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .api import RequestFn
from .context import CallContext
from .models import TogglModel
from .urls import api_path

REPORTS_API = "reports/api/v3/workspace"


class ReportTimeEntry(TogglModel):
    id: int | None = None
    seconds: int | None = None
    start: datetime | None = None
    stop: datetime | None = None
    at: datetime | None = None


class DetailedReportRow(TogglModel):
    user_id: int | None = None
    username: str | None = None
    project_id: int | None = None
    task_id: int | None = None
    billable: bool | None = None
    description: str | None = None
    tag_ids: list[int] | None = None
    billable_amount_in_cents: int | None = None
    hourly_rate_in_cents: int | None = None
    currency: str | None = None
    time_entries: list[ReportTimeEntry] | None = None
    row_number: int | None = None


DetailedReport = list[DetailedReportRow]


class SearchDetailedReportRequestBody(TogglModel):
    billable: bool | None = None
    client_ids: list[int] | None = None
    description: str | None = None
    end_date: str | None = None
    first_id: int | None = None
    first_row_number: int | None = None
    first_timestamp: int | None = None
    group_ids: list[int] | None = None
    grouped: bool | None = None
    hide_amounts: bool | None = None
    max_duration_seconds: int | None = None
    min_duration_seconds: int | None = None
    order_by: str | None = None
    order_dir: str | None = None
    posted_fields: list[str] | None = Field(default=None, alias="postedFields")
    project_ids: list[int] | None = None
    rounding: int | None = None
    rounding_minutes: int | None = None
    start_time: datetime | None = Field(default=None, alias="startTime")
    start_date: str | None = None
    tag_ids: list[int] | None = None
    task_ids: list[int] | None = None
    time_entry_ids: list[int] | None = None
    user_ids: list[int] | None = None


class SummarySubGroup(TogglModel):
    id: int | None = None
    title: str | None = None
    seconds: int | None = None


class SummaryGroup(TogglModel):
    id: int | None = None
    sub_groups: list[SummarySubGroup] | None = None


class SummaryReport(TogglModel):
    groups: list[SummaryGroup] | None = None


class GroupFilter(TogglModel):
    currency: str | None = None
    max_amount_cents: int | None = None
    max_duration_seconds: int | None = None
    min_amount_cents: int | None = None
    min_duration_seconds: int | None = None


class Audit(TogglModel):
    group_filter: GroupFilter | None = None
    show_empty_groups: bool | None = None
    show_tracked_groups: bool | None = None


class SearchSummaryReportRequestBody(TogglModel):
    audit: Audit | None = None
    billable: bool | None = None
    client_ids: list[int] | None = None
    description: str | None = None
    end_date: str | None = None
    group_ids: list[int] | None = None
    grouping: str | None = None
    include_time_entry_ids: bool | None = None
    max_duration_seconds: int | None = None
    min_duration_seconds: int | None = None
    posted_fields: list[str] | None = Field(default=None, alias="postedFields")
    project_ids: list[int] | None = None
    rounding: int | None = None
    rounding_minutes: int | None = None
    start_time: datetime | None = Field(default=None, alias="startTime")
    start_date: str | None = None
    sub_grouping: str | None = None
    tag_ids: list[int] | None = None
    task_ids: list[int] | None = None
    user_ids: list[int] | None = None


class ProjectSummary(TogglModel):
    seconds: int | None = None
    resolution: str | None = None


class LoadProjectSummaryRequestBody(TogglModel):
    end_date: str | None = None
    start_time: datetime | None = Field(default=None, alias="startTime")
    start_date: str | None = None


class WeeklyReportRow(TogglModel):
    user_id: int | None = None
    project_id: int | None = None
    seconds: list[int | None] | None = None


WeeklyReport = list[WeeklyReportRow]


class SearchWeeklyReportRequestBody(TogglModel):
    billable: bool | None = None
    client_ids: list[int] | None = None
    description: str | None = None
    end_date: str | None = None
    group_ids: list[int] | None = None
    max_duration_seconds: int | None = None
    min_duration_seconds: int | None = None
    posted_fields: list[str] | None = Field(default=None, alias="postedFields")
    project_ids: list[int] | None = None
    rounding: int | None = None
    rounding_minutes: int | None = None
    start_time: datetime | None = Field(default=None, alias="startTime")
    start_date: str | None = None
    tag_ids: list[int] | None = None
    task_ids: list[int] | None = None
    user_ids: list[int] | None = None


class ReportProject(TogglModel):
    id: int | None = None
    name: str | None = None
    client_id: int | None = None
    color: str | None = None
    active: bool | None = None
    currency: str | None = None
    billable: bool | None = None


class ListProjectsRequestBody(TogglModel):
    client_ids: list[int] | None = None
    currency: str | None = None
    ids: list[int] | None = None
    is_active: bool | None = None
    is_billable: bool | None = None
    is_private: bool | None = None
    name: str | None = None
    start: int | None = None


class ReportsApi:
    """Pre-computed reports; every operation is a POST carrying its filter body."""

    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def search_detailed(
        self,
        workspace_id: int,
        body: SearchDetailedReportRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            api_path(REPORTS_API, workspace_id, "search", "time_entries"),
            ctx=ctx,
            body=body,
            response_type=DetailedReport,
        )

    def search_summary(
        self,
        workspace_id: int,
        body: SearchSummaryReportRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            api_path(REPORTS_API, workspace_id, "summary", "time_entries"),
            ctx=ctx,
            body=body,
            response_type=SummaryReport,
        )

    def project_summary(
        self,
        workspace_id: int,
        project_id: int,
        body: LoadProjectSummaryRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            api_path(REPORTS_API, workspace_id, "projects", project_id, "summary"),
            ctx=ctx,
            body=body,
            response_type=ProjectSummary,
        )

    def search_weekly(
        self,
        workspace_id: int,
        body: SearchWeeklyReportRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            api_path(REPORTS_API, workspace_id, "weekly", "time_entries"),
            ctx=ctx,
            body=body,
            response_type=WeeklyReport,
        )

    def list_projects(
        self,
        workspace_id: int,
        body: ListProjectsRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            api_path(REPORTS_API, workspace_id, "filters", "projects"),
            ctx=ctx,
            body=body,
            response_type=list[ReportProject],
        )
