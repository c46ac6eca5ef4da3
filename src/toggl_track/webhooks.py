"""Models and adapter for the Toggl Track webhooks (v1) API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .api import RequestFn
from .context import CallContext
from .models import TogglModel
from .urls import api_path

WEBHOOKS_API = "webhooks/api/v1"


class EventFilters(TogglModel):
    """Actions available per entity, e.g. ``time_entry: ["created", "deleted"]``."""

    client: list[str] | None = None
    project: list[str] | None = None
    project_group: list[str] | None = None
    project_user: list[str] | None = None
    tag: list[str] | None = None
    task: list[str] | None = None
    time_entry: list[str] | None = None
    workspace: list[str] | None = None
    workspace_user: list[str] | None = None


class EventFilter(TogglModel):
    entity: str | None = None
    action: str | None = None


class WebhookSubscription(TogglModel):
    subscription_id: int | None = None
    workspace_id: int | None = None
    user_id: int | None = None
    enabled: bool | None = None
    description: str | None = None
    event_filters: list[EventFilter] | None = None
    url_callback: str | None = None
    secret: str | None = None
    validated_at: datetime | None = None
    has_pending_events: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class CreateSubscriptionRequestBody(TogglModel):
    description: str | None = None
    enabled: bool | None = None
    event_filters: list[EventFilter] | None = None
    secret: str | None = None
    url_callback: str | None = None


class UpdateSubscriptionRequestBody(CreateSubscriptionRequestBody):
    pass


class WebhooksApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def event_filters(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", api_path(WEBHOOKS_API, "event_filters"), ctx=ctx, response_type=EventFilters)

    def subscriptions(self, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "GET",
            api_path(WEBHOOKS_API, "subscriptions", workspace_id),
            ctx=ctx,
            response_type=list[WebhookSubscription],
        )

    def create_subscription(
        self,
        workspace_id: int,
        body: CreateSubscriptionRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "POST",
            api_path(WEBHOOKS_API, "subscriptions", workspace_id),
            ctx=ctx,
            body=body,
            response_type=WebhookSubscription,
        )

    def update_subscription(
        self,
        workspace_id: int,
        subscription_id: int,
        body: UpdateSubscriptionRequestBody,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._request(
            "PUT",
            api_path(WEBHOOKS_API, "subscriptions", workspace_id, subscription_id),
            ctx=ctx,
            body=body,
            response_type=WebhookSubscription,
        )

    def delete_subscription(self, workspace_id: int, subscription_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request(
            "DELETE",
            api_path(WEBHOOKS_API, "subscriptions", workspace_id, subscription_id),
            ctx=ctx,
            response_type=WebhookSubscription,
        )

    def ping(self, workspace_id: int, subscription_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("POST", api_path(WEBHOOKS_API, "ping", workspace_id, subscription_id), ctx=ctx)

    def limits(self, workspace_id: int, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", api_path(WEBHOOKS_API, "limits", workspace_id), ctx=ctx, response_type=int)

    def status(self, *, ctx: CallContext | None = None) -> Any:
        return self._request("GET", api_path(WEBHOOKS_API, "status"), ctx=ctx, response_type=str)
