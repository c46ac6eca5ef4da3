"""Configuration helpers for the Toggl Track client."""

from __future__ import annotations

import os
from base64 import b64encode
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

import httpx

from .errors import BadConfigError
from .urls import parse_base_url

DEFAULT_BASE_URL = "https://api.track.toggl.com/"
BASIC_AUTH_PASSWORD = "api_token"  # fixed by the Toggl Track API

Option = Callable[["ClientConfig"], "ClientConfig"]


@dataclass(frozen=True, slots=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    api_token: str | None = None
    email: str | None = None
    password: str | None = None
    http_client: httpx.Client | None = None
    async_http_client: httpx.AsyncClient | None = None

    @classmethod
    def build(cls, *options: Option) -> ClientConfig:
        config = cls()
        for option in options:
            config = option(config)
        return config

    @classmethod
    def from_env(cls) -> ClientConfig:
        options: list[Option] = []

        base_url = _trim_or_none(os.getenv("TOGGL_BASE_URL"))
        if base_url:
            options.append(with_base_url(base_url))

        email = _trim_or_none(os.getenv("TOGGL_EMAIL"))
        password = os.getenv("TOGGL_PASSWORD")
        if email and password:
            options.append(with_credentials(email, password))

        api_token = _trim_or_none(os.getenv("TOGGL_API_TOKEN"))
        if api_token:
            options.append(with_api_token(api_token))

        return cls.build(*options)

    def validate(self) -> None:
        parse_base_url(self.base_url)

    def credentials(self) -> tuple[str, str]:
        if self.api_token:
            return self.api_token, BASIC_AUTH_PASSWORD
        if self.email and self.password is not None:
            return self.email, self.password
        raise BadConfigError("no credential configured; use with_api_token or with_credentials")

    def authorization_header(self) -> str:
        username, password = self.credentials()
        token = b64encode(f"{username}:{password}".encode()).decode("ascii")
        return f"Basic {token}"


def with_api_token(api_token: str) -> Option:
    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, api_token=api_token, email=None, password=None)

    return apply


def with_credentials(email: str, password: str) -> Option:
    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, api_token=None, email=email, password=password)

    return apply


def with_http_client(http_client: httpx.Client | httpx.AsyncClient) -> Option:
    def apply(config: ClientConfig) -> ClientConfig:
        if isinstance(http_client, httpx.AsyncClient):
            return replace(config, async_http_client=http_client)
        return replace(config, http_client=http_client)

    return apply


def with_base_url(base_url: str) -> Option:
    # Points the client at a mock server in tests.
    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, base_url=base_url)

    return apply


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None
