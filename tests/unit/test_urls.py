from __future__ import annotations

import pytest

from toggl_track.errors import BadConfigError, BadQueryError
from toggl_track.models import GetOrganizationUsersQuery, GetProjectsQuery, GetTimeEntriesQuery
from toggl_track.urls import api_path, compose_url, encode_query, join_ids, join_path, parse_base_url


@pytest.mark.parametrize(
    ("base", "fragment"),
    [
        ("/mock", "api/v9/me"),
        ("/mock/", "api/v9/me"),
        ("/mock", "/api/v9/me"),
        ("/mock/", "/api/v9/me"),
    ],
)
def test_join_path_uses_exactly_one_separator(base: str, fragment: str) -> None:
    assert join_path(base, fragment) == "/mock/api/v9/me"


def test_join_path_with_root_base() -> None:
    assert join_path("/", "api/v9/me") == "/api/v9/me"
    assert join_path("", "") == "/"


def test_api_path_stringifies_ids() -> None:
    assert api_path("api/v9", "workspaces", 1234567, "projects") == "api/v9/workspaces/1234567/projects"


def test_join_ids_renders_batch_segment() -> None:
    assert join_ids([123456789, 234567891, 345678912]) == "123456789,234567891,345678912"


def test_encode_query_partial_fields() -> None:
    query = GetOrganizationUsersQuery(filter="toggl", only_admins="true", page=2)
    assert encode_query(query) == "filter=toggl&only_admins=true&page=2"


def test_encode_query_null_and_unset_are_empty() -> None:
    assert encode_query(None) == ""
    assert encode_query(GetOrganizationUsersQuery()) == ""
    assert encode_query({}) == ""


def test_encode_query_is_sorted_and_deterministic() -> None:
    query = GetTimeEntriesQuery(start_date="2024-01-01", end_date="2024-01-31", since=0)
    first = encode_query(query)
    assert first == encode_query(query)
    assert first == "end_date=2024-01-31&since=0&start_date=2024-01-01"


def test_encode_query_renders_booleans_lowercase() -> None:
    assert encode_query(GetProjectsQuery(active=False, billable=True)) == "active=false&billable=true"


def test_encode_query_percent_encodes_values() -> None:
    assert encode_query({"name": "a b&c", "skip": None}) == "name=a+b%26c"


def test_encode_query_rejects_nested_values() -> None:
    with pytest.raises(BadQueryError):
        encode_query({"filters": {"nested": 1}})
    with pytest.raises(BadQueryError):
        encode_query({"ids": [1, 2]})


def test_compose_url_keeps_base_path_prefix() -> None:
    url = compose_url("http://localhost:8080/mock/", "api/v9/me/projects", GetProjectsQuery(page=2))
    assert str(url) == "http://localhost:8080/mock/api/v9/me/projects?page=2"


def test_compose_url_without_query() -> None:
    url = compose_url("https://api.track.toggl.com/", "/api/v9/workspaces/1234567")
    assert str(url) == "https://api.track.toggl.com/api/v9/workspaces/1234567"


def test_parse_base_url_requires_http_scheme_and_host() -> None:
    assert parse_base_url("https://api.track.toggl.com/").host == "api.track.toggl.com"
    with pytest.raises(BadConfigError):
        parse_base_url("mailto:someone@example.com")
