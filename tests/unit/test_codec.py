from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from toggl_track import legacy
from toggl_track.codec import decode_body, encode_body
from toggl_track.errors import DecodeError
from toggl_track.models import (
    CreateTagRequestBody,
    CreateTimeEntryRequestBody,
    Me,
    Tag,
    UpdateMeRequestBody,
)
from toggl_track.reports import SearchDetailedReportRequestBody


def test_encode_body_keeps_declared_field_order_and_zero_values() -> None:
    body = UpdateMeRequestBody(fullname="Awesome Name", default_workspace_id=1234567, beginning_of_week=0)
    assert encode_body(body) == b'{"beginning_of_week":0,"default_workspace_id":1234567,"fullname":"Awesome Name"}'


def test_encode_body_all_unset_is_empty_object() -> None:
    assert encode_body(UpdateMeRequestBody()) == b"{}"


def test_encode_body_keeps_false_and_empty_string() -> None:
    body = CreateTimeEntryRequestBody(billable=False, description="")
    assert encode_body(body) == b'{"billable":false,"description":""}'


def test_encode_body_uses_wire_aliases() -> None:
    body = SearchDetailedReportRequestBody(
        posted_fields=["description"],
        start_time=datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc),
    )
    assert encode_body(body) == b'{"postedFields":["description"],"startTime":"2006-01-02T15:04:05Z"}'


def test_encode_body_is_utf8_without_escaping() -> None:
    assert encode_body(CreateTagRequestBody(name="タグ")) == '{"name":"タグ"}'.encode("utf-8")


def test_encode_body_wraps_legacy_resources() -> None:
    body = {"time_entry": legacy.TimeEntry(description="Meeting", wid=777, duration=1200)}
    assert encode_body(body) == b'{"time_entry":{"description":"Meeting","wid":777,"duration":1200}}'


def test_decode_body_round_trips_fully_set_value() -> None:
    raw = b'{"id":1,"workspace_id":2,"name":"billing","at":"2024-01-02T03:04:05Z","deleted_at":"2024-01-03T00:00:00Z"}'
    tag = decode_body(raw, Tag)
    assert encode_body(tag) == raw


def test_decode_body_list_response() -> None:
    tags = decode_body(b'[{"id":1,"name":"a"},{"id":2,"name":"b"}]', list[Tag])
    assert [tag.name for tag in tags] == ["a", "b"]


def test_decode_body_keeps_timestamp_offset() -> None:
    me = decode_body(b'{"id":1,"at":"2024-01-02T03:04:05+09:00"}', Me)
    assert me.at.utcoffset() == timedelta(hours=9)


def test_decode_body_ignores_unknown_keys() -> None:
    me = decode_body(b'{"id":1,"options":{},"brand_new_field":true}', Me)
    assert me.id == 1


def test_decode_body_null_payloads() -> None:
    assert decode_body(b"null", Tag) is None
    assert decode_body(b'{"data":null}', Tag, envelope="data") is None


def test_decode_body_unwraps_envelope() -> None:
    entry = decode_body(b'{"data":{"id":436694100,"description":"Meeting"}}', legacy.TimeEntry, envelope="data")
    assert entry.id == 436694100
    assert entry.description == "Meeting"


def test_decode_body_invalid_json_carries_raw_bytes() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_body(b"<html>oops</html>", Tag)
    assert exc_info.value.raw == b"<html>oops</html>"


def test_decode_body_shape_mismatch_reports_validation_errors() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_body(b'{"id":"not-a-number"}', Tag)
    assert exc_info.value.errors
    assert exc_info.value.errors[0]["loc"] == ("id",)
