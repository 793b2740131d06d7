from datetime import datetime

import pytest
import requests

import session_fetcher
from session_fetcher import (
    duration_minutes,
    fetch_sessions,
    format_minutes,
    parse_sessions,
    session_day,
    speaker_names,
)

API_ITEM = {
    "sourceId": "XYZ123",
    "title": "Scaling Ethereum",
    "slot_start": "2024-11-12T03:00:00.000Z",
    "slot_end": "2024-11-12T03:25:00.000Z",
    "slot_roomId": "stage-2",
    "speakers": [{"name": "Alice", "id": "a"}, {"name": "Bob"}],
    "track": "Layer 2",
}


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Error")

    def json(self):
        return self.payload


def test_parse_converts_to_schedule_timezone():
    session = parse_sessions([API_ITEM], "Asia/Bangkok")[0]

    assert session.code == "XYZ123"
    assert session.room == "stage-2"
    assert (session.start.hour, session.start.minute) == (10, 0)
    assert session_day(session) == "2024-11-12"
    assert duration_minutes(session) == 25
    assert speaker_names(session) == "Alice, Bob"
    assert session.state == "confirmed"


def test_timezone_shift_can_change_the_day():
    item = dict(API_ITEM, slot_start="2024-11-12T18:00:00Z", slot_end="2024-11-12T19:00:00Z")

    session = parse_sessions([item], "Asia/Bangkok")[0]

    assert session_day(session) == "2024-11-13"


def test_naive_timestamps_are_kept_as_local():
    item = dict(API_ITEM, slot_start="2024-11-12T09:30:00", slot_end="2024-11-12T10:00:00")

    session = parse_sessions([item])[0]

    assert session.start == datetime(2024, 11, 12, 9, 30)


def test_missing_fields_default():
    session = parse_sessions([{"sourceId": None, "title": None, "slot_start": None, "speakers": None}])[0]

    assert session.code == ""
    assert session.title == ""
    assert session.room is None
    assert session_day(session) is None
    assert duration_minutes(session) == 0
    assert speaker_names(session) == ""


def test_null_speaker_names_become_empty():
    item = dict(API_ITEM, speakers=[{"name": None}, {"name": "Bob"}])

    session = parse_sessions([item])[0]

    assert [speaker.name for speaker in session.speakers] == ["", "Bob"]
    assert speaker_names(session) == ", Bob"


def test_fetch_sessions_issues_one_get(monkeypatch):
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append((url, params, headers))
        return FakeResponse({"data": {"items": [API_ITEM, dict(API_ITEM, sourceId="B")]}})

    monkeypatch.setattr(session_fetcher.requests, "get", fake_get)

    sessions = fetch_sessions(url="https://api.example.org/sessions", event="devcon-7", size=500)

    assert [s.code for s in sessions] == ["XYZ123", "B"]
    assert calls == [
        (
            "https://api.example.org/sessions",
            {"size": 500, "event": "devcon-7"},
            {"accept": "application/json"},
        )
    ]


def test_fetch_sessions_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(
        session_fetcher.requests, "get", lambda *a, **kw: FakeResponse({}, status=503)
    )

    with pytest.raises(requests.HTTPError):
        fetch_sessions()


def test_format_minutes():
    assert format_minutes(30.0) == "30 minutes"
    assert format_minutes(0) == "0 minutes"
    assert format_minutes(7.5) == "7.5 minutes"


def test_fetch_sessions_raises_on_payload_without_items(monkeypatch):
    monkeypatch.setattr(
        session_fetcher.requests, "get", lambda *a, **kw: FakeResponse({"error": "bad event"})
    )

    with pytest.raises(KeyError):
        fetch_sessions()
