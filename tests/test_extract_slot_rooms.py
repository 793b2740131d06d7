import json

import pytest
import requests

from utility import extract_slot_rooms as dump


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Error")

    def json(self):
        return self.payload


ITEMS = [
    {"slot_roomId": "stage-2"},
    {"slot_roomId": "main-stage"},
    {"slot_roomId": None},
    {},
    {"slot_roomId": "stage-2"},
    {"slot_roomId": ""},
]


def test_unique_slot_rooms():
    assert dump.unique_slot_rooms(ITEMS) == ["main-stage", "stage-2"]


def test_extract_writes_json(monkeypatch, tmp_path):
    captured = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        captured["params"] = params
        return FakeResponse({"data": {"items": ITEMS}})

    monkeypatch.setattr(dump.requests, "get", fake_get)
    output = tmp_path / "slot-rooms.json"

    rooms = dump.extract_slot_rooms("devcon-7", str(output))

    assert rooms == ["main-stage", "stage-2"]
    assert captured["params"] == {"event": "devcon-7"}
    assert json.loads(output.read_text(encoding="utf-8")) == rooms
    assert output.read_text(encoding="utf-8").startswith('[\n  "main-stage"')


def test_main_reports_fetch_errors(monkeypatch, tmp_path):
    monkeypatch.setattr(dump.requests, "get", lambda *a, **kw: FakeResponse({}, status=500))

    assert dump.main(["-o", str(tmp_path / "out.json")]) == 1
    assert not (tmp_path / "out.json").exists()


def test_main_reports_write_errors(monkeypatch, tmp_path):
    monkeypatch.setattr(
        dump.requests, "get", lambda *a, **kw: FakeResponse({"data": {"items": ITEMS}})
    )

    assert dump.main(["-o", str(tmp_path / "missing" / "out.json")]) == 1
