from datetime import datetime

import pytest

from session_fetcher import Session, Speaker


class FakeSheetsClient:
    """In-memory stand-in for SheetsClient that records every call."""

    def __init__(self, tabs=None, values=None):
        self.tabs = dict(tabs or {})
        self.values = values or {}
        self.calls = []
        self._next_id = 1000

    def sheet_id(self, title):
        return self.tabs.get(title)

    def sheet_exists(self, title):
        return title in self.tabs

    def add_sheet(self, title):
        self.calls.append(("add_sheet", title))
        self.tabs[title] = self._new_id()

    def clear(self, rng):
        self.calls.append(("clear", rng))

    def get_values(self, rng):
        self.calls.append(("get_values", rng))
        return self.values.get(rng, [])

    def update_values(self, rng, values):
        self.calls.append(("update_values", rng, values))

    def batch_update_values(self, data):
        self.calls.append(("batch_update_values", data))

    def batch_update(self, requests):
        if requests:
            self.calls.append(("batch_update", requests))

    def copy_sheet(self, sheet_id):
        self.calls.append(("copy_sheet", sheet_id))
        return self._new_id()

    def _new_id(self):
        self._next_id += 1
        return self._next_id

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


def make_session(code, room, start, end, title=None, speakers=("Alice",)):
    return Session(
        code=code,
        title=title or f"Talk {code}",
        start=start,
        end=end,
        room=room,
        speakers=[Speaker(name=name) for name in speakers],
    )


@pytest.fixture
def fake_client():
    return FakeSheetsClient()


@pytest.fixture
def day_sessions():
    return [
        make_session("B2", "stage-1", datetime(2024, 11, 12, 11, 0), datetime(2024, 11, 12, 11, 10)),
        make_session("A1", "stage-1", datetime(2024, 11, 12, 10, 0), datetime(2024, 11, 12, 10, 30), speakers=("Alice", "Bob")),
        make_session("C3", "main-stage", datetime(2024, 11, 12, 9, 0), datetime(2024, 11, 12, 9, 20)),
        make_session("D4", "stage-1", datetime(2024, 11, 13, 10, 0), datetime(2024, 11, 13, 10, 30)),
        make_session("E5", "unknown-room", datetime(2024, 11, 12, 10, 0), datetime(2024, 11, 12, 10, 30)),
    ]
