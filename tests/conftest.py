from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class FakeCursor:
    def __init__(self, conn: "FakeConnection") -> None:
        self.conn = conn
        self.description = None
        self._rows: list = []
        self.closed = False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        for fragment, response in self.conn.responses:
            if fragment in sql:
                break
        else:
            raise AssertionError(f"unexpected query: {sql}")
        if isinstance(response, Exception):
            raise response
        columns, rows = response
        self.description = [(c, None, None, None, None, None, None) for c in columns]
        self._rows = list(rows)

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConnection:
    """
    Scripted DB-API connection. `responses` is a list of (sql fragment, response);
    the first fragment found in the statement wins. A response is either
    (columns, rows) or an exception instance to raise.
    """

    def __init__(self, responses=None) -> None:
        self.responses = list(responses or [])
        self.executed: list = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True

    def statements(self):
        return [sql for sql, _ in self.executed]


HEALTHY = [
    ("SELECT 1 AS ok", (["ok"], [(1,)])),
    ("SELECT now()", (["ts"], [("2026-10-19 12:00:00+00",)])),
]


@pytest.fixture
def fake_conn():
    def make(*responses):
        return FakeConnection(list(responses) + HEALTHY)

    return make
