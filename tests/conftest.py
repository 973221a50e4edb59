"""Shared fixtures: in-memory stand-ins for asyncpg connections.

FakeConnection implements the subset of the asyncpg connection API used
by sqlrepo (is_closed, close, transaction, prepare) and records calls so
tests can assert on the SQL sent and on transaction outcomes.
"""

from collections import namedtuple
from typing import Any, Dict, List, Optional

import pytest

from sqlrepo.entity import clear_registry

Attribute = namedtuple("Attribute", ["name", "type"])


class FakeTransaction:
    def __init__(self, isolation: Optional[str] = None):
        self.isolation = isolation
        self.state = "new"
        # step name -> exception raised by that step
        self.failures: Dict[str, Exception] = {}

    async def _step(self, name: str, state: str) -> None:
        if name in self.failures:
            raise self.failures[name]
        self.state = state

    async def start(self):
        await self._step("start", "started")

    async def commit(self):
        await self._step("commit", "committed")

    async def rollback(self):
        await self._step("rollback", "rolled_back")


class FakePreparedStatement:
    def __init__(self, columns: List[str], rows: List[Dict[str, Any]], error: Optional[Exception] = None):
        self._columns = columns
        self._rows = rows
        self._error = error
        self.fetch_args = None
        self.fetch_timeout = None

    def get_attributes(self):
        return tuple(Attribute(name, None) for name in self._columns)

    async def fetchrow(self, *args, timeout=None):
        self.fetch_args = args
        self.fetch_timeout = timeout
        if self._error is not None:
            raise self._error
        return self._rows[0] if self._rows else None


class FakeConnection:
    """Records statements; returns the configured columns and rows."""

    def __init__(self, columns: Optional[List[str]] = None, rows: Optional[List[Dict[str, Any]]] = None):
        self.columns = columns or []
        self.rows = rows or []
        self.error: Optional[Exception] = None
        self.closed = False
        self.close_calls = 0
        self.prepared: List[str] = []
        self.transactions: List[FakeTransaction] = []
        self.last_statement: Optional[FakePreparedStatement] = None

    def is_closed(self) -> bool:
        return self.closed

    async def close(self):
        self.close_calls += 1
        self.closed = True

    def transaction(self, isolation: Optional[str] = None) -> FakeTransaction:
        tx = FakeTransaction(isolation=isolation)
        self.transactions.append(tx)
        return tx

    async def prepare(self, sql: str, timeout=None):
        self.prepared.append(sql)
        self.last_statement = FakePreparedStatement(self.columns, self.rows, self.error)
        return self.last_statement


@pytest.fixture(autouse=True)
def _fresh_entity_registry():
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def make_conn():
    return FakeConnection


@pytest.fixture
def fake_conn():
    return FakeConnection()
