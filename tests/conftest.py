"""Shared fixtures: an in-memory stand-in for a psycopg2 connection."""

import pytest

from config import DbConfig
from db.table_gateway import CategoryTable, ProductTable

VALID_CONFIG = {
    "host": "localhost",
    "dbname": "phpmentoring",
    "username": "phpmentoring",
    "password": "gophp",
}


class FakeCursor:
    """Records statements and serves the rows queued on its connection."""

    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.rowcount = -1
        self._rows: list = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.error is not None:
            raise self.conn.error
        self._rows = list(self.conn.rows)
        self.rowcount = self.conn.rowcount

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self):
        self.rows: list = []
        self.rowcount = 0
        self.error = None
        self.executed: list = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeConnector:
    """Connection provider that hands out FakeConnections and counts calls."""

    def __init__(self):
        self.configs: list[DbConfig] = []
        self.connections: list[FakeConnection] = []

    def __call__(self, config: DbConfig) -> FakeConnection:
        self.configs.append(config)
        conn = FakeConnection()
        self.connections.append(conn)
        return conn

    @property
    def last(self) -> FakeConnection:
        return self.connections[-1]


@pytest.fixture
def connector() -> FakeConnector:
    return FakeConnector()


@pytest.fixture
def product_table(connector) -> ProductTable:
    return ProductTable(VALID_CONFIG, connect=connector)


@pytest.fixture
def category_table(connector) -> CategoryTable:
    return CategoryTable(VALID_CONFIG, connect=connector)


@pytest.fixture
def product_conn(product_table) -> FakeConnection:
    """The connection behind `product_table`, opened eagerly."""
    return product_table.get_connection()
