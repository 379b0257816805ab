"""
db/table_gateway.py
-------------------
Table gateways: one class per table, each turning SQL clause fragments into
complete statements against its own table.

Only `find` binds its value as a parameter. Every other fragment (`where`,
`order`, `set_clause`, `column_names`, `values`) is inserted verbatim into
the statement text and must come from trusted code.
"""

from typing import Any, Callable, Mapping, Optional, Union

from config import DbConfig
from db.connection import connect as default_connect
from db.errors import ArgumentError, StateError
from utils.logger import get_logger

logger = get_logger(__name__)

Row = dict[str, Any]


class DbTable:
    """
    Gateway for a single table.

    The connection is opened through `connect` on the first query and reused
    for the gateway's lifetime. Subclasses only set `table_name`.
    """

    table_name: str = ""

    def __init__(
        self,
        config: Optional[Union[DbConfig, Mapping[str, Any]]] = None,
        connect: Callable[[DbConfig], Any] = default_connect,
    ):
        self._config: Optional[DbConfig] = None
        self._connection = None
        self._connect = connect
        if config is not None:
            self.set_config(config)

    # ── CONFIGURATION ─────────────────────────────────────

    def set_config(self, config: Union[DbConfig, Mapping[str, Any]]) -> "DbTable":
        """
        Validate and store the connection settings.
        A connection opened under previous settings is closed.

        Raises:
            ConfigError: If host, dbname, username or password is missing.
        """
        self._config = DbConfig.from_mapping(config)
        if self._connection is not None:
            self.close()
        return self

    def get_config(self) -> Optional[DbConfig]:
        return self._config

    def get_connection(self):
        """
        Return the cached connection, opening it on first use.

        Raises:
            StateError: If no configuration has been set.
        """
        if self._config is None:
            raise StateError("Connection details are not set yet")
        if self._connection is None:
            self._connection = self._connect(self._config)
        return self._connection

    def close(self) -> None:
        """Close the cached connection; the next query reconnects."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.info(f"Closed connection for {self.table_name}")

    # ── READ ──────────────────────────────────────────────

    def find(self, value: Any, primary_key: str = "id") -> list[Row]:
        """
        Fetch every row whose `primary_key` column equals `value`.

        Args:
            value: The value searched for; bound as a query parameter.
            primary_key: Name of the column to match (default: 'id').

        Returns:
            List of row dicts, possibly empty.
        """
        sql = f"SELECT * FROM {self._table()} WHERE {primary_key} = %s"
        return self._fetch(sql, (value,), many=True)

    def find_row(self, where: Optional[str] = None, order: Optional[str] = None) -> Optional[Row]:
        """
        Fetch the first row matching optional conditions.

        Returns:
            A row dict or None if nothing matches.
        """
        sql = self._select(where, order)
        return self._fetch(sql, None, many=False)

    def find_all(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Row]:
        """
        Fetch all rows matching optional conditions.

        Args:
            where: Raw WHERE clause, without the keyword.
            order: Raw ORDER BY clause, without the keyword.
            limit: Maximum number of rows.
            offset: Rows to skip; only applied with `limit` (defaults to 0).

        Returns:
            List of row dicts in the order the database returns them.
        """
        sql = self._select(where, order)
        if limit is not None:
            if offset is None:
                offset = 0
            sql += f" LIMIT {int(limit)} OFFSET {int(offset)}"
        return self._fetch(sql, None, many=True)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, set_clause: Optional[str], where: Optional[str] = None) -> int:
        """
        Update one or more rows.

        Args:
            set_clause: Raw SET clause, e.g. "price = 0.24".
            where: Raw WHERE clause; every row is updated when omitted.

        Returns:
            Number of rows updated.

        Raises:
            ArgumentError: If `set_clause` is missing.
        """
        if not set_clause:
            raise ArgumentError("Missing column(s) to be modified and their corresponding value(s)")
        sql = f"UPDATE {self._table()} SET {set_clause}"
        if where is not None:
            sql += f" WHERE {where}"
        return self._write(sql, "Updated")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, where: Optional[str] = None) -> int:
        """
        Delete one or more rows.

        Returns:
            Number of rows deleted.
        """
        sql = f"DELETE FROM {self._table()}"
        if where is not None:
            sql += f" WHERE {where}"
        return self._write(sql, "Deleted")

    # ── CREATE ────────────────────────────────────────────

    def insert(self, column_names: Optional[str], values: Optional[str]) -> int:
        """
        Insert a row.

        Args:
            column_names: Comma-separated column list, e.g. "label, categoryId, price".
            values: Comma-separated SQL literals, e.g. "'pineapple', 1, 0.95".

        Returns:
            Number of rows inserted.

        Raises:
            ArgumentError: If either argument is missing.
        """
        if not column_names:
            raise ArgumentError("Missing column names for data to be inserted in")
        if not values:
            raise ArgumentError("Missing values to be inserted")
        sql = f"INSERT INTO {self._table()} ({column_names}) VALUES ({values})"
        return self._write(sql, "Inserted")

    # ── HELPERS ───────────────────────────────────────────

    def _table(self) -> str:
        if not self.table_name:
            raise StateError(f"{type(self).__name__} has no table name")
        return self.table_name

    def _select(self, where: Optional[str], order: Optional[str]) -> str:
        sql = f"SELECT * FROM {self._table()}"
        if where is not None:
            sql += f" WHERE {where}"
        if order is not None:
            sql += f" ORDER BY {order}"
        return sql

    def _fetch(self, sql: str, params: Optional[tuple], many: bool):
        conn = self.get_connection()
        logger.debug(f"{sql} {params or ''}".rstrip())
        try:
            with conn.cursor() as cur:
                if params is None:
                    cur.execute(sql)
                else:
                    cur.execute(sql, params)
                if many:
                    result = [dict(r) for r in cur.fetchall()]
                else:
                    row = cur.fetchone()
                    result = dict(row) if row is not None else None
            # End the implicit transaction so the cached connection holds no locks.
            conn.commit()
            return result
        except Exception as e:
            conn.rollback()
            logger.error(f"Query on {self.table_name} failed: {e}")
            raise

    def _write(self, sql: str, verb: str) -> int:
        conn = self.get_connection()
        logger.debug(sql)
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                count = cur.rowcount
            conn.commit()
            logger.info(f"{verb} {count} row(s) in {self.table_name}")
            return count
        except Exception as e:
            conn.rollback()
            logger.error(f"Write on {self.table_name} failed: {e}")
            raise


class ProductTable(DbTable):
    """Gateway for the pm_product table."""

    table_name = "pm_product"


class CategoryTable(DbTable):
    """Gateway for the pm_category table."""

    table_name = "pm_category"
