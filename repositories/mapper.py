"""
repositories/mapper.py
----------------------
Generic data mapper binding model prototypes to a table gateway.
"""

from typing import Any, Optional, TypeVar

from db.errors import StateError
from db.table_gateway import DbTable
from models.base import Model
from utils.logger import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=Model)


class Mapper:
    """
    Converts gateway rows into model instances and forwards writes.

    A Mapper starts unbound and becomes bound once a gateway is set, either
    through the constructor or `set_db_table`. Every operation requires a
    bound gateway. The prototype passed to a read only decides which model
    type rows are hydrated into.
    """

    def __init__(self, db_table: Optional[DbTable] = None):
        self._db_table: Optional[DbTable] = None
        if db_table is not None:
            self.set_db_table(db_table)

    def set_db_table(self, db_table: DbTable) -> "Mapper":
        if not isinstance(db_table, DbTable):
            raise TypeError(f"Expected a DbTable, got {type(db_table).__name__}")
        self._db_table = db_table
        return self

    def get_db_table(self) -> DbTable:
        """
        Return the bound gateway.

        Raises:
            StateError: If no gateway was set.
        """
        if self._db_table is None:
            raise StateError("DbTable was not set")
        return self._db_table

    # ── READ ──────────────────────────────────────────────

    def find(self, prototype: M, value: Any, primary_key: str = "id") -> list[M]:
        """
        Fetch models whose `primary_key` column equals `value`.

        Returns:
            New instances of the prototype's type, in row order.
        """
        rows = self.get_db_table().find(value, primary_key)
        return self._hydrate(prototype, rows)

    def find_row(
        self, prototype: M, where: Optional[str] = None, order: Optional[str] = None
    ) -> Optional[M]:
        """
        Populate `prototype` in place from the first matching row.

        Returns:
            The populated prototype, or None when nothing matched. The
            prototype is left untouched in that case.
        """
        row = self.get_db_table().find_row(where, order)
        if row is None:
            logger.debug(f"No {type(prototype).__name__} matched where={where!r}")
            return None
        return prototype.populate(row)

    def find_all(
        self,
        prototype: M,
        where: Optional[str] = None,
        order: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[M]:
        """
        Fetch all models matching optional conditions.

        Returns:
            New instances of the prototype's type, in row order.
        """
        rows = self.get_db_table().find_all(where, order, limit, offset)
        return self._hydrate(prototype, rows)

    # ── WRITE ─────────────────────────────────────────────

    def update(self, set_clause: Optional[str], where: Optional[str] = None) -> int:
        return self.get_db_table().update(set_clause, where)

    def delete(self, where: Optional[str] = None) -> int:
        return self.get_db_table().delete(where)

    def insert(self, column_names: Optional[str], values: Optional[str]) -> int:
        return self.get_db_table().insert(column_names, values)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _hydrate(prototype: M, rows: list[dict]) -> list[M]:
        model_type = type(prototype)
        return [model_type().populate(row) for row in rows]
