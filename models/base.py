"""
models/base.py
--------------
The capability shared by every catalog model: populate from a row, export
to a dict.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class Model(ABC):
    """
    Base class for records hydrated by a Mapper.

    Concrete models are dataclasses whose fields all default to None, so a
    bare instance can serve as the prototype for a query. Their first
    argument is an optional row that the new instance is populated from.
    """

    @abstractmethod
    def populate(self, row: Mapping[str, Any]) -> "Model":
        """Overwrite every field from `row` and return self."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the record keyed by its column names."""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Model":
        """Build a new instance populated from `row`."""
        return cls(row)

    @staticmethod
    def _column(row: Mapping[str, Any], name: str) -> Optional[Any]:
        """
        Look up a column by name, ignoring case.
        PostgreSQL folds unquoted identifiers, so `productId` comes back
        as `productid`.
        """
        if name in row:
            return row[name]
        lowered = name.lower()
        for key, value in row.items():
            if key.lower() == lowered:
                return value
        return None
