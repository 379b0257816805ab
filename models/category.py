"""
models/category.py
------------------
Domain model for a product category (`pm_category` rows).
"""

from dataclasses import InitVar, dataclass
from typing import Any, Mapping, Optional

from models.base import Model


@dataclass
class Category(Model):
    """
    Represents a product family such as 'fruit' or 'vegetable'.

    Attributes:
        category_id: Database primary key (None for new records).
        category: The category name.
    """
    row: InitVar[Optional[Mapping[str, Any]]] = None
    category_id: Optional[int] = None
    category: Optional[str] = None

    def __post_init__(self, row: Optional[Mapping[str, Any]]) -> None:
        if row is not None:
            self.populate(row)

    def populate(self, row: Mapping[str, Any]) -> "Category":
        self.category_id = self._column(row, "categoryId")
        self.category = self._column(row, "category")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "categoryId": self.category_id,
            "category": self.category,
        }

    def __str__(self) -> str:
        return f"#{self.category_id} {self.category}"
