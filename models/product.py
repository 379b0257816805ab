"""
models/product.py
-----------------
Domain model for a catalog product (`pm_product` rows).
"""

from dataclasses import InitVar, dataclass
from typing import Any, Mapping, Optional

from models.base import Model


@dataclass
class Product(Model):
    """
    Represents a single product.

    Attributes:
        product_id: Database primary key (None for new records).
        label: Human-readable product name (e.g., 'apple').
        category_id: Foreign key into pm_category; the category itself is
            loaded separately through its own mapper.
        price: Unit price.

    Passing a row as the first argument populates the product from it.
    """
    row: InitVar[Optional[Mapping[str, Any]]] = None
    product_id: Optional[int] = None
    label: Optional[str] = None
    category_id: Optional[int] = None
    price: Optional[float] = None

    def __post_init__(self, row: Optional[Mapping[str, Any]]) -> None:
        if row is not None:
            self.populate(row)

    def populate(self, row: Mapping[str, Any]) -> "Product":
        self.product_id = self._column(row, "productId")
        self.label = self._column(row, "label")
        self.category_id = self._column(row, "categoryId")
        price = self._column(row, "price")
        self.price = float(price) if price is not None else None
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "label": self.label,
            "categoryId": self.category_id,
            "price": self.price,
        }

    def __str__(self) -> str:
        price = f"{self.price:.2f}" if self.price is not None else "-"
        return f"#{self.product_id} {self.label} ({price})"
