"""
services/catalog_service.py
----------------------------
Business logic for browsing and maintaining the product catalog.
Orchestrates the product and category mappers and builds the SQL fragments
they expect.
"""

import math
from typing import Optional

from models.category import Category
from models.product import Product
from repositories.mapper import Mapper
from utils.logger import get_logger

logger = get_logger(__name__)


def quote(value: str) -> str:
    """Render `value` as a single-quoted SQL string literal."""
    return "'" + str(value).replace("'", "''") + "'"


def price_literal(price: float) -> str:
    """
    Render `price` as a numeric SQL literal.

    Raises:
        ValueError: If the price is not a finite number.
    """
    value = float(price)
    if not math.isfinite(value):
        raise ValueError(f"Price must be a finite number, got {price!r}")
    return str(value)


class CatalogService:
    """
    Handles catalog queries and price/stock maintenance.

    Typical flow:
        1. Resolve a category by name.
        2. Filter products by its id.
        3. Update, remove or add products by label.
    """

    def __init__(self, product_mapper: Mapper, category_mapper: Mapper):
        self.products = product_mapper
        self.categories = category_mapper

    # ── QUERIES ───────────────────────────────────────────

    def list_products(self) -> list[Product]:
        """Return every product in natural table order."""
        return self.products.find_all(Product())

    def list_categories(self) -> list[Category]:
        return self.categories.find_all(Category())

    def get_category(self, name: str) -> Optional[Category]:
        return self.categories.find_row(Category(), f"category = {quote(name)}")

    def get_product(self, label: str) -> Optional[Product]:
        return self.products.find_row(Product(), f"label = {quote(label)}")

    def list_products_in_category(self, name: str) -> list[Product]:
        """
        List the products belonging to the category called `name`.

        Returns:
            Matching products, or an empty list if the category is unknown.
        """
        category = self.get_category(name)
        if category is None:
            logger.warning(f"Unknown category: {name}")
            return []
        return self.products.find(Product(), category.category_id, "categoryId")

    # ── MAINTENANCE ───────────────────────────────────────

    def set_price(self, label: str, price: float) -> tuple[Optional[float], Optional[float]]:
        """
        Change the price of every product labelled `label`.

        Returns:
            (old_price, new_price) as read before and after the update; either
            is None when no such product exists.
        """
        literal = price_literal(price)
        before = self.get_product(label)
        self.products.update(f"price = {literal}", f"label = {quote(label)}")
        after = self.get_product(label)
        old = before.price if before else None
        new = after.price if after else None
        logger.info(f"Price of {label!r}: {old} -> {new}")
        return old, new

    def remove_product(self, label: str) -> int:
        """Delete products labelled `label`; returns the number removed."""
        removed = self.products.delete(f"label = {quote(label)}")
        if removed:
            logger.info(f"Removed {removed} product(s) labelled {label!r}")
        return removed

    def add_product(self, label: str, category_id: Optional[int], price: float) -> int:
        literal = price_literal(price)
        category = "NULL" if category_id is None else str(int(category_id))
        return self.products.insert(
            "label, categoryId, price",
            f"{quote(label)}, {category}, {literal}",
        )

    # ── FORMATTING ────────────────────────────────────────

    @staticmethod
    def format_products(products: list[Product]) -> str:
        """Render one line per product for console output."""
        lines = [
            f'  - Label: "{p.label}", categoryId: "{p.category_id}", price: "{p.price}"'
            for p in products
        ]
        return "\n".join(lines) if lines else "  (no products)"
