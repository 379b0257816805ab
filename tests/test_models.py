"""Tests for the Product and Category domain models."""

from decimal import Decimal

import pytest

from models.base import Model
from models.category import Category
from models.product import Product


class TestProduct:
    """Product populate / to_dict."""

    def test_populate_from_row(self):
        """Should map every column onto its attribute."""
        product = Product().populate(
            {"productId": 1, "label": "apple", "categoryId": 1, "price": Decimal("0.15")}
        )

        assert product.product_id == 1
        assert product.label == "apple"
        assert product.category_id == 1
        assert product.price == pytest.approx(0.15)
        assert isinstance(product.price, float)

    def test_populate_returns_self(self):
        """Should return the same instance so calls can be chained."""
        product = Product()
        assert product.populate({"productId": 1}) is product

    def test_populate_folded_column_names(self):
        """Should read lower-cased column names returned by PostgreSQL."""
        product = Product().populate(
            {"productid": 4, "label": "carrot", "categoryid": 2, "price": 0.1}
        )

        assert product.product_id == 4
        assert product.category_id == 2

    def test_populate_overwrites_all_fields(self):
        """Should reset fields absent from a second row."""
        product = Product().populate(
            {"productId": 1, "label": "apple", "categoryId": 1, "price": 0.15}
        )
        product.populate({"productId": 2, "label": "pear"})

        assert product.product_id == 2
        assert product.label == "pear"
        assert product.category_id is None
        assert product.price is None

    def test_populate_is_idempotent(self):
        """Should give the same result when populated twice with one row."""
        row = {"productId": 3, "label": "banana", "categoryId": 1, "price": 0.25}
        once = Product().populate(row)
        twice = Product().populate(row).populate(row)
        assert once == twice

    def test_to_dict_uses_column_names(self):
        """Should export the record keyed by its column names."""
        product = Product(product_id=1, label="apple", category_id=1, price=0.15)

        assert product.to_dict() == {
            "productId": 1,
            "label": "apple",
            "categoryId": 1,
            "price": 0.15,
        }

    def test_round_trip_through_dict(self):
        """Should rebuild an equal product from its own dict."""
        product = Product(product_id=9, label="kiwi", category_id=1, price=0.4)
        assert Product.from_row(product.to_dict()) == product

    def test_constructed_from_row(self):
        """Should populate every field when built with a row argument."""
        product = Product({"productId": 1, "label": "apple", "categoryId": 1, "price": 0.15})

        assert product == Product(product_id=1, label="apple", category_id=1, price=0.15)

    def test_keyword_construction_ignores_row(self):
        """Should keep keyword fields when no row is given."""
        product = Product(label="apple")
        assert product.product_id is None
        assert product.label == "apple"

    def test_str(self):
        assert str(Product(product_id=1, label="apple", price=0.15)) == "#1 apple (0.15)"


class TestCategory:
    """Category populate / to_dict."""

    def test_populate_returns_populated_instance(self):
        """Should return itself, populated, from populate."""
        category = Category()
        result = category.populate({"categoryId": 2, "category": "vegetable"})

        assert result is category
        assert category.category_id == 2
        assert category.category == "vegetable"

    def test_constructed_from_row(self):
        """Should populate every field when built with a row argument."""
        category = Category({"categoryId": 2, "category": "vegetable"})

        assert category.category_id == 2
        assert category.category == "vegetable"

    def test_to_dict(self):
        category = Category(category_id=1, category="fruit")
        assert category.to_dict() == {"categoryId": 1, "category": "fruit"}

    def test_from_row(self):
        """Should build a populated instance in one call."""
        category = Category.from_row({"categoryid": 1, "category": "fruit"})
        assert category == Category(category_id=1, category="fruit")


class TestModelBase:
    def test_model_is_abstract(self):
        """Should refuse to instantiate the bare capability."""
        with pytest.raises(TypeError):
            Model()
