"""
Unit tests for Product entity and TopStockSelector.
"""

import pytest

from core.domain.exceptions import ValidationError
from products.domain.product import Product
from products.domain.services import TopStockSelector


def _product(product_id, stock, office_id):
    return Product.create(
        name=f"P{product_id}", stock=stock, office_id=office_id, product_id=product_id
    )


class TestProduct:
    """Tests for Product entity."""

    def test_create_normalizes_name(self):
        product = Product.create(name=" widget ", stock=0, office_id=1)

        assert product.name == "WIDGET"
        assert product.stock == 0

    def test_rejects_negative_stock(self):
        with pytest.raises(ValidationError, match="Product stock cannot be negative"):
            Product.create(name="Widget", stock=-1, office_id=1)

    def test_rejects_missing_stock(self):
        with pytest.raises(ValidationError):
            Product.create(name="Widget", stock=None, office_id=1)

    def test_requires_office(self):
        with pytest.raises(ValidationError, match="Office id cannot be null"):
            Product.create(name="Widget", stock=1, office_id=None)


class TestTopStockSelector:
    """Tests for TopStockSelector."""

    def test_one_product_per_office(self):
        products = [_product(1, 10, office_id=1), _product(2, 30, office_id=1), _product(3, 5, 2)]

        top = TopStockSelector.select(products)

        assert [p.id for p in top] == [2, 3]

    def test_ties_go_to_lowest_id_whatever_the_order(self):
        products = [_product(9, 7, 1), _product(4, 7, 1), _product(6, 7, 1)]

        assert [p.id for p in TopStockSelector.select(products)] == [4]
        assert [p.id for p in TopStockSelector.select(reversed(products))] == [4]

    def test_ordered_by_office_id(self):
        products = [_product(1, 1, 5), _product(2, 1, 3), _product(3, 1, 4)]

        assert [p.office_id for p in TopStockSelector.select(products)] == [3, 4, 5]

    def test_zero_stock_still_counts(self):
        assert [p.id for p in TopStockSelector.select([_product(1, 0, 1)])] == [1]

    def test_no_products(self):
        assert TopStockSelector.select([]) == []

    def test_outranks(self):
        assert TopStockSelector.outranks(_product(2, 5, 1), _product(1, 4, 1))
        assert not TopStockSelector.outranks(_product(2, 4, 1), _product(1, 4, 1))
        assert TopStockSelector.outranks(_product(1, 4, 1), _product(2, 4, 1))
