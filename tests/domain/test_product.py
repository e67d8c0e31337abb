"""Unit tests for the Product aggregate and its availability rule."""

import pytest

from recordstore.domain.exceptions import InvalidStateError, ValidationError
from recordstore.domain.model.product import Product
from recordstore.domain.model.value_objects import Quantity


def _make_product(stock: int = 10, price: int = 100) -> Product:
    return Product(
        id=1, name="Widget", description="A widget", price=price, stock=stock, owner="acct-1"
    )


class TestProductAvailability:

    def test_available_when_stock_positive(self):
        assert _make_product(stock=1).is_available is True

    def test_unavailable_when_stock_zero(self):
        assert _make_product(stock=0).is_available is False

    def test_set_stock_to_zero_marks_unavailable(self):
        product = _make_product(stock=5)
        product.set_stock(0)
        assert product.stock == 0
        assert product.is_available is False

    def test_set_stock_restores_availability(self):
        product = _make_product(stock=0)
        product.set_stock(5)
        assert product.is_available is True

    def test_constructor_ignores_passed_availability(self):
        product = Product(
            id=1, name="W", description="", price=1, stock=0, owner="o", is_available=True
        )
        assert product.is_available is False


class TestProductValidation:

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="price cannot be negative"):
            _make_product(price=-1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="stock cannot be negative"):
            _make_product(stock=-1)

    def test_set_negative_stock_rejected_and_unchanged(self):
        product = _make_product(stock=3)
        with pytest.raises(ValidationError):
            product.set_stock(-2)
        assert product.stock == 3
        assert product.is_available is True

    def test_zero_price_accepted(self):
        assert _make_product(price=0).price == 0


class TestProductDeductStock:

    def test_deduct_reduces_stock(self):
        product = _make_product(stock=10)
        product.deduct_stock(Quantity(4))
        assert product.stock == 6
        assert product.is_available is True

    def test_deduct_everything_marks_unavailable(self):
        product = _make_product(stock=2)
        product.deduct_stock(Quantity(2))
        assert product.stock == 0
        assert product.is_available is False

    def test_deduct_more_than_stock_rejected(self):
        product = _make_product(stock=2)
        with pytest.raises(InvalidStateError, match="Insufficient stock"):
            product.deduct_stock(Quantity(3))
        assert product.stock == 2

    def test_price_for_quantity(self):
        assert _make_product(price=100).price_for(Quantity(3)) == 300


class TestEmptyProduct:

    def test_empty_has_sentinel_id(self):
        empty = Product.empty()
        assert empty.id == 0
        assert empty.exists is False
        assert empty.is_available is False
