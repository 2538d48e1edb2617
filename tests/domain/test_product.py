"""Unit tests for the Product entity."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductChanges
from catalog.domain.model.value_objects import Price


def _product(**overrides) -> Product:
    fields = {"id": "p-1", "name": "Widget", "price": Price.of("10.00")}
    fields.update(overrides)
    return Product(**fields)


class TestConstruction:

    def test_new_product_is_available(self):
        assert _product().available is True

    def test_name_is_trimmed(self):
        assert _product(name="  Widget  ").name == "Widget"

    def test_raw_price_is_coerced(self):
        assert _product(price="12.5").price == Price(Decimal("12.5"))

    def test_zero_price_allowed(self):
        assert _product(price=Price.of(0)).price.amount == Decimal("0")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(price=-1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            _product(name="   ")


class TestUpdateDetails:

    def test_updates_name_only(self):
        p = _product()
        p.update_details(name="Gadget")
        assert p.name == "Gadget"
        assert p.price == Price.of("10.00")

    def test_updates_price_only(self):
        p = _product()
        p.update_details(price=Price.of("20"))
        assert p.name == "Widget"
        assert p.price == Price.of("20")

    def test_no_arguments_changes_nothing(self):
        p = _product()
        p.update_details()
        assert p == _product()

    def test_negative_price_leaves_product_untouched(self):
        p = _product()
        with pytest.raises(ValidationError):
            p.update_details(name="Gadget", price=-5)
        assert p.name == "Widget"
        assert p.price == Price.of("10.00")

    def test_blank_name_leaves_product_untouched(self):
        p = _product()
        with pytest.raises(ValidationError, match="name cannot be empty"):
            p.update_details(name=" ", price=Price.of("99"))
        assert p.name == "Widget"
        assert p.price == Price.of("10.00")


class TestMarkUnavailable:

    def test_marks_unavailable(self):
        p = _product()
        p.mark_unavailable()
        assert p.available is False

    def test_is_idempotent(self):
        p = _product()
        p.mark_unavailable()
        p.mark_unavailable()
        assert p.available is False


class TestProductChanges:

    def test_empty(self):
        assert ProductChanges().is_empty

    def test_raw_price_is_coerced(self):
        assert ProductChanges(price="3.25").price == Price.of("3.25")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            ProductChanges(price=-5)
