"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.pagination import (
    PaginatedResult,
    check_page_bounds,
    last_page_for,
    offset_for,
)
from catalog.domain.model.value_objects import Price


# ── Price ────────────────────────────────────────────────────────────────────


class TestPrice:

    def test_creation(self):
        assert Price(Decimal("10.50")).amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Price.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Price.of(10).amount == Decimal("10")

    def test_of_factory_from_float(self):
        assert Price.of(0.1).amount == Decimal("0.1")

    def test_four_decimal_places_allowed(self):
        assert Price.of("1.2345").amount == Decimal("1.2345")

    def test_five_decimal_places_rejected(self):
        with pytest.raises(ValidationError, match="at most 4 decimal places"):
            Price.of("1.23456")

    def test_trailing_zeros_do_not_count_as_decimal_places(self):
        assert Price.of("1.50000").amount == Decimal("1.5")

    def test_large_amount_accepted(self):
        price = Price.of("1e30")
        assert price.amount == Decimal("1e30")
        assert str(price) == "1" + "0" * 30 + ".00"

    def test_large_amount_with_too_many_decimal_places_rejected(self):
        with pytest.raises(ValidationError, match="at most 4 decimal places"):
            Price.of("1" + "0" * 30 + ".00001")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Price(Decimal("-1"))

    def test_non_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Price(10)

    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity", True])
    def test_garbage_rejected(self, raw):
        with pytest.raises(ValidationError):
            Price.of(raw)

    def test_str_formatting(self):
        assert str(Price.of("15")) == "15.00"
        assert str(Price.of("9.5")) == "9.50"
        assert str(Price.of("1.2345")) == "1.2345"

    def test_float(self):
        assert float(Price.of("2.5")) == 2.5


# ── Pagination ───────────────────────────────────────────────────────────────


class TestPagination:

    @pytest.mark.parametrize(
        "total, limit, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (2, 1, 2)],
    )
    def test_last_page_is_ceiling(self, total, limit, expected):
        assert last_page_for(total, limit) == expected

    def test_offset(self):
        assert offset_for(1, 10) == 0
        assert offset_for(3, 5) == 10

    def test_build(self):
        result = PaginatedResult.build([], total=25, page=4, limit=10)
        assert result.data == []
        assert (result.meta.total, result.meta.page, result.meta.last_page) == (25, 4, 3)

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, 5)])
    def test_bounds_rejected(self, page, limit):
        with pytest.raises(ValidationError):
            check_page_bounds(page, limit)
