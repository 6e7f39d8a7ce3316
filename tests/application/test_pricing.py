from decimal import Decimal

import pytest

from catalog.application.pricing import to_money
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money


class TestToMoney:

    @pytest.mark.parametrize(
        "price, expected",
        [
            ("12.50", 1250),
            (12.5, 1250),
            (10, 1000),
            (Decimal("0.005"), 1),
            ("19.994", 1999),
            ("0", 0),
        ],
    )
    def test_converts_to_minor_units(self, price, expected):
        assert to_money(price) == Money(expected)

    def test_currency_passed_through(self):
        assert to_money("1", "usd").currency == "USD"

    @pytest.mark.parametrize("price", ["abc", "", "NaN", "Infinity"])
    def test_garbage_rejected(self, price):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            to_money(price)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            to_money("-0.01")
