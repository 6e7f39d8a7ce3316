"""Price conversion at the application boundary.

Prices arrive as decimal currency units (``12.5``) and are stored as
integer minor units (``1250``). Handlers call ``to_money``; entities only
ever see ``Money``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money

_HUNDRED = Decimal(100)


def to_money(price: str | float | int | Decimal, currency: str = "EUR") -> Money:
    """Convert a decimal price to ``Money``, rounding half-up to the cent."""
    try:
        amount = Decimal(str(price))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {price!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid money amount: {price!r}")
    minor = (amount * _HUNDRED).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return Money.from_int(int(minor), currency)
