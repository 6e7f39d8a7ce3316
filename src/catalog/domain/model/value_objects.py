"""Value Objects shared across the catalog domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount stored as an integer count of minor units.

    ``Money(1250)`` is 12.50 in the given currency. Conversion from
    decimal prices happens in the application layer, never here.
    """

    amount: int
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError("Money amount cannot be negative.")
        currency = (self.currency or "").strip().upper()
        if not currency:
            raise ValidationError("Currency cannot be empty.")
        object.__setattr__(self, "currency", currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount // 100}.{self.amount % 100:02d} {self.currency}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def from_int(amount: int, currency: str = "EUR") -> Money:
        return Money(amount, currency)


_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class Slug:
    """URL-safe identifier derived from a title."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise ValidationError("Slug cannot be empty.")
        if not _SLUG_PATTERN.match(normalized):
            raise ValidationError("Slug format is invalid.")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Bounded text values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _BoundedText:
    """Trimmed text whose length must stay within ``[MIN, MAX]``."""

    value: str

    LABEL = "Text"
    MIN_LENGTH = 2
    MAX_LENGTH = 100

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip()
        if not normalized:
            raise ValidationError(f"{self.LABEL} cannot be empty.")
        if len(normalized) < self.MIN_LENGTH:
            raise ValidationError(
                f"{self.LABEL} must be at least {self.MIN_LENGTH} characters long."
            )
        if len(normalized) > self.MAX_LENGTH:
            raise ValidationError(
                f"{self.LABEL} must be at most {self.MAX_LENGTH} characters long."
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryTitle(_BoundedText):
    LABEL = "Category title"


@dataclass(frozen=True)
class CategoryDescription(_BoundedText):
    LABEL = "Category description"
    MAX_LENGTH = 1000

    @classmethod
    def from_optional(cls, value: str | None) -> CategoryDescription | None:
        """Blank or missing descriptions mean "no description"."""
        if value is None or not value.strip():
            return None
        return cls(value)


@dataclass(frozen=True)
class ProductTitle(_BoundedText):
    LABEL = "Product title"


@dataclass(frozen=True)
class ProductSubtitle(_BoundedText):
    LABEL = "Product subtitle"
    MAX_LENGTH = 150


@dataclass(frozen=True)
class ProductDescription(_BoundedText):
    LABEL = "Product description"
    MAX_LENGTH = 1000


@dataclass(frozen=True)
class ProductImage:
    """Stored image file name plus the time it was last replaced."""

    file_name: str | None = None
    updated_at: datetime | None = None

    def with_file(self, file_name: str | None, now: datetime) -> ProductImage:
        return replace(self, file_name=file_name, updated_at=now)
