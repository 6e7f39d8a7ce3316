"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


class Unset:
    """Type of the ``UNSET`` marker: "field omitted" in partial updates, distinct from ``None``."""

    _instance: Unset | None = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


@dataclass(frozen=True)
class CountDrift:
    """One category whose stored product count did not match reality."""

    category_id: UUID
    title: str
    recorded: int
    actual: int


@dataclass(frozen=True)
class RecountReport:
    """Output of a product-count reconciliation run."""

    checked: int
    drifts: list[CountDrift] = field(default_factory=list)
    applied: bool = True

    @property
    def is_clean(self) -> bool:
        return not self.drifts
