"""Ordering and paging rules shared by every repository implementation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from catalog.domain.model.views import total_pages

T = TypeVar("T")

DEFAULT_ORDER = {"created_at": "DESC"}


def normalize_order(order_by: dict[str, str] | None, allowed: Sequence[str]) -> list[tuple[str, bool]]:
    """Keep whitelisted fields only; anything but DESC sorts ascending.

    Returns ``(field, descending)`` pairs in priority order.
    """
    requested = order_by or DEFAULT_ORDER
    pairs: list[tuple[str, bool]] = []
    for name, direction in requested.items():
        if name not in allowed:
            continue
        pairs.append((name, str(direction).strip().upper() == "DESC"))
    return pairs


def sort_items(
    items: list[T],
    order: list[tuple[str, bool]],
    key_for: Callable[[T, str], Any],
) -> list[T]:
    """Stable multi-key sort: apply the lowest-priority key first."""
    result = list(items)
    for name, descending in reversed(order):
        result.sort(key=lambda item: key_for(item, name), reverse=descending)
    return result


def paginate(items: list[T], page: int, items_per_page: int) -> tuple[list[T], int, int]:
    """Slice one page out of *items*; returns ``(page_items, total, pages)``."""
    total = len(items)
    offset = max(0, (page - 1) * items_per_page)
    return items[offset:offset + items_per_page], total, total_pages(total, items_per_page)
