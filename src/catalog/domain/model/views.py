"""Read models: projections assembled for presentation, never persisted."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product


@dataclass(frozen=True)
class CategoryItem:
    """A category with its resolved parent and direct children."""

    category: Category
    parent: Category | None = None
    children: list[Category] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryTree:
    """A category with its parent chain, one link per level."""

    category: Category
    parent: CategoryTree | None = None

    @property
    def ancestors(self) -> list[Category]:
        """Ancestors from the root down to the direct parent."""
        chain: list[Category] = []
        node = self.parent
        while node is not None:
            chain.append(node.category)
            node = node.parent
        chain.reverse()
        return chain

    @property
    def path(self) -> list[str]:
        return [c.title.value for c in self.ancestors] + [self.category.title.value]


@dataclass(frozen=True)
class ProductView:
    """A product together with the tree of the category it belongs to."""

    product: Product
    category_tree: CategoryTree


DEFAULT_PAGE = 1
DEFAULT_ITEMS_PER_PAGE = 30


@dataclass(frozen=True)
class Pagination:
    page: int = DEFAULT_PAGE
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    def __post_init__(self) -> None:
        if self.page <= 0:
            object.__setattr__(self, "page", DEFAULT_PAGE)
        if self.items_per_page <= 0:
            object.__setattr__(self, "items_per_page", DEFAULT_ITEMS_PER_PAGE)

    @staticmethod
    def from_raw(page: object, items_per_page: object) -> Pagination:
        """Build from untrusted input; anything that is not a positive int falls back."""
        return Pagination(_positive_int(page, DEFAULT_PAGE), _positive_int(items_per_page, DEFAULT_ITEMS_PER_PAGE))


def _positive_int(raw: object, default: int) -> int:
    try:
        value = int(str(raw))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def total_pages(total_items: int, items_per_page: int) -> int:
    if items_per_page <= 0:
        return 1
    return math.ceil(total_items / items_per_page)


@dataclass(frozen=True)
class CategoryPage:
    items: list[Category]
    total_items: int
    total_pages: int


@dataclass(frozen=True)
class ProductPage:
    items: list[Product]
    total_items: int
    total_pages: int
