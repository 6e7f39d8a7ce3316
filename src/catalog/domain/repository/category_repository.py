"""Abstract repository for the Category aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from catalog.domain.model.category import Category
from catalog.domain.model.views import CategoryItem, CategoryPage, CategoryTree

CATEGORY_ORDER_FIELDS = ("title", "level", "product_count", "created_at")


class CategoryRepository(ABC):

    @abstractmethod
    def next_identity(self) -> UUID:
        """Allocate a fresh category id."""

    @abstractmethod
    def find_by_id(self, category_id: UUID) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def find_item_by_id(self, category_id: UUID) -> CategoryItem | None:
        """Return the category with its parent and children resolved."""

    @abstractmethod
    def find_tree_by_id(self, category_id: UUID) -> CategoryTree | None:
        """Return the category with its full parent chain resolved."""

    @abstractmethod
    def find_descendants(self, category_id: UUID) -> list[Category]:
        """Return every descendant, parents before children."""

    @abstractmethod
    def has_children(self, category_id: UUID) -> bool:
        """True if at least one category has *category_id* as parent."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def list(
        self,
        level: int | None,
        order_by: dict[str, str],
        page: int,
        items_per_page: int,
    ) -> CategoryPage:
        """Return one page of categories, optionally restricted to a level."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category."""

    @abstractmethod
    def delete(self, category: Category) -> None:
        """Remove a category."""
