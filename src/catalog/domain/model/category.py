"""Category aggregate: a node of the catalog tree.

The tree is an adjacency structure: every category stores its parent id
and a denormalised ``level``. The number of products assigned to the
category is kept in ``product_count`` and maintained by the application
handlers, never recomputed at read time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from catalog.domain.exceptions import CatalogDomainException, ValidationError
from catalog.domain.model.value_objects import CategoryDescription, CategoryTitle, Slug


@dataclass(eq=False)
class Category:
    """Aggregate root for catalog categories.

    Use ``Category.create()`` for new categories. The ``__init__`` is
    what repositories use to reconstitute persisted state, so it only
    checks the numeric invariants.

    Invariants:
    - ``level`` is 0 for a root, ``parent.level + 1`` otherwise
    - ``product_count`` is never negative
    - a category is never its own parent
    """

    id: UUID
    title: CategoryTitle
    slug: Slug
    created_at: datetime
    updated_at: datetime
    description: CategoryDescription | None = None
    parent_id: UUID | None = None
    product_count: int = 0
    level: int = 0
    version: int = 0

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValidationError("Category level must be positive.")
        if self.product_count < 0:
            raise ValidationError("Product count cannot be negative.")
        if self.parent_id is not None and self.parent_id == self.id:
            raise CatalogDomainException("Category cannot be its own parent.")

    # --- Factory (used for NEW categories only) -------------------------------

    @staticmethod
    def create(
        id: UUID,
        title: CategoryTitle,
        slug: Slug,
        now: datetime,
        parent: Category | None = None,
        description: CategoryDescription | None = None,
    ) -> Category:
        return Category(
            id=id,
            title=title,
            slug=slug,
            created_at=now,
            updated_at=now,
            description=description,
            parent_id=parent.id if parent is not None else None,
            product_count=0,
            level=_level_under(parent),
        )

    # --- Mutations ------------------------------------------------------------

    def rename(self, title: CategoryTitle, slug: Slug, now: datetime) -> None:
        """Title and slug always change together."""
        self.title = title
        self.slug = slug
        self.touch(now)

    def describe(self, description: CategoryDescription | None, now: datetime) -> None:
        self.description = description
        self.touch(now)

    def move_to(self, parent: Category | None, now: datetime) -> None:
        """Re-attach under *parent* (or to the root when ``None``).

        Descendants keep their parent ids but their levels become stale;
        the caller re-levels them with ``relevel``.
        """
        if parent is not None and parent.id == self.id:
            raise CatalogDomainException("Category cannot be its own parent.")
        self.parent_id = parent.id if parent is not None else None
        self.level = _level_under(parent)
        self.touch(now)

    def relevel(self, parent_level: int | None, now: datetime) -> bool:
        """Recompute ``level`` from the parent's level. Returns True if it changed."""
        level = 0 if parent_level is None else parent_level + 1
        if level == self.level:
            return False
        self.level = level
        self.touch(now)
        return True

    def increase_product_count(self, now: datetime) -> None:
        self.product_count += 1
        self.touch(now)

    def decrease_product_count(self, now: datetime) -> None:
        if self.product_count == 0:
            raise ValidationError("Product count cannot be negative.")
        self.product_count -= 1
        self.touch(now)

    def reset_product_count(self, count: int, now: datetime) -> None:
        """Overwrite the counter with a recomputed value (reconciliation only)."""
        if count < 0:
            raise ValidationError("Product count cannot be negative.")
        self.product_count = count
        self.touch(now)

    def delete(self, now: datetime) -> None:
        self.touch(now)

    def touch(self, now: datetime) -> None:
        self.updated_at = now

    # --- Computed properties --------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def _level_under(parent: Category | None) -> int:
    return 0 if parent is None else parent.level + 1
