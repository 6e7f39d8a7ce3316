"""Product aggregate.

Products live independently of categories but always reference exactly
one of them. Keeping the category's ``product_count`` in step is the
application layer's job; the entity only records which category it is in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from catalog.domain.model.value_objects import (
    Money,
    ProductDescription,
    ProductImage,
    ProductSubtitle,
    ProductTitle,
    Slug,
)


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because renames, reprices and category
    moves are legitimate mutations on the aggregate. Every mutation
    touches ``updated_at``.
    """

    id: UUID
    title: ProductTitle
    subtitle: ProductSubtitle
    description: ProductDescription
    price: Money
    slug: Slug
    category_id: UUID
    created_at: datetime
    updated_at: datetime
    image: ProductImage = field(default_factory=ProductImage)

    @staticmethod
    def create(
        id: UUID,
        title: ProductTitle,
        subtitle: ProductSubtitle,
        description: ProductDescription,
        price: Money,
        slug: Slug,
        category_id: UUID,
        now: datetime,
    ) -> Product:
        """Create a new product. The category must have been checked by the caller."""
        return Product(
            id=id,
            title=title,
            subtitle=subtitle,
            description=description,
            price=price,
            slug=slug,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )

    def rename(self, title: ProductTitle, slug: Slug, now: datetime) -> None:
        self.title = title
        self.slug = slug
        self.touch(now)

    def change_subtitle(self, subtitle: ProductSubtitle, now: datetime) -> None:
        self.subtitle = subtitle
        self.touch(now)

    def rewrite(self, description: ProductDescription, now: datetime) -> None:
        self.description = description
        self.touch(now)

    def reprice(self, price: Money, now: datetime) -> None:
        self.price = price
        self.touch(now)

    def move_to_category(self, category_id: UUID, now: datetime) -> None:
        self.category_id = category_id
        self.touch(now)

    def update_image(self, image: ProductImage, now: datetime) -> None:
        self.image = image
        self.touch(now)

    def delete(self, now: datetime) -> None:
        self.touch(now)

    def touch(self, now: datetime) -> None:
        self.updated_at = now

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
