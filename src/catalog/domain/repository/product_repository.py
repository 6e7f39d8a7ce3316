"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import UUID

from catalog.domain.model.product import Product
from catalog.domain.model.views import ProductPage

if TYPE_CHECKING:
    from catalog.application.ports import ImageFile

PRODUCT_ORDER_FIELDS = ("title", "price", "created_at")


class ProductRepository(ABC):

    @abstractmethod
    def next_identity(self) -> UUID:
        """Allocate a fresh product id."""

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list(
        self,
        title: str | None,
        subtitle: str | None,
        description: str | None,
        order_by: dict[str, str],
        page: int,
        items_per_page: int,
    ) -> ProductPage:
        """Return one page of products matching the text filters."""

    @abstractmethod
    def count_by_category(self, category_id: UUID) -> int:
        """Count the products currently assigned to a category."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a product."""

    @abstractmethod
    def update_image(self, product_id: UUID, file: ImageFile) -> Product | None:
        """Store *file* and attach it to the product. None if the product is unknown."""
