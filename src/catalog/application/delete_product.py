"""Application service: Delete Product use case."""

from __future__ import annotations

from uuid import UUID

import structlog

from catalog.application.ports import Clock, Transactional
from catalog.domain.exceptions import CategoryNotFoundException, ProductNotFoundException
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger()


class DeleteProductByAdminHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        clock: Clock,
        transactional: Transactional,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._clock = clock
        self._transactional = transactional

    def handle(self, product_id: UUID) -> None:
        """Remove a product and decrement its category's count."""

        def delete() -> None:
            product = self._product_repo.find_by_id(product_id)
            if product is None:
                raise ProductNotFoundException("Product not found.")

            category = self._category_repo.find_by_id(product.category_id)
            if category is None:
                raise CategoryNotFoundException("Category not found.")

            now = self._clock.now()
            category.decrease_product_count(now)
            self._category_repo.save(category)

            product.delete(now)
            self._product_repo.delete(product)

            logger.info(
                "product_deleted",
                product_id=str(product_id),
                category_id=str(category.id),
            )

        self._transactional.transactional(delete)
