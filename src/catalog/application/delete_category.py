"""Application service: Delete Category use case.

Only empty leaves can be deleted: a category that still owns products or
child categories is refused, so no product is left pointing at nothing
and no subtree is orphaned.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from catalog.application.ports import Clock, Transactional
from catalog.domain.exceptions import CatalogDomainException, CategoryNotFoundException
from catalog.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger()


class DeleteCategoryByAdminHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        clock: Clock,
        transactional: Transactional,
    ) -> None:
        self._category_repo = category_repo
        self._clock = clock
        self._transactional = transactional

    def handle(self, category_id: UUID) -> None:

        def delete() -> None:
            category = self._category_repo.find_by_id(category_id)
            if category is None:
                raise CategoryNotFoundException("Category not found.")

            if category.product_count > 0:
                raise CatalogDomainException("Category still contains products.")
            if self._category_repo.has_children(category_id):
                raise CatalogDomainException("Category still has child categories.")

            category.delete(self._clock.now())
            self._category_repo.delete(category)
            logger.info("category_deleted", category_id=str(category_id))

        self._transactional.transactional(delete)
