"""Application service: Update Category use case.

``parent_id`` is tri-state: ``UNSET`` leaves the parent alone, ``None``
moves the category to the root, a UUID moves it under that category.
Moving a category re-levels its whole subtree.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog

from catalog.application.dto import UNSET, Unset
from catalog.application.ports import Clock, SlugGenerator, Transactional
from catalog.domain.exceptions import CatalogDomainException, CategoryNotFoundException
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import CategoryDescription, CategoryTitle
from catalog.domain.model.views import CategoryItem
from catalog.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger()


class UpdateCategoryByAdminHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        clock: Clock,
        transactional: Transactional,
        slug_generator: SlugGenerator,
    ) -> None:
        self._category_repo = category_repo
        self._clock = clock
        self._transactional = transactional
        self._slug_generator = slug_generator

    def handle(
        self,
        category_id: UUID,
        title: str | None = None,
        description: str | None = None,
        parent_id: UUID | None | Unset = UNSET,
    ) -> CategoryItem:

        def update() -> CategoryItem:
            category = self._category_repo.find_by_id(category_id)
            if category is None:
                raise CategoryNotFoundException("Category not found.")

            now = self._clock.now()

            # Validate the move before touching anything.
            if not isinstance(parent_id, Unset):
                self._move(category, parent_id, now)

            if title is not None:
                new_title = CategoryTitle(title)
                category.rename(new_title, self._slug_generator.generate(new_title.value), now)

            if description is not None:
                category.describe(CategoryDescription(description), now)

            category.touch(now)
            self._category_repo.save(category)

            item = self._category_repo.find_item_by_id(category_id)
            if item is None:
                raise CategoryNotFoundException("Category not found.")

            logger.info("category_updated", category_id=str(category_id))
            return item

        return self._transactional.transactional(update)

    def _move(self, category: Category, parent_id: UUID | None, now: datetime) -> None:
        descendants = self._category_repo.find_descendants(category.id)

        parent = None
        if parent_id is not None:
            if parent_id == category.id:
                raise CatalogDomainException("Category cannot be its own parent.")
            parent = self._category_repo.find_by_id(parent_id)
            if parent is None:
                raise CategoryNotFoundException("Parent category not found.")
            if any(d.id == parent_id for d in descendants):
                raise CatalogDomainException(
                    "Category cannot be moved under one of its descendants."
                )

        previous_parent = category.parent_id
        category.move_to(parent, now)

        # Descendants come parents-first, so each parent level is already final.
        levels = {category.id: category.level}
        for descendant in descendants:
            if descendant.relevel(levels[descendant.parent_id], now):
                self._category_repo.save(descendant)
            levels[descendant.id] = descendant.level

        logger.info(
            "category_moved",
            category_id=str(category.id),
            from_parent=str(previous_parent) if previous_parent else None,
            to_parent=str(parent_id) if parent_id else None,
            level=category.level,
            relevelled=len(descendants),
        )
