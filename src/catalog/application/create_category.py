"""Application service: Create Category use case."""

from __future__ import annotations

from uuid import UUID

import structlog

from catalog.application.ports import Clock, SlugGenerator, Transactional
from catalog.domain.exceptions import CategoryNotFoundException
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import CategoryDescription, CategoryTitle
from catalog.domain.model.views import CategoryItem
from catalog.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger()


class CreateCategoryByAdminHandler:

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
        title: str,
        description: str | None = None,
        parent_id: UUID | None = None,
    ) -> CategoryItem:
        """Create a category, optionally under an existing parent."""

        def create() -> CategoryItem:
            now = self._clock.now()
            category_id = self._category_repo.next_identity()
            category_title = CategoryTitle(title)
            slug = self._slug_generator.generate(category_title.value)

            parent = None
            if parent_id is not None:
                parent = self._category_repo.find_by_id(parent_id)
                if parent is None:
                    raise CategoryNotFoundException("Parent category not found.")

            category = Category.create(
                id=category_id,
                title=category_title,
                slug=slug,
                now=now,
                parent=parent,
                description=CategoryDescription.from_optional(description),
            )
            self._category_repo.save(category)

            item = self._category_repo.find_item_by_id(category_id)
            if item is None:
                raise CategoryNotFoundException("Category not found.")

            logger.info(
                "category_created",
                category_id=str(category_id),
                parent_id=str(parent_id) if parent_id else None,
                level=category.level,
            )
            return item

        return self._transactional.transactional(create)
