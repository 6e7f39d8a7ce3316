"""Application service: Display Category use case (query)."""

from __future__ import annotations

from uuid import UUID

from catalog.domain.exceptions import CategoryNotFoundException
from catalog.domain.model.views import CategoryItem
from catalog.domain.repository.category_repository import CategoryRepository


class DisplayCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: UUID) -> CategoryItem:
        item = self._category_repo.find_item_by_id(category_id)
        if item is None:
            raise CategoryNotFoundException("Category not found.")
        return item
