"""Application service: Display List Category use case (query)."""

from __future__ import annotations

from catalog.domain.model.views import CategoryPage, Pagination
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.listing import DEFAULT_ORDER


class DisplayListCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(
        self,
        pagination: Pagination,
        level: int | None = None,
        order_by: dict[str, str] | None = None,
    ) -> CategoryPage:
        """Newest categories first unless an ordering is requested."""
        return self._category_repo.list(
            level=level,
            order_by=order_by or dict(DEFAULT_ORDER),
            page=pagination.page,
            items_per_page=pagination.items_per_page,
        )
