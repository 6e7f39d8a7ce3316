"""Application service: Display List Product use case (query)."""

from __future__ import annotations

from catalog.domain.model.views import Pagination, ProductPage
from catalog.domain.repository.listing import DEFAULT_ORDER
from catalog.domain.repository.product_repository import ProductRepository


class DisplayListProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        pagination: Pagination,
        title: str | None = None,
        subtitle: str | None = None,
        description: str | None = None,
        order_by: dict[str, str] | None = None,
    ) -> ProductPage:
        """Text filters are case-insensitive substring matches."""
        return self._product_repo.list(
            title=title,
            subtitle=subtitle,
            description=description,
            order_by=order_by or dict(DEFAULT_ORDER),
            page=pagination.page,
            items_per_page=pagination.items_per_page,
        )
