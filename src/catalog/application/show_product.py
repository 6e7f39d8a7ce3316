"""Application service: Display Product use case (query)."""

from __future__ import annotations

from uuid import UUID

from catalog.domain.exceptions import CategoryNotFoundException, ProductNotFoundException
from catalog.domain.model.views import ProductView
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class DisplayProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, product_id: UUID) -> ProductView:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundException("Product not found.")

        tree = self._category_repo.find_tree_by_id(product.category_id)
        if tree is None:
            raise CategoryNotFoundException("Category not found.")

        return ProductView(product=product, category_tree=tree)
