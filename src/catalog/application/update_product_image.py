"""Application service: Update Product Image use case.

The file is checked before anything is persisted. The product and its
category tree are loaded before the upload is stored, so a missing
category never leaves a copied file behind. Storing the bytes and
attaching them to the product is the repository's job.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from catalog.application.ports import ImageFile, Transactional
from catalog.domain.exceptions import (
    CatalogDomainException,
    CategoryNotFoundException,
    ProductNotFoundException,
)
from catalog.domain.model.views import ProductView
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger()


class UpdateProductImageByAdminHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        transactional: Transactional,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._transactional = transactional

    def handle(self, product_id: UUID, image_file: ImageFile) -> ProductView:
        if not image_file.is_valid():
            raise CatalogDomainException("Invalid image file.")

        def attach() -> ProductView:
            current = self._product_repo.find_by_id(product_id)
            if current is None:
                raise ProductNotFoundException("Product not found.")

            tree = self._category_repo.find_tree_by_id(current.category_id)
            if tree is None:
                raise CategoryNotFoundException("Category not found.")

            # Stored last, once every lookup has succeeded.
            product = self._product_repo.update_image(product_id, image_file)
            if product is None:
                raise ProductNotFoundException("Product not found.")

            logger.info(
                "product_image_updated",
                product_id=str(product_id),
                file_name=product.image.file_name,
                mime_type=image_file.mime_type,
                size=image_file.size,
            )
            return ProductView(product=product, category_tree=tree)

        return self._transactional.transactional(attach)
