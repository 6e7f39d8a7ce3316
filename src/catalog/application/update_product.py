"""Application service: Update Product use case.

Any subset of fields may be given; ``None`` means "leave unchanged".
Moving a product decrements the old category, increments the new one and
reassigns the product inside one transaction.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

import structlog

from catalog.application.ports import Clock, SlugGenerator, Transactional
from catalog.application.pricing import to_money
from catalog.domain.exceptions import CategoryNotFoundException, ProductNotFoundException
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductDescription, ProductSubtitle, ProductTitle
from catalog.domain.model.views import ProductView
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger()


class UpdateProductByAdminHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        clock: Clock,
        transactional: Transactional,
        slug_generator: SlugGenerator,
        currency: str = "EUR",
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._clock = clock
        self._transactional = transactional
        self._slug_generator = slug_generator
        self._currency = currency

    def handle(
        self,
        product_id: UUID,
        title: str | None = None,
        subtitle: str | None = None,
        description: str | None = None,
        price: str | float | Decimal | None = None,
        category_id: UUID | None = None,
    ) -> ProductView:

        def update() -> ProductView:
            product = self._product_repo.find_by_id(product_id)
            if product is None:
                raise ProductNotFoundException("Product not found.")

            now = self._clock.now()

            if category_id is not None and category_id != product.category_id:
                self._move(product, category_id, now)

            if title is not None:
                new_title = ProductTitle(title)
                product.rename(new_title, self._slug_generator.generate(new_title.value), now)

            if subtitle is not None:
                product.change_subtitle(ProductSubtitle(subtitle), now)

            if description is not None:
                product.rewrite(ProductDescription(description), now)

            if price is not None:
                product.reprice(to_money(price, self._currency), now)

            product.touch(now)
            self._product_repo.save(product)

            tree = self._category_repo.find_tree_by_id(product.category_id)
            if tree is None:
                raise CategoryNotFoundException("Category not found.")

            logger.info("product_updated", product_id=str(product_id))
            return ProductView(product=product, category_tree=tree)

        return self._transactional.transactional(update)

    def _move(self, product: Product, category_id: UUID, now: datetime) -> None:
        new_category = self._category_repo.find_by_id(category_id)
        if new_category is None:
            raise CategoryNotFoundException("Category not found.")

        old_category_id = product.category_id
        # A dangling old reference has no counter to decrement.
        old_category = self._category_repo.find_by_id(old_category_id)
        if old_category is not None:
            old_category.decrease_product_count(now)
            self._category_repo.save(old_category)

        new_category.increase_product_count(now)
        self._category_repo.save(new_category)

        product.move_to_category(category_id, now)

        logger.info(
            "product_moved",
            product_id=str(product.id),
            from_category=str(old_category_id),
            to_category=str(category_id),
        )
