"""Application service: Create Product use case.

Creating a product and bumping its category's product count happen in
the same transaction, so the denormalised counter never drifts.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

import structlog

from catalog.application.ports import Clock, SlugGenerator, Transactional
from catalog.application.pricing import to_money
from catalog.domain.exceptions import CategoryNotFoundException
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductDescription, ProductSubtitle, ProductTitle
from catalog.domain.model.views import ProductView
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger()


class CreateProductByAdminHandler:

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
        title: str,
        subtitle: str,
        description: str,
        price: str | float | Decimal,
        category_id: UUID,
    ) -> ProductView:
        """Add a new product to the catalog.

        Steps:
        1. Validate the input values and convert the price to minor units.
        2. Make sure the target category exists.
        3. Save the product, then increment the category's count.
        4. Return the product with its category tree.
        """

        def create() -> ProductView:
            now = self._clock.now()
            product_id = self._product_repo.next_identity()
            product_title = ProductTitle(title)
            product_subtitle = ProductSubtitle(subtitle)
            product_description = ProductDescription(description)
            money = to_money(price, self._currency)
            slug = self._slug_generator.generate(product_title.value)

            category = self._category_repo.find_by_id(category_id)
            if category is None:
                raise CategoryNotFoundException("Category not found.")

            product = Product.create(
                id=product_id,
                title=product_title,
                subtitle=product_subtitle,
                description=product_description,
                price=money,
                slug=slug,
                category_id=category_id,
                now=now,
            )
            self._product_repo.save(product)

            category.increase_product_count(now)
            self._category_repo.save(category)

            tree = self._category_repo.find_tree_by_id(category_id)
            if tree is None:
                raise CategoryNotFoundException("Category not found.")

            logger.info(
                "product_created",
                product_id=str(product_id),
                category_id=str(category_id),
                price=money.amount,
            )
            return ProductView(product=product, category_tree=tree)

        return self._transactional.transactional(create)
