"""Product counts stay equal to the number of assigned products.

Drives a long pseudo-random sequence of create/move/delete operations
through the real handlers and checks every counter after each commit,
including after operations that fail and roll back.
"""

import random

import pytest

from catalog.application.create_product import CreateProductByAdminHandler
from catalog.application.delete_product import DeleteProductByAdminHandler
from catalog.application.update_product import UpdateProductByAdminHandler
from catalog.domain.exceptions import DomainException
from tests.fakes import (
    FakeCategoryRepository,
    FakeProductRepository,
    FakeSlugGenerator,
    FakeTransactional,
    FixedClock,
    build_category,
)


def _assert_counts_match(category_repo, product_repo):
    for category in category_repo.list_all():
        assert category.product_count == product_repo.count_by_category(category.id)


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_counts_survive_random_operations(seed):
    rng = random.Random(seed)
    root = build_category("Root")
    categories = [root] + [build_category(f"Category {i}", parent=root) for i in range(4)]

    category_repo = FakeCategoryRepository(categories)
    product_repo = FakeProductRepository()
    clock = FixedClock()
    transactional = FakeTransactional(product_repo, category_repo)
    slugs = FakeSlugGenerator()

    create = CreateProductByAdminHandler(product_repo, category_repo, clock, transactional, slugs)
    update = UpdateProductByAdminHandler(product_repo, category_repo, clock, transactional, slugs)
    delete = DeleteProductByAdminHandler(product_repo, category_repo, clock, transactional)

    for step in range(200):
        clock.advance(seconds=1)
        products = product_repo.list_all()
        action = rng.choice(["create", "create", "move", "move", "bad_move", "delete"])

        try:
            if action == "create" or not products:
                create.handle(
                    title=f"Product {step}",
                    subtitle="Subtitle",
                    description="Description",
                    price="9.99",
                    category_id=rng.choice(categories).id,
                )
            elif action == "move":
                update.handle(rng.choice(products).id, category_id=rng.choice(categories).id)
            elif action == "bad_move":
                # Valid move followed by an invalid title: must roll back as a whole.
                update.handle(
                    rng.choice(products).id,
                    category_id=rng.choice(categories).id,
                    title="x",
                )
            else:
                delete.handle(rng.choice(products).id)
        except DomainException:
            pass

        _assert_counts_match(category_repo, product_repo)
