"""Integration tests for the DeleteProduct use case."""

import uuid

import pytest

from catalog.application.delete_product import DeleteProductByAdminHandler
from catalog.domain.exceptions import CategoryNotFoundException, ProductNotFoundException
from tests.fakes import (
    FakeCategoryRepository,
    FakeProductRepository,
    FakeTransactional,
    FixedClock,
    build_category,
    build_product,
)


def _setup(categories, products):
    category_repo = FakeCategoryRepository(categories)
    product_repo = FakeProductRepository(products)
    handler = DeleteProductByAdminHandler(
        product_repo, category_repo, FixedClock(), FakeTransactional(product_repo, category_repo)
    )
    return handler, product_repo, category_repo


class TestDeleteProduct:

    def test_removes_product_and_decrements_count(self):
        category = build_category("Shoes", product_count=2)
        product = build_product("Runner", category)
        other = build_product("Walker", category)
        handler, product_repo, category_repo = _setup([category], [product, other])

        handler.handle(product.id)

        assert product_repo.find_by_id(product.id) is None
        assert product_repo.find_by_id(other.id) is not None
        assert category_repo.find_by_id(category.id).product_count == 1

    def test_unknown_product(self):
        handler, _, _ = _setup([], [])
        with pytest.raises(ProductNotFoundException, match="Product not found."):
            handler.handle(uuid.uuid4())

    def test_broken_category_reference_fails_before_delete(self):
        missing = build_category("Gone", product_count=1)
        product = build_product("Runner", missing)
        handler, product_repo, _ = _setup([], [product])

        with pytest.raises(CategoryNotFoundException, match="Category not found."):
            handler.handle(product.id)

        assert product_repo.deleted == []
        assert product_repo.find_by_id(product.id) is not None
