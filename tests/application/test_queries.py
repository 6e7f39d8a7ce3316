"""Tests for the read-side handlers: show and list, categories and products."""

import uuid
from datetime import timedelta

import pytest

from catalog.application.list_categories import DisplayListCategoryHandler
from catalog.application.list_products import DisplayListProductHandler
from catalog.application.show_category import DisplayCategoryHandler
from catalog.application.show_product import DisplayProductHandler
from catalog.domain.exceptions import CategoryNotFoundException, ProductNotFoundException
from catalog.domain.model.views import Pagination
from tests.fakes import (
    NOW,
    FakeCategoryRepository,
    FakeProductRepository,
    build_category,
    build_product,
)


class TestDisplayCategory:

    def test_item_with_parent_and_children(self):
        root = build_category("Root")
        child = build_category("Child", parent=root)
        leaf = build_category("Leaf", parent=child)
        handler = DisplayCategoryHandler(FakeCategoryRepository([root, child, leaf]))

        item = handler.handle(child.id)

        assert item.parent.id == root.id
        assert [c.id for c in item.children] == [leaf.id]

    def test_unknown_category(self):
        handler = DisplayCategoryHandler(FakeCategoryRepository())
        with pytest.raises(CategoryNotFoundException, match="Category not found."):
            handler.handle(uuid.uuid4())


class TestDisplayListCategory:

    def _categories(self):
        root = build_category("Root", now=NOW)
        beta = build_category("Beta", parent=root, now=NOW + timedelta(minutes=1))
        alpha = build_category("Alpha", parent=root, now=NOW + timedelta(minutes=2))
        return root, beta, alpha

    def test_newest_first_by_default(self):
        root, beta, alpha = self._categories()
        handler = DisplayListCategoryHandler(FakeCategoryRepository([root, beta, alpha]))

        page = handler.handle(Pagination())

        assert [c.id for c in page.items] == [alpha.id, beta.id, root.id]
        assert page.total_items == 3
        assert page.total_pages == 1

    def test_level_filter_and_order(self):
        root, beta, alpha = self._categories()
        handler = DisplayListCategoryHandler(FakeCategoryRepository([root, beta, alpha]))

        page = handler.handle(Pagination(), level=1, order_by={"title": "ASC"})

        assert [c.title.value for c in page.items] == ["Alpha", "Beta"]

    def test_pagination(self):
        root, beta, alpha = self._categories()
        handler = DisplayListCategoryHandler(FakeCategoryRepository([root, beta, alpha]))

        page = handler.handle(Pagination(2, 2), order_by={"title": "ASC"})

        assert [c.title.value for c in page.items] == ["Root"]
        assert page.total_pages == 2


class TestDisplayProduct:

    def test_view_with_category_tree(self):
        root = build_category("Sport")
        shoes = build_category("Shoes", parent=root, product_count=1)
        product = build_product("Runner", shoes)
        handler = DisplayProductHandler(
            FakeProductRepository([product]), FakeCategoryRepository([root, shoes])
        )

        view = handler.handle(product.id)

        assert view.product.id == product.id
        assert view.category_tree.path == ["Sport", "Shoes"]

    def test_unknown_product(self):
        handler = DisplayProductHandler(FakeProductRepository(), FakeCategoryRepository())
        with pytest.raises(ProductNotFoundException, match="Product not found."):
            handler.handle(uuid.uuid4())

    def test_missing_category(self):
        product = build_product("Runner", build_category("Gone"))
        handler = DisplayProductHandler(FakeProductRepository([product]), FakeCategoryRepository())
        with pytest.raises(CategoryNotFoundException, match="Category not found."):
            handler.handle(product.id)


class TestDisplayListProduct:

    def _handler(self):
        category = build_category("Shoes", product_count=3)
        products = [
            build_product("Trail runner", category, price=8990, now=NOW),
            build_product("Road runner", category, price=6990, now=NOW + timedelta(minutes=1)),
            build_product("Hiking boot", category, price=12990, now=NOW + timedelta(minutes=2)),
        ]
        return DisplayListProductHandler(FakeProductRepository(products))

    def test_title_filter_is_case_insensitive(self):
        page = self._handler().handle(Pagination(), title="RUNNER")
        assert {p.title.value for p in page.items} == {"Trail runner", "Road runner"}
        assert page.total_items == 2

    def test_order_by_price(self):
        page = self._handler().handle(Pagination(), order_by={"price": "DESC"})
        assert [p.price.amount for p in page.items] == [12990, 8990, 6990]

    def test_default_order_newest_first(self):
        page = self._handler().handle(Pagination())
        assert [p.title.value for p in page.items] == ["Hiking boot", "Road runner", "Trail runner"]

    def test_unknown_order_field_ignored(self):
        page = self._handler().handle(Pagination(), order_by={"secret": "ASC"})
        assert page.total_items == 3
