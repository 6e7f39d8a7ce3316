"""Unit tests for tree assembly over a flat list of categories."""

import uuid

from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import CategoryTitle, Slug
from catalog.domain.service import category_tree
from tests.fakes import NOW, build_category


def _tree():
    """root -> (clothes -> (shirts, hats), books)"""
    root = build_category("Root")
    clothes = build_category("Clothes", parent=root)
    books = build_category("Books", parent=root)
    shirts = build_category("Shirts", parent=clothes)
    hats = build_category("Hats", parent=clothes)
    return root, clothes, books, shirts, hats


class TestBuildItem:

    def test_resolves_parent_and_sorted_children(self):
        root, clothes, books, shirts, hats = _tree()
        item = category_tree.build_item(clothes.id, [root, clothes, books, shirts, hats])
        assert item.category == clothes
        assert item.parent == root
        assert [c.title.value for c in item.children] == ["Hats", "Shirts"]

    def test_root_has_no_parent(self):
        root, *rest = _tree()
        item = category_tree.build_item(root.id, [root, *rest])
        assert item.parent is None
        assert [c.title.value for c in item.children] == ["Books", "Clothes"]

    def test_unknown_id(self):
        assert category_tree.build_item(uuid.uuid4(), list(_tree())) is None


class TestBuildTree:

    def test_walks_to_root(self):
        root, clothes, books, shirts, hats = _tree()
        tree = category_tree.build_tree(shirts.id, [root, clothes, books, shirts, hats])
        assert tree.category == shirts
        assert tree.parent.category == clothes
        assert tree.parent.parent.category == root
        assert tree.parent.parent.parent is None
        assert tree.ancestors == [root, clothes]
        assert tree.path == ["Root", "Clothes", "Shirts"]

    def test_dangling_parent_ends_chain(self):
        root, clothes, books, shirts, hats = _tree()
        tree = category_tree.build_tree(shirts.id, [shirts, hats])
        assert tree.parent is None
        assert tree.path == ["Shirts"]

    def test_cycle_terminates(self):
        a_id, b_id = uuid.uuid4(), uuid.uuid4()
        a = Category(a_id, CategoryTitle("AA"), Slug("aa"), NOW, NOW, parent_id=b_id, level=1)
        b = Category(b_id, CategoryTitle("BB"), Slug("bb"), NOW, NOW, parent_id=a_id, level=1)
        tree = category_tree.build_tree(a_id, [a, b])
        assert tree.path == ["BB", "AA"]


class TestDescendants:

    def test_breadth_first_parents_first(self):
        root, clothes, books, shirts, hats = _tree()
        descendants = category_tree.descendants_of(root.id, [hats, shirts, books, clothes, root])
        ids = [c.id for c in descendants]
        assert set(ids) == {clothes.id, books.id, shirts.id, hats.id}
        assert ids.index(clothes.id) < ids.index(shirts.id)
        assert ids.index(clothes.id) < ids.index(hats.id)

    def test_leaf_has_none(self):
        root, clothes, books, shirts, hats = _tree()
        assert category_tree.descendants_of(hats.id, [root, clothes, books, shirts, hats]) == []
