"""Domain service: category tree assembly.

Pure functions over a loaded set of categories. The set acts as an arena
indexed by id; parents and children are resolved by lookup, so the
repositories only ever need to hand over flat lists.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from uuid import UUID

from catalog.domain.model.category import Category
from catalog.domain.model.views import CategoryItem, CategoryTree


def index_by_id(categories: Iterable[Category]) -> dict[UUID, Category]:
    return {category.id: category for category in categories}


def children_of(category_id: UUID, categories: Iterable[Category]) -> list[Category]:
    """Direct children, sorted by title for stable output."""
    children = [c for c in categories if c.parent_id == category_id]
    return sorted(children, key=lambda c: c.title.value)


def build_item(category_id: UUID, categories: Iterable[Category]) -> CategoryItem | None:
    arena = index_by_id(categories)
    category = arena.get(category_id)
    if category is None:
        return None
    parent = arena.get(category.parent_id) if category.parent_id is not None else None
    return CategoryItem(
        category=category,
        parent=parent,
        children=children_of(category_id, arena.values()),
    )


def build_tree(category_id: UUID, categories: Iterable[Category]) -> CategoryTree | None:
    """Walk the parent chain up to the root.

    A dangling parent id ends the chain; so does a cycle in corrupt data.
    """
    arena = index_by_id(categories)
    category = arena.get(category_id)
    if category is None:
        return None

    chain = [category]
    seen = {category.id}
    parent_id = category.parent_id
    while parent_id is not None and parent_id not in seen:
        parent = arena.get(parent_id)
        if parent is None:
            break
        chain.append(parent)
        seen.add(parent.id)
        parent_id = parent.parent_id

    tree: CategoryTree | None = None
    for node in reversed(chain):
        tree = CategoryTree(category=node, parent=tree)
    return tree


def descendants_of(category_id: UUID, categories: Iterable[Category]) -> list[Category]:
    """Every descendant, breadth-first, so parents always precede children."""
    by_parent: dict[UUID, list[Category]] = {}
    for category in categories:
        if category.parent_id is not None:
            by_parent.setdefault(category.parent_id, []).append(category)

    result: list[Category] = []
    seen = {category_id}
    queue = deque([category_id])
    while queue:
        current = queue.popleft()
        for child in by_parent.get(current, []):
            if child.id in seen:
                continue
            seen.add(child.id)
            result.append(child)
            queue.append(child.id)
    return result

