"""JSON-file-backed implementation of CategoryRepository.

Each record carries a ``version``. Saving a category whose loaded version
no longer matches the stored one raises ConcurrentModificationError, so a
counter update made by another process is never silently overwritten.
The read, compare and write of a save happen under the data-directory
lock.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime
from pathlib import Path
from uuid import UUID

from catalog.domain.exceptions import ConcurrentModificationError
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import CategoryDescription, CategoryTitle, Slug
from catalog.domain.model.views import CategoryItem, CategoryPage, CategoryTree
from catalog.domain.repository.category_repository import (
    CATEGORY_ORDER_FIELDS,
    CategoryRepository,
)
from catalog.domain.repository.listing import normalize_order, paginate, sort_items
from catalog.domain.service import category_tree
from catalog.infrastructure.persistence.locking import data_dir_lock


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = data_dir_lock(file_path.parent)
        self._ensure_file()

    # --- CategoryRepository interface -----------------------------------------

    def next_identity(self) -> UUID:
        return uuid.uuid4()

    def find_by_id(self, category_id: UUID) -> Category | None:
        for raw in self._load_raw():
            if raw["id"] == str(category_id):
                return self._to_domain(raw)
        return None

    def find_item_by_id(self, category_id: UUID) -> CategoryItem | None:
        return category_tree.build_item(category_id, self.list_all())

    def find_tree_by_id(self, category_id: UUID) -> CategoryTree | None:
        return category_tree.build_tree(category_id, self.list_all())

    def find_descendants(self, category_id: UUID) -> list[Category]:
        return category_tree.descendants_of(category_id, self.list_all())

    def has_children(self, category_id: UUID) -> bool:
        return any(raw.get("parent_id") == str(category_id) for raw in self._load_raw())

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list(
        self,
        level: int | None,
        order_by: dict[str, str],
        page: int,
        items_per_page: int,
    ) -> CategoryPage:
        categories = self.list_all()
        if level is not None:
            categories = [c for c in categories if c.level == level]

        order = normalize_order(order_by, CATEGORY_ORDER_FIELDS)
        categories = sort_items(categories, order, _sort_key)
        items, total, pages = paginate(categories, page, items_per_page)
        return CategoryPage(items=items, total_items=total, total_pages=pages)

    def save(self, category: Category) -> None:
        with self._lock:
            records = self._load_raw()
            stored_version = 0
            index = None
            for i, raw in enumerate(records):
                if raw["id"] == str(category.id):
                    stored_version = raw.get("version", 0)
                    index = i
                    break

            if stored_version != category.version:
                raise ConcurrentModificationError(
                    f"Category {category.id} was modified concurrently "
                    f"(loaded version {category.version}, stored {stored_version})."
                )

            category.version = stored_version + 1
            if index is None:
                records.append(self._to_raw(category))
            else:
                records[index] = self._to_raw(category)
            self._persist_raw(records)

    def delete(self, category: Category) -> None:
        with self._lock:
            records = [raw for raw in self._load_raw() if raw["id"] != str(category.id)]
            self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": str(category.id),
            "title": category.title.value,
            "slug": category.slug.value,
            "description": category.description.value if category.description else None,
            "parent_id": str(category.parent_id) if category.parent_id else None,
            "product_count": category.product_count,
            "level": category.level,
            "created_at": category.created_at.isoformat(),
            "updated_at": category.updated_at.isoformat(),
            "version": category.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        parent_id = raw.get("parent_id")
        return Category(
            id=UUID(raw["id"]),
            title=CategoryTitle(raw["title"]),
            slug=Slug(raw["slug"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            description=CategoryDescription.from_optional(raw.get("description")),
            parent_id=UUID(parent_id) if parent_id else None,
            product_count=raw.get("product_count", 0),
            level=raw.get("level", 0),
            version=raw.get("version", 0),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._lock:
            if not self._file_path.exists():
                return []
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.write_text("[]", encoding="utf-8")


def _sort_key(category: Category, field: str):
    if field == "title":
        return category.title.value.lower()
    return getattr(category, field)
