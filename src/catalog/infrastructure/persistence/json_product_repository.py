"""JSON-file-backed implementation of ProductRepository.

Uploaded images are copied into ``upload_dir`` under a random name; only
that name is stored on the product. A copy whose product record could not
be written is removed again.
"""

from __future__ import annotations

import json
import shutil
import uuid
from datetime import datetime
from pathlib import Path
from uuid import UUID

from catalog.application.ports import Clock, ImageFile
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import (
    Money,
    ProductDescription,
    ProductImage,
    ProductSubtitle,
    ProductTitle,
    Slug,
)
from catalog.domain.model.views import ProductPage
from catalog.domain.repository.listing import normalize_order, paginate, sort_items
from catalog.domain.repository.product_repository import (
    PRODUCT_ORDER_FIELDS,
    ProductRepository,
)
from catalog.infrastructure.persistence.locking import data_dir_lock


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, upload_dir: Path, clock: Clock) -> None:
        self._file_path = file_path
        self._upload_dir = upload_dir
        self._clock = clock
        self._lock = data_dir_lock(file_path.parent)
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_identity(self) -> UUID:
        return uuid.uuid4()

    def find_by_id(self, product_id: UUID) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def list(
        self,
        title: str | None,
        subtitle: str | None,
        description: str | None,
        order_by: dict[str, str],
        page: int,
        items_per_page: int,
    ) -> ProductPage:
        products = [
            p for p in self._load().values()
            if _contains(p.title.value, title)
            and _contains(p.subtitle.value, subtitle)
            and _contains(p.description.value, description)
        ]
        order = normalize_order(order_by, PRODUCT_ORDER_FIELDS)
        products = sort_items(products, order, _sort_key)
        items, total, pages = paginate(products, page, items_per_page)
        return ProductPage(items=items, total_items=total, total_pages=pages)

    def count_by_category(self, category_id: UUID) -> int:
        return sum(1 for p in self._load().values() if p.category_id == category_id)

    def save(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products.pop(product.id, None)
            self._persist(products)

    def update_image(self, product_id: UUID, file: ImageFile) -> Product | None:
        with self._lock:
            products = self._load()
            product = products.get(product_id)
            if product is None:
                return None

            self._upload_dir.mkdir(parents=True, exist_ok=True)
            target = self._upload_dir / f"{uuid.uuid4().hex}.{file.extension or 'bin'}"
            shutil.copyfile(file.path, target)

            now = self._clock.now()
            product.update_image(product.image.with_file(target.name, now), now)
            try:
                self._persist(products)
            except BaseException:
                target.unlink(missing_ok=True)
                raise
            return product

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[UUID, Product]:
        with self._lock:
            if not self._file_path.exists():
                return {}
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {UUID(item["id"]): self._to_domain(item) for item in raw}

    def _persist(self, products: dict[UUID, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        image_updated_at = product.image.updated_at
        return {
            "id": str(product.id),
            "title": product.title.value,
            "subtitle": product.subtitle.value,
            "description": product.description.value,
            "price": product.price.amount,
            "currency": product.price.currency,
            "slug": product.slug.value,
            "category_id": str(product.category_id),
            "image": product.image.file_name,
            "image_updated_at": image_updated_at.isoformat() if image_updated_at else None,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        image_updated_at = raw.get("image_updated_at")
        return Product(
            id=UUID(raw["id"]),
            title=ProductTitle(raw["title"]),
            subtitle=ProductSubtitle(raw["subtitle"]),
            description=ProductDescription(raw["description"]),
            price=Money(raw["price"], raw.get("currency", "EUR")),
            slug=Slug(raw["slug"]),
            category_id=UUID(raw["category_id"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            image=ProductImage(
                file_name=raw.get("image"),
                updated_at=datetime.fromisoformat(image_updated_at) if image_updated_at else None,
            ),
        )

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.write_text("[]", encoding="utf-8")


def _contains(value: str, needle: str | None) -> bool:
    return needle is None or needle.strip().lower() in value.lower()


def _sort_key(product: Product, field: str):
    if field == "title":
        return product.title.value.lower()
    if field == "price":
        return product.price.amount
    return product.created_at
