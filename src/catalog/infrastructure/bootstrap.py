"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from catalog.application.create_category import CreateCategoryByAdminHandler
from catalog.application.create_product import CreateProductByAdminHandler
from catalog.application.delete_category import DeleteCategoryByAdminHandler
from catalog.application.delete_product import DeleteProductByAdminHandler
from catalog.application.list_categories import DisplayListCategoryHandler
from catalog.application.list_products import DisplayListProductHandler
from catalog.application.recount_products import RecountProductsHandler
from catalog.application.show_category import DisplayCategoryHandler
from catalog.application.show_product import DisplayProductHandler
from catalog.application.update_category import UpdateCategoryByAdminHandler
from catalog.application.update_product import UpdateProductByAdminHandler
from catalog.application.update_product_image import UpdateProductImageByAdminHandler
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.image_file import LocalImageFile
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_transactional import JsonFileTransactional
from catalog.infrastructure.services import SlugifySlugGenerator, SystemClock


class Container:
    """Builds handlers against one set of settings."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.clock = SystemClock()
        self.slug_generator = SlugifySlugGenerator()

    # --- Collaborators --------------------------------------------------------

    def category_repository(self) -> JsonCategoryRepository:
        return JsonCategoryRepository(self.settings.categories_file)

    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(
            self.settings.products_file,
            upload_dir=self.settings.UPLOAD_DIR,
            clock=self.clock,
        )

    def transactional(self) -> JsonFileTransactional:
        return JsonFileTransactional(
            [self.settings.categories_file, self.settings.products_file]
        )

    def image_file(self, path: Path, original_name: str | None = None) -> LocalImageFile:
        return LocalImageFile(
            path,
            original_name=original_name,
            max_size=self.settings.MAX_UPLOAD_SIZE,
            allowed_extensions=set(self.settings.ALLOWED_EXTENSIONS),
        )

    # --- Category handlers ----------------------------------------------------

    def create_category(self) -> CreateCategoryByAdminHandler:
        return CreateCategoryByAdminHandler(
            self.category_repository(), self.clock, self.transactional(), self.slug_generator
        )

    def update_category(self) -> UpdateCategoryByAdminHandler:
        return UpdateCategoryByAdminHandler(
            self.category_repository(), self.clock, self.transactional(), self.slug_generator
        )

    def delete_category(self) -> DeleteCategoryByAdminHandler:
        return DeleteCategoryByAdminHandler(
            self.category_repository(), self.clock, self.transactional()
        )

    def show_category(self) -> DisplayCategoryHandler:
        return DisplayCategoryHandler(self.category_repository())

    def list_categories(self) -> DisplayListCategoryHandler:
        return DisplayListCategoryHandler(self.category_repository())

    # --- Product handlers -----------------------------------------------------

    def create_product(self) -> CreateProductByAdminHandler:
        return CreateProductByAdminHandler(
            self.product_repository(),
            self.category_repository(),
            self.clock,
            self.transactional(),
            self.slug_generator,
            currency=self.settings.CURRENCY,
        )

    def update_product(self) -> UpdateProductByAdminHandler:
        return UpdateProductByAdminHandler(
            self.product_repository(),
            self.category_repository(),
            self.clock,
            self.transactional(),
            self.slug_generator,
            currency=self.settings.CURRENCY,
        )

    def delete_product(self) -> DeleteProductByAdminHandler:
        return DeleteProductByAdminHandler(
            self.product_repository(), self.category_repository(), self.clock, self.transactional()
        )

    def update_product_image(self) -> UpdateProductImageByAdminHandler:
        return UpdateProductImageByAdminHandler(
            self.product_repository(), self.category_repository(), self.transactional()
        )

    def show_product(self) -> DisplayProductHandler:
        return DisplayProductHandler(self.product_repository(), self.category_repository())

    def list_products(self) -> DisplayListProductHandler:
        return DisplayListProductHandler(self.product_repository())

    # --- Maintenance ----------------------------------------------------------

    def recount_products(self) -> RecountProductsHandler:
        return RecountProductsHandler(
            self.category_repository(), self.product_repository(), self.clock, self.transactional()
        )
