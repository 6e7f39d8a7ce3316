"""Runtime settings, read from ``CATALOG_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    DATA_DIR: Path = Path("data")
    UPLOAD_DIR: Path = Path("data/uploads")

    # Image uploads
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "webp"]

    # Pricing
    CURRENCY: str = "EUR"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("CURRENCY")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not normalized:
            raise ValueError("CURRENCY cannot be empty")
        return normalized

    @field_validator("ALLOWED_EXTENSIONS")
    @classmethod
    def normalize_extensions(cls, value: List[str]) -> List[str]:
        return [ext.strip().lstrip(".").lower() for ext in value if ext.strip()]

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def categories_file(self) -> Path:
        return self.DATA_DIR / "categories.json"

    @property
    def products_file(self) -> Path:
        return self.DATA_DIR / "products.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
