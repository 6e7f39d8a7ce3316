"""Local-disk implementation of the ImageFile port, validated with Pillow."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import structlog
from PIL import Image, UnidentifiedImageError

from catalog.application.ports import ImageFile

logger = structlog.get_logger()

ALLOWED_IMAGE_MIME_TYPES = {"image/jpeg", "image/png", "image/webp"}
FORMAT_TO_MIME = {"JPEG": "image/jpeg", "PNG": "image/png", "WEBP": "image/webp"}
MAX_PIXELS = 50_000_000


class LocalImageFile(ImageFile):

    def __init__(
        self,
        path: Path,
        original_name: str | None = None,
        max_size: int = 10 * 1024 * 1024,
        allowed_extensions: set[str] | None = None,
    ) -> None:
        self._path = Path(path)
        self._original_name = original_name or self._path.name
        self._max_size = max_size
        self._allowed_extensions = allowed_extensions or {"jpg", "jpeg", "png", "webp"}

    @property
    def path(self) -> Path:
        return self._path

    @property
    def original_name(self) -> str:
        return self._original_name

    @property
    def mime_type(self) -> str:
        detected = self._detect_mime()
        if detected:
            return detected
        guessed, _ = mimetypes.guess_type(self._original_name)
        return guessed or "application/octet-stream"

    @property
    def size(self) -> int:
        return self._path.stat().st_size if self._path.is_file() else 0

    def is_valid(self) -> bool:
        """Extension, size, MIME and image headers must all check out."""
        if not self._path.is_file():
            return False
        if self.extension not in self._allowed_extensions:
            return False
        if not 0 < self.size <= self._max_size:
            return False
        if self._detect_mime() not in ALLOWED_IMAGE_MIME_TYPES:
            return False

        try:
            with Image.open(self._path) as image:
                width, height = image.size
                image.verify()  # will raise if broken
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as exc:
            logger.warning("invalid_image_upload", file=self._original_name, error=str(exc))
            return False

        # Prevent decompression bomb by limiting pixel count
        return width * height <= MAX_PIXELS

    def _detect_mime(self) -> str:
        try:
            with Image.open(self._path) as image:
                return FORMAT_TO_MIME.get((image.format or "").upper(), "")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError):
            return ""
