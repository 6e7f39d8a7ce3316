"""Collaborators the application layer needs from the outside world.

Handlers depend on these abstractions only; concrete adapters live in
``catalog.infrastructure`` and fakes in the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from catalog.domain.model.value_objects import Slug

T = TypeVar("T")


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Current time; the source of every created_at / updated_at."""


class SlugGenerator(ABC):

    @abstractmethod
    def generate(self, text: str) -> Slug:
        """Derive a slug from *text*. Uniqueness is the store's concern."""


class Transactional(ABC):

    @abstractmethod
    def transactional(self, callback: Callable[[], T]) -> T:
        """Run *callback* atomically.

        Returns the callback's result. If the callback raises, every write
        it performed is rolled back and the exception propagates unchanged.
        """


class ImageFile(ABC):
    """An uploaded image waiting to be attached to a product."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """Where the uploaded bytes currently live."""

    @property
    @abstractmethod
    def original_name(self) -> str:
        """File name as supplied by the client."""

    @property
    @abstractmethod
    def mime_type(self) -> str:
        ...

    @property
    @abstractmethod
    def size(self) -> int:
        ...

    @property
    def extension(self) -> str:
        return Path(self.original_name).suffix.lstrip(".").lower()

    @abstractmethod
    def is_valid(self) -> bool:
        """True if the file is a well-formed, acceptable image."""
