"""Small adapters for the clock and slug ports."""

from __future__ import annotations

from datetime import datetime, timezone

from slugify import slugify

from catalog.application.ports import Clock, SlugGenerator
from catalog.domain.model.value_objects import Slug


class SystemClock(Clock):

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class SlugifySlugGenerator(SlugGenerator):
    """ASCII, lower-case, hyphen-separated slugs ("Crème brûlée" -> "creme-brulee")."""

    def generate(self, text: str) -> Slug:
        return Slug(slugify(text, lowercase=True, separator="-"))
