"""Application service: Recount Products use case (maintenance).

Compares every category's stored ``product_count`` with the number of
products that actually reference it and repairs any drift. A dry run
reports without writing.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import CountDrift, RecountReport
from catalog.application.ports import Clock, Transactional
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger()


class RecountProductsHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
        clock: Clock,
        transactional: Transactional,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo
        self._clock = clock
        self._transactional = transactional

    def handle(self, dry_run: bool = False) -> RecountReport:

        def recount() -> RecountReport:
            now = self._clock.now()
            categories = self._category_repo.list_all()
            drifts: list[CountDrift] = []

            for category in categories:
                actual = self._product_repo.count_by_category(category.id)
                if actual == category.product_count:
                    continue

                drifts.append(
                    CountDrift(
                        category_id=category.id,
                        title=category.title.value,
                        recorded=category.product_count,
                        actual=actual,
                    )
                )
                logger.warning(
                    "product_count_drift",
                    category_id=str(category.id),
                    recorded=category.product_count,
                    actual=actual,
                )
                if not dry_run:
                    category.reset_product_count(actual, now)
                    self._category_repo.save(category)

            return RecountReport(
                checked=len(categories),
                drifts=drifts,
                applied=not dry_run,
            )

        report = self._transactional.transactional(recount)
        logger.info(
            "product_count_reconciled",
            checked=report.checked,
            drifted=len(report.drifts),
            dry_run=dry_run,
        )
        return report
