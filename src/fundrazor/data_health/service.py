"""Data-health service: gathers counts from the store and builds the report."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Protocol

import structlog

from src.fundrazor.core.monitoring import data_health_score
from src.fundrazor.data_health.report import PersonContact, build_report
from src.fundrazor.data_health.schemas import DataHealthReport

logger = structlog.get_logger(__name__)

DEFAULT_FRESHNESS_WINDOW_DAYS = 30


class DataHealthStore(Protocol):
    async def list_persons(self) -> list[PersonContact]: ...

    async def count_interactions_since(self, cutoff: datetime) -> int: ...

    async def count_unassigned_opportunities(self) -> int: ...

    async def count_duplicate_name_groups(self) -> int: ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DataHealthService:
    """Computes the data-health report on demand.

    Args:
        repository: Store providing person snapshots and counts.
        freshness_window_days: Interactions newer than this keep data "Good".
        now: Clock used for the freshness cutoff; injectable for tests.
    """

    def __init__(
        self,
        repository: DataHealthStore,
        freshness_window_days: int = DEFAULT_FRESHNESS_WINDOW_DAYS,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repo = repository
        self._window = timedelta(days=freshness_window_days)
        self._now = now

    async def get_report(self) -> DataHealthReport:
        logger.debug("data_health.calculating")

        cutoff = self._now() - self._window
        persons = await self._repo.list_persons()
        recent_interactions = await self._repo.count_interactions_since(cutoff)
        unassigned = await self._repo.count_unassigned_opportunities()
        duplicates = await self._repo.count_duplicate_name_groups()

        report = build_report(
            persons,
            has_recent_interactions=recent_interactions > 0,
            unassigned_opportunities=unassigned,
            duplicate_count=duplicates,
        )
        data_health_score.observe(report.metrics.overall_health)

        logger.info(
            "data_health.calculated",
            overall_health=report.metrics.overall_health,
            action_items_count=len(report.action_items),
            person_count=len(persons),
        )
        return report
