"""Application statistics."""

import math
from datetime import timedelta

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from applytrack.config import get_settings
from applytrack.exceptions import InternalError
from applytrack.models.application import Application, ApplicationStatus
from applytrack.models.base import utcnow
from applytrack.models.user import User

logger = structlog.get_logger()


def success_rate(success: int, failed: int) -> int:
    """Percentage of decided applications that succeeded, rounded half up.

    Pending applications are not decided and are left out; with nothing
    decided the rate is 0.
    """
    decided = success + failed
    if decided == 0:
        return 0
    return math.floor(success / decided * 100 + 0.5)


class StatsService:
    """Read-only aggregates over a user's applications."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings = get_settings()

    async def get_application_stats(self, user: User) -> dict:
        """Compute every aggregate, or fail as a whole."""
        try:
            total = await self._count_total(user)
            by_status = await self._count_by_status(user)
            recent = await self._count_recent(user)
            by_company = await self._count_by_company(user)
        except SQLAlchemyError as e:
            logger.error("application_stats_error", user_id=user.id, error=str(e))
            raise InternalError(f"Internal server error: {e}") from e

        return {
            "total": total,
            "by_status": by_status,
            "success_rate": success_rate(
                by_status[ApplicationStatus.SUCCESS.value],
                by_status[ApplicationStatus.FAILED.value],
            ),
            "recent": recent,
            "by_company": by_company,
        }

    async def _count_total(self, user: User) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Application)
            .where(Application.user_id == user.id)
        )
        return result.scalar() or 0

    async def _count_by_status(self, user: User) -> dict[str, int]:
        result = await self.db.execute(
            select(Application.status, func.count())
            .where(Application.user_id == user.id)
            .group_by(Application.status)
        )
        counts = {status.value: 0 for status in ApplicationStatus}
        for status, count in result.all():
            counts[ApplicationStatus(status).value] = count
        return counts

    async def _count_recent(self, user: User) -> int:
        cutoff = utcnow() - timedelta(days=self.settings.stats_recent_days)
        result = await self.db.execute(
            select(func.count())
            .select_from(Application)
            .where(
                Application.user_id == user.id,
                Application.created_at >= cutoff,
            )
        )
        return result.scalar() or 0

    async def _count_by_company(self, user: User) -> list[dict]:
        count = func.count().label("count")
        result = await self.db.execute(
            select(Application.company, count)
            .where(
                Application.user_id == user.id,
                Application.company.is_not(None),
                Application.company != "",
            )
            .group_by(Application.company)
            .order_by(count.desc(), Application.company.asc())
        )
        return [{"company": company, "count": n} for company, n in result.all()]
