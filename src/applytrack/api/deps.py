"""API dependencies."""

from typing import Annotated

import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from applytrack.config import get_settings
from applytrack.database import get_db
from applytrack.exceptions import Unauthorized
from applytrack.models.base import utcnow
from applytrack.models.user import Session, User
from applytrack.providers import (
    ApplicationSubmitter,
    JobSearchProvider,
    RandomOutcomeSubmitter,
    StaticJobSearchProvider,
)

logger = structlog.get_logger()

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Resolve the bearer session token issued by the auth system to its user."""
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    result = await db.execute(
        select(Session)
        .options(selectinload(Session.user))
        .where(Session.token == credentials.credentials)
    )
    session = result.scalar_one_or_none()

    if session is None or _as_aware(session.expires_at) <= utcnow():
        logger.warning("auth_rejected", reason="unknown_or_expired_session")
        raise Unauthorized()

    return session.user


def _as_aware(value):
    # SQLite hands back naive datetimes for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=utcnow().tzinfo)
    return value


def get_job_search_provider() -> JobSearchProvider:
    return StaticJobSearchProvider()


def get_application_submitter() -> ApplicationSubmitter:
    settings = get_settings()
    return RandomOutcomeSubmitter(
        success_probability=settings.application_success_probability
    )


# Type aliases for dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
SearchProvider = Annotated[JobSearchProvider, Depends(get_job_search_provider)]
Submitter = Annotated[ApplicationSubmitter, Depends(get_application_submitter)]
