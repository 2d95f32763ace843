"""Application tracking endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from applytrack.api.deps import CurrentUser, DbSession, Submitter
from applytrack.schemas.application import (
    ApplicationDeleteResponse,
    ApplicationResponse,
    ApplicationStatsResponse,
)
from applytrack.services.application_service import ApplicationService
from applytrack.services.base import ListParams
from applytrack.services.stats_service import StatsService

router = APIRouter()


@router.get("", response_model=ApplicationResponse | list[ApplicationResponse])
async def get_applications(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
    limit: int | None = None,
    offset: int | None = None,
    search: str | None = None,
    status: str | None = None,
    sort: str | None = None,
    order: str | None = None,
):
    """Get one application by ``id`` or list applications."""
    app_service = ApplicationService(db)

    if record_id is not None:
        application = await app_service.get(current_user, record_id)
        return ApplicationResponse.model_validate(application)

    applications = await app_service.get_user_applications(
        current_user,
        ListParams(limit=limit, offset=offset, search=search, sort=sort, order=order),
        status=status,
    )
    return [ApplicationResponse.model_validate(a) for a in applications]


@router.get("/stats", response_model=ApplicationStatsResponse)
async def get_application_stats(db: DbSession, current_user: CurrentUser):
    """Get application statistics."""
    stats_service = StatsService(db)
    stats = await stats_service.get_application_stats(current_user)
    return ApplicationStatsResponse.model_validate(stats)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    db: DbSession,
    current_user: CurrentUser,
    payload: Any = Body(...),
):
    """Record an application to one of the user's jobs."""
    app_service = ApplicationService(db)
    return await app_service.create_application(current_user, payload)


@router.post(
    "/submit",
    response_model=list[ApplicationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def submit_applications(
    db: DbSession,
    current_user: CurrentUser,
    submitter: Submitter,
    payload: Any = Body(...),
):
    """Submit applications to the given jobs and record each outcome."""
    app_service = ApplicationService(db)
    applications = await app_service.submit_applications(current_user, payload, submitter)
    return [ApplicationResponse.model_validate(a) for a in applications]


@router.patch("", response_model=ApplicationResponse)
async def update_application(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
    payload: Any = Body(...),
):
    """Update application status."""
    app_service = ApplicationService(db)
    return await app_service.update_application_status(current_user, record_id, payload)


@router.delete("", response_model=ApplicationDeleteResponse)
async def delete_application(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
):
    """Delete an application."""
    app_service = ApplicationService(db)
    application = await app_service.delete(current_user, record_id)
    return ApplicationDeleteResponse(
        deleted_application=ApplicationResponse.model_validate(application)
    )
