"""Job endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from applytrack.api.deps import CurrentUser, DbSession, SearchProvider
from applytrack.schemas.job import JobDeleteResponse, JobResponse
from applytrack.services.base import ListParams
from applytrack.services.job_service import JobService

router = APIRouter()


@router.get("", response_model=JobResponse | list[JobResponse])
async def get_jobs(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
    limit: int | None = None,
    offset: int | None = None,
    search: str | None = None,
    location: str | None = None,
    job_type: str | None = Query(None, alias="type"),
    sort: str | None = None,
    order: str | None = None,
):
    """Get one job by ``id`` or list jobs with search and filters."""
    job_service = JobService(db)

    if record_id is not None:
        job = await job_service.get(current_user, record_id)
        return JobResponse.model_validate(job)

    jobs = await job_service.search_jobs(
        current_user,
        ListParams(limit=limit, offset=offset, search=search, sort=sort, order=order),
        location=location,
        job_type=job_type,
    )
    return [JobResponse.model_validate(j) for j in jobs]


@router.post(
    "",
    response_model=JobResponse | list[JobResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_jobs(
    db: DbSession,
    current_user: CurrentUser,
    payload: Any = Body(...),
):
    """Save one job, or a batch of jobs when the body is an array."""
    job_service = JobService(db)
    jobs = await job_service.create_jobs(current_user, payload)

    if isinstance(payload, list):
        return [JobResponse.model_validate(j) for j in jobs]
    return JobResponse.model_validate(jobs[0])


@router.post(
    "/search",
    response_model=list[JobResponse],
    status_code=status.HTTP_201_CREATED,
)
async def search_and_save_jobs(
    db: DbSession,
    current_user: CurrentUser,
    provider: SearchProvider,
    payload: Any = Body(None),
):
    """Search the job provider with the user's skills and save the matches."""
    job_service = JobService(db)
    jobs = await job_service.search_and_save(
        current_user, payload if payload is not None else {}, provider
    )
    return [JobResponse.model_validate(j) for j in jobs]


@router.put("", response_model=JobResponse)
async def update_job(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
    payload: Any = Body(...),
):
    """Update the fields present in the body."""
    job_service = JobService(db)
    return await job_service.update_job(current_user, record_id, payload)


@router.delete("", response_model=JobDeleteResponse)
async def delete_job(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
):
    """Delete a job."""
    job_service = JobService(db)
    job = await job_service.delete(current_user, record_id)
    return JobDeleteResponse(deleted_job=JobResponse.model_validate(job))
