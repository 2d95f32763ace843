"""Resume management endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from applytrack.api.deps import CurrentUser, DbSession
from applytrack.schemas.resume import ResumeDeleteResponse, ResumeResponse
from applytrack.services.base import ListParams
from applytrack.services.resume_service import ResumeService

router = APIRouter()


@router.get("", response_model=ResumeResponse | list[ResumeResponse])
async def get_resumes(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
    limit: int | None = None,
    offset: int | None = None,
    search: str | None = None,
    sort: str | None = None,
    order: str | None = None,
):
    """Get one resume by ``id`` or list the user's resumes."""
    resume_service = ResumeService(db)

    if record_id is not None:
        resume = await resume_service.get(current_user, record_id)
        return ResumeResponse.model_validate(resume)

    resumes = await resume_service.get_user_resumes(
        current_user,
        ListParams(limit=limit, offset=offset, search=search, sort=sort, order=order),
    )
    return [ResumeResponse.model_validate(r) for r in resumes]


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    db: DbSession,
    current_user: CurrentUser,
    payload: Any = Body(...),
):
    """Store a resume and its keyword skills."""
    resume_service = ResumeService(db)
    return await resume_service.create_resume(current_user, payload)


@router.put("", response_model=ResumeResponse)
async def update_resume(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
    payload: Any = Body(...),
):
    """Update the fields present in the body."""
    resume_service = ResumeService(db)
    return await resume_service.update_resume(current_user, record_id, payload)


@router.delete("", response_model=ResumeDeleteResponse)
async def delete_resume(
    db: DbSession,
    current_user: CurrentUser,
    record_id: str | None = Query(None, alias="id"),
):
    """Delete a resume."""
    resume_service = ResumeService(db)
    resume = await resume_service.delete(current_user, record_id)
    return ResumeDeleteResponse(deleted_resume=ResumeResponse.model_validate(resume))
