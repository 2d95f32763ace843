"""User profile endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Response, status

from applytrack.api.deps import CurrentUser, DbSession
from applytrack.schemas.profile import ProfileDeleteResponse, ProfileResponse
from applytrack.services.profile_service import ProfileService

router = APIRouter()


@router.get("", response_model=ProfileResponse)
async def get_profile(db: DbSession, current_user: CurrentUser):
    """Get the current user's profile."""
    profile_service = ProfileService(db)
    return await profile_service.require_profile(current_user)


@router.post("", response_model=ProfileResponse)
async def merge_profile(
    response: Response,
    db: DbSession,
    current_user: CurrentUser,
    payload: Any = Body(...),
):
    """Create the profile, or fill in the non-empty fields sent."""
    profile_service = ProfileService(db)
    profile, created = await profile_service.merge_profile(current_user, payload)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return profile


@router.put("", response_model=ProfileResponse)
async def put_profile(
    response: Response,
    db: DbSession,
    current_user: CurrentUser,
    payload: Any = Body(...),
):
    """Create the profile, or set exactly the fields sent (null clears)."""
    profile_service = ProfileService(db)
    profile, created = await profile_service.put_profile(current_user, payload)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return profile


@router.delete("", response_model=ProfileDeleteResponse)
async def delete_profile(db: DbSession, current_user: CurrentUser):
    """Delete the current user's profile."""
    profile_service = ProfileService(db)
    profile = await profile_service.delete_profile(current_user)
    return ProfileDeleteResponse(deleted_profile=ProfileResponse.model_validate(profile))
