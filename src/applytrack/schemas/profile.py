"""User profile schemas."""

from datetime import datetime

from applytrack.schemas.base import CamelModel, EmailField, OptionalStr, PartialUpdate


class ProfileWrite(PartialUpdate):
    """Profile fields accepted by both upsert variants."""

    email: EmailField = None
    phone: OptionalStr = None
    linkedin: OptionalStr = None
    cover_letter: OptionalStr = None


class ProfileResponse(CamelModel):
    """Schema for profile response."""

    id: int
    user_id: str
    email: str | None
    phone: str | None
    linkedin: str | None
    cover_letter: str | None
    created_at: datetime
    updated_at: datetime


class ProfileDeleteResponse(CamelModel):
    message: str = "Profile deleted successfully"
    deleted_profile: ProfileResponse
