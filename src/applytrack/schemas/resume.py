"""Resume-related Pydantic schemas."""

from datetime import datetime

from applytrack.schemas.base import CamelModel, OptionalStr, PartialUpdate, RequiredStr


class ResumeCreate(CamelModel):
    """Schema for storing a resume."""

    file_name: RequiredStr
    resume_text: OptionalStr = None
    skills: list[str] | None = None
    file_size: int | None = None
    file_type: OptionalStr = None


class ResumeUpdate(PartialUpdate):
    """Schema for a partial resume update."""

    required_when_present = ("file_name",)

    file_name: RequiredStr | None = None
    resume_text: OptionalStr = None
    skills: list[str] | None = None
    file_size: int | None = None
    file_type: OptionalStr = None


class ResumeResponse(CamelModel):
    """Schema for resume response."""

    id: int
    user_id: str
    resume_text: str | None
    skills: list[str] | None
    file_name: str
    file_size: int | None
    file_type: str | None
    created_at: datetime


class ResumeDeleteResponse(CamelModel):
    message: str = "Resume deleted successfully"
    deleted_resume: ResumeResponse
