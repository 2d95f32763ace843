"""Job-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from applytrack.schemas.base import (
    CamelModel,
    LowerStr,
    OptionalStr,
    PartialUpdate,
    RecordId,
    RequiredStr,
)


class JobCreate(CamelModel):
    """Schema for saving a job."""

    title: RequiredStr
    company: RequiredStr
    location: OptionalStr = None
    salary: OptionalStr = None
    type: OptionalStr = None
    description: OptionalStr = None
    skills: list[str] | None = None
    website: LowerStr = None
    posted: OptionalStr = None


class JobUpdate(PartialUpdate):
    """Schema for a partial job update."""

    required_when_present = ("title", "company")

    title: RequiredStr | None = None
    company: RequiredStr | None = None
    location: OptionalStr = None
    salary: OptionalStr = None
    type: OptionalStr = None
    description: OptionalStr = None
    skills: list[str] | None = None
    website: LowerStr = None
    posted: OptionalStr = None


class JobSearchRequest(CamelModel):
    """Schema for running a job search and saving the matches."""

    query: OptionalStr = None
    skills: list[str] | None = None
    location: OptionalStr = None
    resume_id: RecordId | None = Field(default=None, ge=1)


class JobResponse(CamelModel):
    """Schema for job response."""

    id: int
    user_id: str
    title: str
    company: str
    location: str | None
    salary: str | None
    type: str | None
    description: str | None
    skills: list[str] | None
    website: str | None
    posted: str | None
    created_at: datetime


class JobDeleteResponse(CamelModel):
    message: str = "Job deleted successfully"
    deleted_job: JobResponse
