"""Application-related Pydantic schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from applytrack.models.application import ApplicationStatus
from applytrack.schemas.base import CamelModel, OptionalStr, RecordId


class ApplicationCreate(CamelModel):
    """Schema for recording an application to an owned job."""

    error_codes = {"jobId": "INVALID_JOB_ID"}

    job_id: RecordId
    status: ApplicationStatus
    job_title: OptionalStr = None
    company: OptionalStr = None
    applied_at: OptionalStr = None
    website: OptionalStr = None


class ApplicationStatusUpdate(CamelModel):
    """The only mutation allowed on an application."""

    model_config = ConfigDict(extra="forbid")

    status: ApplicationStatus


class ApplicationSubmitRequest(CamelModel):
    """Schema for submitting applications to owned jobs."""

    job_ids: list[RecordId] = Field(min_length=1)


class ApplicationResponse(CamelModel):
    """Schema for application response."""

    id: int
    user_id: str
    job_id: int | None
    job_title: str | None
    company: str | None
    status: ApplicationStatus
    applied_at: str | None
    website: str | None
    created_at: datetime


class ApplicationDeleteResponse(CamelModel):
    message: str = "Application deleted successfully"
    deleted_application: ApplicationResponse


class StatusCounts(CamelModel):
    success: int = 0
    failed: int = 0
    pending: int = 0


class CompanyCount(CamelModel):
    company: str
    count: int


class ApplicationStatsResponse(CamelModel):
    """Schema for application statistics."""

    total: int
    by_status: StatusCounts
    success_rate: int
    recent: int
    by_company: list[CompanyCount]
