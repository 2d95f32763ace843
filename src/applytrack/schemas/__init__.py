"""Pydantic schemas for API validation."""

from applytrack.schemas.resume import (
    ResumeCreate,
    ResumeUpdate,
    ResumeResponse,
    ResumeDeleteResponse,
)
from applytrack.schemas.job import (
    JobCreate,
    JobUpdate,
    JobSearchRequest,
    JobResponse,
    JobDeleteResponse,
)
from applytrack.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationSubmitRequest,
    ApplicationResponse,
    ApplicationDeleteResponse,
    ApplicationStatsResponse,
)
from applytrack.schemas.profile import (
    ProfileWrite,
    ProfileResponse,
    ProfileDeleteResponse,
)

__all__ = [
    "ResumeCreate",
    "ResumeUpdate",
    "ResumeResponse",
    "ResumeDeleteResponse",
    "JobCreate",
    "JobUpdate",
    "JobSearchRequest",
    "JobResponse",
    "JobDeleteResponse",
    "ApplicationCreate",
    "ApplicationStatusUpdate",
    "ApplicationSubmitRequest",
    "ApplicationResponse",
    "ApplicationDeleteResponse",
    "ApplicationStatsResponse",
    "ProfileWrite",
    "ProfileResponse",
    "ProfileDeleteResponse",
]
