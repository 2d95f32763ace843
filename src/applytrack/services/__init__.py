"""Business logic services."""

from applytrack.services.base import ListParams, OwnedResourceService
from applytrack.services.resume_service import ResumeService
from applytrack.services.job_service import JobService
from applytrack.services.application_service import ApplicationService
from applytrack.services.profile_service import ProfileService
from applytrack.services.stats_service import StatsService

__all__ = [
    "ListParams",
    "OwnedResourceService",
    "ResumeService",
    "JobService",
    "ApplicationService",
    "ProfileService",
    "StatsService",
]
