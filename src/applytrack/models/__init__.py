"""Database models."""

from applytrack.models.base import Base
from applytrack.models.user import User, Session
from applytrack.models.resume import Resume
from applytrack.models.job import Job
from applytrack.models.application import Application, ApplicationStatus
from applytrack.models.profile import UserProfile

__all__ = [
    "Base",
    "User",
    "Session",
    "Resume",
    "Job",
    "Application",
    "ApplicationStatus",
    "UserProfile",
]
