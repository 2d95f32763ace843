"""Collaborator interfaces for job search and application submission."""

from abc import ABC, abstractmethod
from typing import Any

from applytrack.models.application import ApplicationStatus
from applytrack.models.job import Job


class JobSearchProvider(ABC):
    """Source of job postings for a skill set."""

    source_name: str = "unknown"

    @abstractmethod
    async def search(
        self,
        skills: list[str],
        query: str | None = None,
        location: str | None = None,
    ) -> list[dict[str, Any]]:
        """Return job payloads accepted by ``JobCreate``."""


class ApplicationSubmitter(ABC):
    """Sends an application for a job and reports the outcome."""

    @abstractmethod
    async def submit(self, job: Job) -> ApplicationStatus:
        """Submit an application; returns SUCCESS or FAILED."""
