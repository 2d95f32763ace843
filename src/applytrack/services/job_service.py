"""Job storage and search service."""

from typing import Any

import structlog

from applytrack.exceptions import EmptyBatch, MissingRequiredField
from applytrack.models.job import Job
from applytrack.models.user import User
from applytrack.providers.base import JobSearchProvider
from applytrack.schemas.job import JobCreate, JobSearchRequest, JobUpdate
from applytrack.services.base import ListParams, OwnedResourceService
from applytrack.services.resume_service import ResumeService
from applytrack.validation import validate_payload

logger = structlog.get_logger()


class JobService(OwnedResourceService[Job]):
    """Service for the user's saved jobs."""

    model = Job
    entity_name = "Job"
    search_columns = (Job.title, Job.company)
    sort_columns = {
        "createdAt": Job.created_at,
        "title": Job.title,
        "company": Job.company,
    }

    async def search_jobs(
        self,
        user: User,
        params: ListParams | None = None,
        location: str | None = None,
        job_type: str | None = None,
    ) -> list[Job]:
        """List jobs matching the text search and filters."""
        filters = []
        if location:
            filters.append(Job.location.icontains(location, autoescape=True))
        if job_type:
            filters.append(Job.type == job_type)

        return await self.list_records(user, params or ListParams(), *filters)

    async def create_jobs(self, user: User, payload: Any) -> list[Job]:
        """Create one job or a batch; an invalid entry rejects the whole batch."""
        is_batch = isinstance(payload, list)
        entries = payload if is_batch else [payload]
        if not entries:
            raise EmptyBatch("At least one job is required")

        validated = [
            validate_payload(JobCreate, entry, index=i if is_batch else None)
            for i, entry in enumerate(entries)
        ]
        return await self._insert(user, validated)

    async def _insert(self, user: User, entries: list[JobCreate]) -> list[Job]:
        jobs = [Job(user_id=user.id, **entry.model_dump()) for entry in entries]
        self.db.add_all(jobs)
        await self.db.flush()

        logger.info("jobs_created", user_id=user.id, count=len(jobs))
        return jobs

    async def update_job(self, user: User, job_id: Any, payload: Any) -> Job:
        """Change only the fields present in ``payload``."""
        job = await self.get(user, job_id)
        data = validate_payload(JobUpdate, payload)
        return await self._apply_changes(user, job, data.changes())

    async def search_and_save(
        self, user: User, payload: Any, provider: JobSearchProvider
    ) -> list[Job]:
        """Query ``provider`` and save every match as one of the user's jobs."""
        request = validate_payload(JobSearchRequest, payload)

        skills = request.skills
        if not skills and request.resume_id is not None:
            resume = await ResumeService(self.db).get(user, request.resume_id)
            skills = resume.skills or []
        if not skills:
            raise MissingRequiredField("skills", "Upload a resume or provide skills to search")

        results = await provider.search(
            skills=skills,
            query=request.query,
            location=request.location,
        )
        logger.info(
            "job_search",
            user_id=user.id,
            source=provider.source_name,
            matches=len(results),
        )
        if not results:
            return []

        validated = [
            validate_payload(JobCreate, result, index=i)
            for i, result in enumerate(results)
        ]
        return await self._insert(user, validated)
