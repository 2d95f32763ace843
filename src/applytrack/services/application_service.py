"""Application tracking service."""

from typing import Any

import structlog
from sqlalchemy import select

from applytrack.exceptions import InvalidForeignKey, InvalidUpdateFields
from applytrack.models.application import Application, ApplicationStatus
from applytrack.models.base import utcnow
from applytrack.models.job import Job
from applytrack.models.user import User
from applytrack.providers.base import ApplicationSubmitter
from applytrack.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    ApplicationSubmitRequest,
)
from applytrack.services.base import ListParams, OwnedResourceService
from applytrack.validation import validate_payload

logger = structlog.get_logger()


class ApplicationService(OwnedResourceService[Application]):
    """Service for the user's job applications."""

    model = Application
    entity_name = "Application"
    search_columns = (Application.job_title, Application.company)
    sort_columns = {
        "createdAt": Application.created_at,
        "appliedAt": Application.applied_at,
        "status": Application.status,
        "company": Application.company,
        "jobTitle": Application.job_title,
    }

    async def get_user_applications(
        self,
        user: User,
        params: ListParams | None = None,
        status: str | None = None,
    ) -> list[Application]:
        """List applications, optionally restricted to one status."""
        filters = []
        if status:
            data = validate_payload(ApplicationStatusUpdate, {"status": status})
            filters.append(Application.status == data.status)

        return await self.list_records(user, params or ListParams(), *filters)

    async def _get_owned_job(self, user: User, job_id: int) -> Job:
        result = await self.db.execute(
            select(Job).where(Job.id == job_id, Job.user_id == user.id)
        )
        job = result.scalar_one_or_none()
        if job is None:
            raise InvalidForeignKey(
                "Referenced job does not exist or does not belong to user",
                field="jobId",
            )
        return job

    async def create_application(self, user: User, payload: Any) -> Application:
        """Record an application to one of the user's jobs."""
        data = validate_payload(ApplicationCreate, payload)
        await self._get_owned_job(user, data.job_id)

        application = Application(user_id=user.id, **data.model_dump())
        self.db.add(application)
        await self.db.flush()

        logger.info(
            "application_created",
            application_id=application.id,
            job_id=application.job_id,
            user_id=user.id,
            status=application.status.value,
        )
        return application

    async def update_application_status(
        self, user: User, application_id: Any, payload: Any
    ) -> Application:
        """Change the status; no other field may be updated."""
        application = await self.get(user, application_id)

        if not isinstance(payload, dict) or set(payload) != {"status"}:
            raise InvalidUpdateFields("Only status field can be updated")
        data = validate_payload(ApplicationStatusUpdate, payload)

        return await self._apply_changes(user, application, {"status": data.status})

    async def submit_applications(
        self, user: User, payload: Any, submitter: ApplicationSubmitter
    ) -> list[Application]:
        """Submit to each job and record the outcome as an application."""
        request = validate_payload(ApplicationSubmitRequest, payload)

        # Resolve every job up front so a bad id fails before anything is sent.
        jobs = [await self._get_owned_job(user, job_id) for job_id in request.job_ids]

        applications = []
        for job in jobs:
            outcome: ApplicationStatus = await submitter.submit(job)
            application = Application(
                user_id=user.id,
                job_id=job.id,
                job_title=job.title,
                company=job.company,
                website=job.website,
                status=outcome,
                applied_at=utcnow().isoformat(),
            )
            self.db.add(application)
            applications.append(application)

        await self.db.flush()

        succeeded = sum(1 for a in applications if a.status == ApplicationStatus.SUCCESS)
        logger.info(
            "applications_submitted",
            user_id=user.id,
            count=len(applications),
            succeeded=succeeded,
        )
        return applications
