"""Tests for application service."""

import pytest

from applytrack.exceptions import (
    InvalidEnumValue,
    InvalidFieldValue,
    InvalidForeignKey,
    InvalidUpdateFields,
    MissingRequiredField,
    NotFound,
)
from applytrack.models.application import ApplicationStatus
from applytrack.providers import RandomOutcomeSubmitter
from applytrack.services.application_service import ApplicationService
from applytrack.services.base import ListParams
from applytrack.services.job_service import JobService


async def _create_job(db_session, user, **overrides):
    data = {"title": "Backend Developer", "company": "Acme", "website": "acme.io"}
    data.update(overrides)
    jobs = await JobService(db_session).create_jobs(user, data)
    return jobs[0]


@pytest.mark.asyncio
async def test_create_application(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    application = await app_service.create_application(
        user,
        {
            "jobId": job.id,
            "status": "pending",
            "jobTitle": job.title,
            "company": job.company,
            "appliedAt": "2026-10-01T10:00:00Z",
        },
    )

    assert application.id is not None
    assert application.job_id == job.id
    assert application.status == ApplicationStatus.PENDING
    assert application.applied_at == "2026-10-01T10:00:00Z"


@pytest.mark.asyncio
async def test_create_application_for_foreign_job(db_session, user, other_user):
    """A job owned by someone else cannot be referenced."""
    job = await _create_job(db_session, other_user)
    app_service = ApplicationService(db_session)

    with pytest.raises(InvalidForeignKey) as exc_info:
        await app_service.create_application(user, {"jobId": job.id, "status": "success"})

    assert exc_info.value.code == "INVALID_FOREIGN_KEY"
    assert exc_info.value.field == "jobId"


@pytest.mark.asyncio
async def test_create_application_validation(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    with pytest.raises(MissingRequiredField) as missing:
        await app_service.create_application(user, {"status": "success"})
    assert missing.value.field == "jobId"

    with pytest.raises(InvalidFieldValue) as bad_id:
        await app_service.create_application(user, {"jobId": "abc", "status": "success"})
    assert bad_id.value.code == "INVALID_JOB_ID"

    with pytest.raises(InvalidFieldValue) as bool_id:
        await app_service.create_application(user, {"jobId": True, "status": "success"})
    assert bool_id.value.code == "INVALID_JOB_ID"
    assert bool_id.value.message == "jobId must be a valid integer"

    with pytest.raises(InvalidEnumValue) as bad_status:
        await app_service.create_application(user, {"jobId": job.id, "status": "hired"})
    assert bad_status.value.code == "INVALID_STATUS"
    assert "success, failed, pending" in bad_status.value.message


@pytest.mark.asyncio
async def test_update_application_status(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)
    application = await app_service.create_application(
        user, {"jobId": job.id, "status": "pending"}
    )

    updated = await app_service.update_application_status(
        user, application.id, {"status": "success"}
    )

    assert updated.status == ApplicationStatus.SUCCESS


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"status": "success", "company": "Other"},
        {"company": "Other"},
        {},
    ],
)
async def test_update_application_rejects_other_fields(db_session, user, payload):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)
    application = await app_service.create_application(
        user, {"jobId": job.id, "status": "pending"}
    )

    with pytest.raises(InvalidUpdateFields):
        await app_service.update_application_status(user, application.id, payload)


@pytest.mark.asyncio
async def test_update_application_of_other_user(db_session, user, other_user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)
    application = await app_service.create_application(
        user, {"jobId": job.id, "status": "pending"}
    )

    with pytest.raises(NotFound):
        await app_service.update_application_status(
            other_user, application.id, {"status": "success"}
        )


@pytest.mark.asyncio
async def test_list_applications_status_filter_and_search(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)
    await app_service.create_application(
        user, {"jobId": job.id, "status": "success", "company": "Acme"}
    )
    await app_service.create_application(
        user, {"jobId": job.id, "status": "failed", "company": "Globex"}
    )

    succeeded = await app_service.get_user_applications(user, status="success")
    assert [a.company for a in succeeded] == ["Acme"]

    found = await app_service.get_user_applications(user, ListParams(search="glob"))
    assert [a.company for a in found] == ["Globex"]

    by_company = await app_service.get_user_applications(
        user, ListParams(sort="company", order="desc")
    )
    assert [a.company for a in by_company] == ["Globex", "Acme"]


@pytest.mark.asyncio
async def test_list_applications_invalid_status(db_session, user):
    app_service = ApplicationService(db_session)

    with pytest.raises(InvalidEnumValue):
        await app_service.get_user_applications(user, status="bogus")


@pytest.mark.asyncio
async def test_submit_applications(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    applications = await app_service.submit_applications(
        user, {"jobIds": [job.id]}, RandomOutcomeSubmitter(success_probability=1.0)
    )

    assert len(applications) == 1
    application = applications[0]
    assert application.status == ApplicationStatus.SUCCESS
    assert application.job_title == "Backend Developer"
    assert application.company == "Acme"
    assert application.website == "acme.io"
    assert application.applied_at is not None


@pytest.mark.asyncio
async def test_submit_applications_records_failures(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    applications = await app_service.submit_applications(
        user, {"jobIds": [job.id, job.id]}, RandomOutcomeSubmitter(success_probability=0.0)
    )

    assert [a.status for a in applications] == [ApplicationStatus.FAILED] * 2


@pytest.mark.asyncio
async def test_submit_applications_rejects_unknown_job(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    with pytest.raises(InvalidForeignKey):
        await app_service.submit_applications(
            user, {"jobIds": [job.id, 9999]}, RandomOutcomeSubmitter()
        )

    assert await app_service.get_user_applications(user) == []


@pytest.mark.asyncio
async def test_delete_job_keeps_application(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)
    application = await app_service.create_application(
        user, {"jobId": job.id, "status": "success", "company": "Acme"}
    )

    await JobService(db_session).delete(user, job.id)
    await db_session.commit()

    fetched = await app_service.get(user, application.id)
    await db_session.refresh(fetched)
    assert fetched.job_id is None
    assert fetched.company == "Acme"


@pytest.mark.asyncio
async def test_create_application_accepts_numeric_string_job_id(db_session, user):
    job = await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    application = await app_service.create_application(
        user, {"jobId": str(job.id), "status": "pending"}
    )

    assert application.job_id == job.id


@pytest.mark.asyncio
async def test_submit_applications_rejects_boolean_job_id(db_session, user):
    await _create_job(db_session, user)
    app_service = ApplicationService(db_session)

    with pytest.raises(InvalidFieldValue) as exc_info:
        await app_service.submit_applications(
            user, {"jobIds": [True]}, RandomOutcomeSubmitter()
        )

    assert exc_info.value.field == "jobIds"
    assert await app_service.get_user_applications(user) == []
