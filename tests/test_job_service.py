"""Tests for job service."""

import pytest

from applytrack.exceptions import EmptyBatch, MissingRequiredField, NotFound
from applytrack.providers import StaticJobSearchProvider
from applytrack.services.base import ListParams
from applytrack.services.job_service import JobService
from applytrack.services.resume_service import ResumeService


@pytest.mark.asyncio
async def test_create_single_job(db_session, user, sample_job_data):
    """Test saving a single job."""
    job_service = JobService(db_session)

    jobs = await job_service.create_jobs(user, sample_job_data)

    assert len(jobs) == 1
    job = jobs[0]
    assert job.id is not None
    assert job.title == "Software Engineer"
    assert job.company == "Test Company"
    assert job.website == "example.com"


@pytest.mark.asyncio
async def test_create_job_batch(db_session, user, sample_job_data):
    job_service = JobService(db_session)

    jobs = await job_service.create_jobs(
        user, [sample_job_data, {"title": "QA Engineer", "company": "Acme"}]
    )

    assert [j.title for j in jobs] == ["Software Engineer", "QA Engineer"]


@pytest.mark.asyncio
async def test_create_job_batch_rejects_whole_batch(db_session, user, sample_job_data):
    """One invalid entry means nothing from the batch is stored."""
    job_service = JobService(db_session)

    with pytest.raises(MissingRequiredField) as exc_info:
        await job_service.create_jobs(user, [sample_job_data, {"title": "No company"}])

    error = exc_info.value
    assert error.index == 1
    assert error.field == "company"
    assert error.message.startswith("Job at index 1: ")
    assert await job_service.search_jobs(user) == []


@pytest.mark.asyncio
async def test_create_empty_batch(db_session, user):
    job_service = JobService(db_session)

    with pytest.raises(EmptyBatch) as exc_info:
        await job_service.create_jobs(user, [])

    assert exc_info.value.code == "EMPTY_JOBS_ARRAY"


@pytest.mark.asyncio
async def test_search_jobs(db_session, user, other_user, sample_job_data):
    """Test searching for jobs."""
    job_service = JobService(db_session)
    await job_service.create_jobs(
        user,
        [
            sample_job_data,
            {"title": "Data Analyst", "company": "Numbers Ltd", "location": "Berlin", "type": "Contract"},
        ],
    )
    await job_service.create_jobs(other_user, sample_job_data)

    by_text = await job_service.search_jobs(user, ListParams(search="software"))
    assert [j.title for j in by_text] == ["Software Engineer"]

    by_company = await job_service.search_jobs(user, ListParams(search="numbers"))
    assert [j.title for j in by_company] == ["Data Analyst"]

    by_location = await job_service.search_jobs(user, location="berl")
    assert [j.title for j in by_location] == ["Data Analyst"]

    by_type = await job_service.search_jobs(user, job_type="Full-time")
    assert [j.title for j in by_type] == ["Software Engineer"]

    # Type must match exactly.
    assert await job_service.search_jobs(user, job_type="full") == []


@pytest.mark.asyncio
async def test_search_jobs_search_is_literal(db_session, user):
    job_service = JobService(db_session)
    await job_service.create_jobs(user, {"title": "Engineer", "company": "Acme"})

    assert await job_service.search_jobs(user, ListParams(search="%")) == []


@pytest.mark.asyncio
async def test_search_jobs_sorted_by_title(db_session, user):
    job_service = JobService(db_session)
    await job_service.create_jobs(
        user,
        [
            {"title": "B role", "company": "X"},
            {"title": "A role", "company": "Y"},
            {"title": "C role", "company": "Z"},
        ],
    )

    asc = await job_service.search_jobs(user, ListParams(sort="title", order="asc"))
    desc = await job_service.search_jobs(user, ListParams(sort="title", order="desc"))

    assert [j.title for j in asc] == ["A role", "B role", "C role"]
    assert [j.title for j in desc] == ["C role", "B role", "A role"]


@pytest.mark.asyncio
async def test_update_job(db_session, user, sample_job_data):
    job_service = JobService(db_session)
    job = (await job_service.create_jobs(user, sample_job_data))[0]

    updated = await job_service.update_job(
        user, str(job.id), {"salary": "$200k", "location": None}
    )

    assert updated.salary == "$200k"
    assert updated.location is None
    assert updated.title == "Software Engineer"


@pytest.mark.asyncio
async def test_update_job_rejects_blank_title(db_session, user, sample_job_data):
    job_service = JobService(db_session)
    job = (await job_service.create_jobs(user, sample_job_data))[0]

    with pytest.raises(MissingRequiredField) as exc_info:
        await job_service.update_job(user, job.id, {"title": ""})

    assert exc_info.value.field == "title"


@pytest.mark.asyncio
async def test_update_job_of_other_user(db_session, user, other_user, sample_job_data):
    job_service = JobService(db_session)
    job = (await job_service.create_jobs(user, sample_job_data))[0]

    with pytest.raises(NotFound):
        await job_service.update_job(other_user, job.id, {"title": "Stolen"})


@pytest.mark.asyncio
async def test_search_and_save_with_skills(db_session, user):
    job_service = JobService(db_session)

    jobs = await job_service.search_and_save(
        user, {"skills": ["python"]}, StaticJobSearchProvider()
    )

    assert {j.title for j in jobs} == {"DevOps Engineer", "Python Developer"}
    assert all(j.user_id == user.id for j in jobs)


@pytest.mark.asyncio
async def test_search_and_save_filters_location(db_session, user):
    job_service = JobService(db_session)

    jobs = await job_service.search_and_save(
        user, {"skills": ["Python"], "location": "pune"}, StaticJobSearchProvider()
    )

    assert [j.company for j in jobs] == ["Data Analytics Corp"]


@pytest.mark.asyncio
async def test_search_and_save_uses_resume_skills(db_session, user):
    resume = await ResumeService(db_session).create_resume(
        user, {"fileName": "cv.pdf", "resumeText": "Kubernetes and Docker"}
    )
    job_service = JobService(db_session)

    jobs = await job_service.search_and_save(
        user, {"resumeId": resume.id}, StaticJobSearchProvider()
    )

    assert [j.title for j in jobs] == ["DevOps Engineer"]


@pytest.mark.asyncio
async def test_search_and_save_requires_skills(db_session, user):
    job_service = JobService(db_session)

    with pytest.raises(MissingRequiredField) as exc_info:
        await job_service.search_and_save(user, {}, StaticJobSearchProvider())

    assert exc_info.value.field == "skills"


@pytest.mark.asyncio
async def test_search_and_save_no_matches(db_session, user):
    job_service = JobService(db_session)

    jobs = await job_service.search_and_save(
        user, {"skills": ["COBOL"]}, StaticJobSearchProvider()
    )

    assert jobs == []
