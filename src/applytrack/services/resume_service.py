"""Resume storage service."""

from typing import Any

import structlog

from applytrack.models.resume import Resume
from applytrack.models.user import User
from applytrack.schemas.resume import ResumeCreate, ResumeUpdate
from applytrack.services.base import ListParams, OwnedResourceService
from applytrack.skills import extract_skills
from applytrack.validation import validate_payload

logger = structlog.get_logger()


class ResumeService(OwnedResourceService[Resume]):
    """Service for the user's stored resumes."""

    model = Resume
    entity_name = "Resume"
    search_columns = (Resume.file_name,)
    sort_columns = {
        "createdAt": Resume.created_at,
        "fileName": Resume.file_name,
        "fileSize": Resume.file_size,
    }

    async def get_user_resumes(
        self, user: User, params: ListParams | None = None
    ) -> list[Resume]:
        """List resumes, newest first unless another sort is requested."""
        return await self.list_records(user, params or ListParams())

    async def create_resume(self, user: User, payload: Any) -> Resume:
        """Store a resume; skills are extracted from the text when not supplied."""
        data = validate_payload(ResumeCreate, payload)

        skills = data.skills
        if skills is None:
            skills = extract_skills(data.resume_text)

        resume = Resume(
            user_id=user.id,
            file_name=data.file_name,
            resume_text=data.resume_text,
            skills=skills,
            file_size=data.file_size,
            file_type=data.file_type,
        )
        self.db.add(resume)
        await self.db.flush()

        logger.info(
            "resume_created",
            resume_id=resume.id,
            user_id=user.id,
            skills=len(skills),
        )
        return resume

    async def update_resume(self, user: User, resume_id: Any, payload: Any) -> Resume:
        """Change only the fields present in ``payload``."""
        resume = await self.get(user, resume_id)
        data = validate_payload(ResumeUpdate, payload)
        return await self._apply_changes(user, resume, data.changes())
