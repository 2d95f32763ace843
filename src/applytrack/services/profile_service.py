"""User profile service."""

from typing import Any

import structlog
from sqlalchemy.exc import IntegrityError

from applytrack.exceptions import NotFound
from applytrack.models.base import utcnow
from applytrack.models.profile import UserProfile
from applytrack.models.user import User
from applytrack.schemas.profile import ProfileWrite
from applytrack.services.base import OwnedResourceService
from applytrack.validation import validate_payload

logger = structlog.get_logger()


class ProfileService(OwnedResourceService[UserProfile]):
    """Get-or-create-or-update access to the single profile per user."""

    model = UserProfile
    entity_name = "User profile"

    async def get_profile(self, user: User) -> UserProfile | None:
        result = await self.db.execute(self._owned(user))
        return result.scalar_one_or_none()

    async def require_profile(self, user: User) -> UserProfile:
        profile = await self.get_profile(user)
        if profile is None:
            raise NotFound("User profile not found")
        return profile

    async def merge_profile(self, user: User, payload: Any) -> tuple[UserProfile, bool]:
        """Upsert keeping the stored value for every omitted or empty field.

        Returns (profile, created).
        """
        data = validate_payload(ProfileWrite, payload)
        changes = {k: v for k, v in data.changes().items() if v is not None}
        return await self._upsert(user, changes)

    async def put_profile(self, user: User, payload: Any) -> tuple[UserProfile, bool]:
        """Upsert setting exactly the fields present; null or empty clears a field.

        Returns (profile, created).
        """
        data = validate_payload(ProfileWrite, payload)
        return await self._upsert(user, data.changes())

    async def _upsert(
        self, user: User, changes: dict[str, Any]
    ) -> tuple[UserProfile, bool]:
        profile = await self.get_profile(user)

        if profile is None:
            try:
                async with self.db.begin_nested():
                    profile = UserProfile(user_id=user.id, **changes)
                    self.db.add(profile)
                    await self.db.flush()
            except IntegrityError:
                # A concurrent first write created the row; update it instead.
                logger.info("profile_create_conflict", user_id=user.id)
                profile = await self.require_profile(user)
            else:
                logger.info("profile_created", profile_id=profile.id, user_id=user.id)
                return profile, True

        # updated_at is restamped even when no field changed.
        profile = await self._apply_changes(
            user, profile, {**changes, "updated_at": utcnow()}
        )
        return profile, False

    async def delete_profile(self, user: User) -> UserProfile:
        profile = await self.require_profile(user)
        await self._delete_owned(user, profile)
        return profile
