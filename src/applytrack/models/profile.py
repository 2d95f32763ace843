"""User contact profile model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applytrack.models.base import Base, UpdatedAtMixin

if TYPE_CHECKING:
    from applytrack.models.user import User


class UserProfile(UpdatedAtMixin, Base):
    """Contact details and default cover letter, one row per user."""

    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True
    )

    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(50))
    linkedin: Mapped[str | None] = mapped_column(String(500))
    cover_letter: Mapped[str | None] = mapped_column(Text)

    # Relationship
    user: Mapped["User"] = relationship(back_populates="profile")
