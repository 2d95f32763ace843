"""Resume model."""

from typing import TYPE_CHECKING

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applytrack.models.base import Base

if TYPE_CHECKING:
    from applytrack.models.user import User


class Resume(Base):
    """Uploaded resume with its extracted text and keyword skills."""

    __tablename__ = "resumes"
    __table_args__ = (Index("ix_resumes_user_created", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))

    # Content
    resume_text: Mapped[str | None] = mapped_column(Text)
    skills: Mapped[list[str] | None] = mapped_column(JSON)

    # File info
    file_name: Mapped[str] = mapped_column(String(255))
    file_size: Mapped[int | None] = mapped_column(Integer)  # bytes
    file_type: Mapped[str | None] = mapped_column(String(100))

    # Relationship
    user: Mapped["User"] = relationship(back_populates="resumes")
