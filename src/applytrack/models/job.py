"""Job model."""

from typing import TYPE_CHECKING

from sqlalchemy import JSON, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applytrack.models.base import Base

if TYPE_CHECKING:
    from applytrack.models.application import Application
    from applytrack.models.user import User


class Job(Base):
    """Job posting saved by a user."""

    __tablename__ = "jobs"
    __table_args__ = (
        Index("ix_jobs_user_created", "user_id", "created_at"),
        Index("ix_jobs_search", "title", "company", "location"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))

    # Basic info
    title: Mapped[str] = mapped_column(String(500))
    company: Mapped[str] = mapped_column(String(255))
    location: Mapped[str | None] = mapped_column(String(255))

    # Details
    salary: Mapped[str | None] = mapped_column(String(255))
    type: Mapped[str | None] = mapped_column(String(100))  # Full-time, Contract, ...
    description: Mapped[str | None] = mapped_column(Text)
    skills: Mapped[list[str] | None] = mapped_column(JSON)

    # Source
    website: Mapped[str | None] = mapped_column(String(500))
    posted: Mapped[str | None] = mapped_column(String(100))  # free text, e.g. "2 days ago"

    # Relationships
    user: Mapped["User"] = relationship(back_populates="jobs")
    applications: Mapped[list["Application"]] = relationship(back_populates="job")
