"""Application model."""

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from applytrack.models.base import Base

if TYPE_CHECKING:
    from applytrack.models.job import Job
    from applytrack.models.user import User


class ApplicationStatus(str, Enum):
    """Outcome of an application."""

    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"


class Application(Base):
    """Application a user sent to one of their jobs."""

    __tablename__ = "applications"
    __table_args__ = (
        Index("ix_applications_user_created", "user_id", "created_at"),
        Index("ix_applications_user_status", "user_id", "status"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    job_id: Mapped[int | None] = mapped_column(ForeignKey("jobs.id", ondelete="SET NULL"))

    # Snapshot of the job at application time
    job_title: Mapped[str | None] = mapped_column(String(500))
    company: Mapped[str | None] = mapped_column(String(255))
    website: Mapped[str | None] = mapped_column(String(500))

    status: Mapped[ApplicationStatus] = mapped_column(
        SQLEnum(
            ApplicationStatus,
            name="applicationstatus",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        default=ApplicationStatus.PENDING,
    )
    applied_at: Mapped[str | None] = mapped_column(String(64))  # client-supplied timestamp

    # Relationships
    user: Mapped["User"] = relationship(back_populates="applications")
    job: Mapped["Job | None"] = relationship(back_populates="applications")
