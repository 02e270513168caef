"""
Job-seeker profile SQLAlchemy model.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .skill import Skill
    from .user import User


# Many-to-many between profiles and skills. Removing a profile drops its
# links only; skills stay for other profiles.
profile_skills = Table(
    "profile_skills",
    Base.metadata,
    Column(
        "profile_id",
        ForeignKey("user_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("skill_id", ForeignKey("skills.id"), primary_key=True),
)


class UserProfile(Base):
    """
    Job-seeker profile, one per user, created lazily on first write.

    Attributes:
        target_role: Role the user is looking for
        experience_years: Years of professional experience
        remote_only: Only interested in remote positions
        min_salary: Minimum acceptable salary
        profile_picture_url: Retrieval path of the uploaded picture
        resume_url: Retrieval path of the uploaded resume
        skills: Canonical skills (set semantics)
    """

    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True
    )
    target_role: Mapped[str | None] = mapped_column(String(255), nullable=True)
    experience_years: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    remote_only: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    preferred_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    min_salary: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    github_profile: Mapped[str | None] = mapped_column(String(512), nullable=True)
    linkedin_profile: Mapped[str | None] = mapped_column(String(512), nullable=True)
    profile_picture_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="profile")
    skills: Mapped[set["Skill"]] = relationship(
        "Skill", secondary=profile_skills, collection_class=set
    )

    @property
    def skill_names(self) -> list[str]:
        """Sorted display names of attached skills."""
        return sorted(skill.name for skill in self.skills)
