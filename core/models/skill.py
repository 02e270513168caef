"""
Canonical skill SQLAlchemy model.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

SKILL_NAME_MAX_LENGTH = 100


def normalize_skill_name(raw_name: str) -> tuple[str, str]:
    """
    Return (display_name, lookup_key) for a free-text skill name.

    The display name is the trimmed spelling; the key also folds case so
    "Java", " Java " and "java" share one Skill row.
    """
    name = raw_name.strip()
    return name, name.casefold()


class Skill(Base):
    """
    Skill shared by many profiles.

    Attributes:
        name: Trimmed first-seen spelling, used for display
        normalized_name: Unique lookup key (trimmed, case-folded)
    """

    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(SKILL_NAME_MAX_LENGTH))
    normalized_name: Mapped[str] = mapped_column(
        String(SKILL_NAME_MAX_LENGTH), unique=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"Skill(id={self.id!r}, name={self.name!r})"
