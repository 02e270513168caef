"""
SQLAlchemy models for the Job Profile Service.

Usage:
    from core.models import User, UserProfile, Skill
"""

from .base import Base
from .profile import UserProfile, profile_skills
from .skill import SKILL_NAME_MAX_LENGTH, Skill, normalize_skill_name
from .user import User

__all__ = [
    # Base
    "Base",
    # User
    "User",
    # Profile
    "UserProfile",
    "profile_skills",
    # Skill
    "Skill",
    "SKILL_NAME_MAX_LENGTH",
    "normalize_skill_name",
]
