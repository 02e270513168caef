"""
Repository pattern implementations for data access.

Repositories provide a clean abstraction over database operations.

Usage:
    from core.repositories import ProfileRepository
    from core.db import db

    with db.session() as session:
        repo = ProfileRepository(session)
        profile, created = repo.get_or_create(user_id)
"""

from .base import BaseRepository
from .profile_repository import ProfileRepository
from .skill_repository import SkillRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ProfileRepository",
    "SkillRepository",
]
