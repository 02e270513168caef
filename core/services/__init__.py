"""
Core services with business logic.

Services provide a clean interface for business operations over
repositories and the blob store.
"""

from core.services.profile_service import ProfileService
from core.services.skill_registry import SkillRegistry

__all__ = [
    "ProfileService",
    "SkillRegistry",
]
