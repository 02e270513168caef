"""Skill repository."""

from core.models import Skill

from .base import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    """Repository for Skill lookups. Skills are never deleted."""

    model = Skill

    def get_by_normalized_name(self, normalized_name: str) -> Skill | None:
        return (
            self.session.query(Skill).filter(Skill.normalized_name == normalized_name).one_or_none()
        )

    def list_names(self) -> list[str]:
        """All canonical display names, alphabetically."""
        return [name for (name,) in self.session.query(Skill.name).order_by(Skill.name).all()]
