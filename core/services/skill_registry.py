"""
Skill Registry.

Maps free-text skill names to canonical Skill rows, shared across all
profiles. Lookup uses the trimmed, case-folded key; the first spelling
seen becomes the display name.

Usage:
    with db.session() as session:
        registry = SkillRegistry(session)
        python = registry.resolve(" Python ")
        skills = registry.resolve_all({"Go", "go ", "Rust"})  # two Skills
"""

from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import StorageError
from core.logging import get_logger
from core.models import SKILL_NAME_MAX_LENGTH, Skill, normalize_skill_name
from core.repositories import SkillRepository

logger = get_logger("services.skills")

# Initial insert plus one retry after losing a race to another request
MAX_RESOLVE_ATTEMPTS = 2


class SkillRegistry:
    """Resolves raw skill names to canonical, deduplicated Skill records."""

    def __init__(self, session: Session, skill_repo: SkillRepository | None = None):
        self.session = session
        self.skill_repo = skill_repo or SkillRepository(session)

    def resolve(self, raw_name: str) -> Skill:
        """
        Return the canonical Skill for a name, creating it on first use.

        A concurrent request may insert the same key between our lookup and
        our insert. The insert runs in a SAVEPOINT so the unique constraint
        violation only rolls back that insert; the row is then re-read.

        Raises:
            ValueError: Blank or over-long name
            StorageError: Still no row after the retry
        """
        name, key = normalize_skill_name(raw_name)
        if not name:
            raise ValueError("Skill name must not be blank")
        if len(name) > SKILL_NAME_MAX_LENGTH:
            raise ValueError(f"Skill name exceeds {SKILL_NAME_MAX_LENGTH} characters")

        for attempt in range(MAX_RESOLVE_ATTEMPTS):
            skill = self.skill_repo.get_by_normalized_name(key)
            if skill is not None:
                return skill

            try:
                with self.session.begin_nested():
                    skill = self.skill_repo.create(name=name, normalized_name=key)
            except IntegrityError:
                logger.info("skill_insert_conflict", skill=name, attempt=attempt + 1)
                continue

            logger.info("skill_created", skill=name, skill_id=skill.id)
            return skill

        raise StorageError(f"Could not resolve skill {name!r}")

    def resolve_all(self, raw_names: Iterable[str]) -> set[Skill]:
        """
        Resolve every name; names equal after normalization collapse to one Skill.

        The result never has more members than the input. Sequences are
        resolved in order, so their first spelling wins for new skills;
        unordered inputs are sorted first to keep that choice stable.
        """
        if isinstance(raw_names, (set, frozenset)):
            raw_names = sorted(raw_names)
        return {self.resolve(raw_name) for raw_name in raw_names}


__all__ = ["SkillRegistry", "MAX_RESOLVE_ATTEMPTS"]
