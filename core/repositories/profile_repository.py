"""Job-seeker profile repository."""

from sqlalchemy.exc import IntegrityError

from core.exceptions import StorageError
from core.logging import get_logger
from core.models import UserProfile

from .base import BaseRepository

logger = get_logger("repository.profile")

# Initial attempt plus one retry after losing an insert race
MAX_CREATE_ATTEMPTS = 2


class ProfileRepository(BaseRepository[UserProfile]):
    """Repository for UserProfile operations."""

    model = UserProfile

    def get_by_user_id(self, user_id: int) -> UserProfile | None:
        """Get profile by user ID."""
        return (
            self.session.query(UserProfile).filter(UserProfile.user_id == user_id).one_or_none()
        )

    def has_profile(self, user_id: int) -> bool:
        """Check if a user has a profile (efficient exists query)."""
        return self.exists_where(user_id=user_id)

    def get_or_create(self, user_id: int) -> tuple[UserProfile, bool]:
        """
        Load the user's profile, inserting an empty one if none exists.

        The insert runs inside a SAVEPOINT; if a concurrent request created
        the row first, the unique constraint on user_id fires and the
        existing row is returned instead.

        Returns:
            Tuple of (profile, created)
        """
        for attempt in range(MAX_CREATE_ATTEMPTS):
            profile = self.get_by_user_id(user_id)
            if profile is not None:
                return profile, False

            try:
                with self.session.begin_nested():
                    profile = UserProfile(user_id=user_id, skills=set())
                    self.session.add(profile)
                    self.session.flush()
            except IntegrityError:
                logger.info("profile_insert_conflict", user_id=user_id, attempt=attempt + 1)
                continue

            logger.info("profile_created", user_id=user_id)
            return profile, True

        raise StorageError(f"Could not create profile for user {user_id}")

    def referenced_asset_urls(self) -> set[str]:
        """Every picture/resume retrieval path some profile points at."""
        rows = self.session.query(UserProfile.profile_picture_url, UserProfile.resume_url).all()
        return {url for row in rows for url in row if url}
