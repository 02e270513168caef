"""User repository. Users are created by the auth service; lookups only here."""

from core.models import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    model = User

    def get_by_email(self, email: str) -> User | None:
        """Get user by email (exact match)."""
        return self.session.query(User).filter(User.email == email).first()
