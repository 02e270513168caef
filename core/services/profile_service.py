"""
Profile Service.

Orchestrates the skill registry, blob store and profile aggregate for an
authenticated principal. Holds no state between requests: every call works
inside the caller's session, and the caller owns commit/rollback.

Usage:
    with db.session() as session:
        service = ProfileService(session, blob_store)
        service.update_profile(user_id, ProfileUpdate(bio="hi", skills=["Go"]))
        view = service.get_profile(user_id)
"""

from sqlalchemy.orm import Session

from core.constants import AssetKind
from core.exceptions import EmptyUpload, UserNotFound
from core.logging import LogContext, get_logger, truncate
from core.models import User, UserProfile
from core.profile import ProfileUpdate, ProfileView, apply_partial_update, apply_user_fields
from core.repositories import ProfileRepository, UserRepository
from core.storage import BlobStore

from .skill_registry import SkillRegistry

logger = get_logger("services.profile")


class ProfileService:
    """Fetch, update and attach assets to a user's profile."""

    def __init__(
        self,
        session: Session,
        blob_store: BlobStore,
        skill_registry: SkillRegistry | None = None,
    ):
        self.session = session
        self.blob_store = blob_store
        self.users = UserRepository(session)
        self.profiles = ProfileRepository(session)
        self.skill_registry = skill_registry or SkillRegistry(session)

    def _load_user(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            logger.error("principal_without_user", user_id=user_id)
            raise UserNotFound(user_id)
        return user

    def get_or_create_profile(self, user_id: int) -> UserProfile:
        """Load the user's profile, inserting an empty one on first write."""
        profile, _ = self.profiles.get_or_create(user_id)
        return profile

    def get_profile(self, user_id: int) -> ProfileView:
        """
        Flattened view of the user and their profile.

        Never creates a profile; a user without one gets default values.

        Raises:
            UserNotFound: The principal has no user record
        """
        user = self._load_user(user_id)
        profile = self.profiles.get_by_user_id(user_id)
        return ProfileView.from_models(user, profile)

    def update_profile(self, user_id: int, update: ProfileUpdate) -> UserProfile:
        """
        Apply a partial update to the user and their profile.

        Skill names are resolved before any field is written, so a failed
        resolution leaves the profile untouched. Applying the same update
        twice yields the same stored state.

        Raises:
            UserNotFound: The principal has no user record
        """
        with LogContext(user_id=user_id, operation="update_profile"):
            user = self._load_user(user_id)

            skills = None
            if update.skills is not None:
                skills = self.skill_registry.resolve_all(update.skills)

            profile = self.get_or_create_profile(user_id)

            user_fields = apply_user_fields(user, update)
            apply_partial_update(profile, update, skills=skills)
            self.session.flush()

            logger.info(
                "profile_updated",
                fields=sorted(update.model_fields_set),
                user_fields=user_fields,
                skill_count=len(profile.skills),
            )
            return profile

    def attach_asset(
        self,
        user_id: int,
        kind: AssetKind,
        data: bytes,
        original_name: str | None,
    ) -> str:
        """
        Store an uploaded file and point the profile at it.

        The previously referenced file, if any, is left on disk.

        Returns:
            Retrieval path of the stored file

        Raises:
            UserNotFound: The principal has no user record
            EmptyUpload: The payload has zero bytes
            StorageError: The file could not be written
        """
        with LogContext(user_id=user_id, operation="attach_asset", asset_kind=kind.value):
            if not data:
                logger.warning("asset_upload_empty", filename=truncate(original_name))
                raise EmptyUpload("No file uploaded")

            self._load_user(user_id)
            profile = self.get_or_create_profile(user_id)

            url = self.blob_store.store(data, original_name, kind.sub_directory)
            setattr(profile, kind.profile_field, url)
            self.session.flush()

            logger.info("asset_attached", field=kind.profile_field)
            return url


__all__ = ["ProfileService"]
