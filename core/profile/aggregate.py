"""
Profile aggregate merge logic.

Pure in-memory functions: they mutate ORM instances but never touch the
session. Skill names must already be resolved to Skill rows.
"""

from core.models import Skill, User, UserProfile

from .schemas import ProfileUpdate

PROFILE_SCALAR_FIELDS = (
    "target_role",
    "experience_years",
    "bio",
    "remote_only",
    "preferred_location",
    "min_salary",
    "github_profile",
    "linkedin_profile",
)

USER_FIELDS = ("full_name", "phone_number")


def apply_user_fields(user: User, update: ProfileUpdate) -> list[str]:
    """
    Copy contact fields onto the user, skipping absent or null values.

    Returns:
        Names of the fields that were written
    """
    written = []
    for field in USER_FIELDS:
        value = getattr(update, field)
        if field in update.model_fields_set and value is not None:
            setattr(user, field, value)
            written.append(field)
    return written


def apply_partial_update(
    profile: UserProfile | None,
    update: ProfileUpdate,
    *,
    user_id: int | None = None,
    skills: set[Skill] | None = None,
) -> UserProfile:
    """
    Merge a partial update into a profile.

    Args:
        profile: Existing profile, or None to start a new one for user_id
        update: Incoming partial update
        user_id: Owner of the new profile when profile is None
        skills: Resolved skills replacing the current set, or None to keep it

    Returns:
        The updated (possibly new, not yet persisted) profile
    """
    if profile is None:
        if user_id is None:
            raise ValueError("user_id is required when creating a profile")
        profile = UserProfile(user_id=user_id, experience_years=0, remote_only=False, min_salary=0)

    for field in PROFILE_SCALAR_FIELDS:
        if field in update.model_fields_set:
            setattr(profile, field, getattr(update, field))

    if skills is not None:
        profile.skills = set(skills)

    return profile
