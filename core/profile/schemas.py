"""
Pydantic types for profile reads and partial updates.

ProfileUpdate tracks which fields the caller actually sent through
model_fields_set, so "set to zero/empty" and "leave alone" differ.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.models import SKILL_NAME_MAX_LENGTH, User, UserProfile


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    Rules:
        - Profile scalars present in the payload overwrite, including 0,
          false and null (null clears the nullable text fields).
        - skills absent or null leaves skills alone; a list, even empty,
          replaces them.
        - full_name / phone_number are applied only when present and non-null.
    """

    model_config = ConfigDict(extra="ignore")

    # User-level fields
    full_name: str | None = Field(default=None, max_length=255)
    phone_number: str | None = Field(default=None, max_length=50)

    # Profile fields
    target_role: str | None = Field(default=None, max_length=255)
    experience_years: int = Field(default=0, ge=0)
    bio: str | None = None
    remote_only: bool = False
    preferred_location: str | None = Field(default=None, max_length=255)
    min_salary: int = Field(default=0, ge=0)
    github_profile: str | None = Field(default=None, max_length=512)
    linkedin_profile: str | None = Field(default=None, max_length=512)
    skills: list[str] | None = None

    @field_validator("skills")
    @classmethod
    def validate_skill_names(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        for name in v:
            stripped = name.strip()
            if not stripped:
                raise ValueError("Skill names must not be blank")
            if len(stripped) > SKILL_NAME_MAX_LENGTH:
                raise ValueError(f"Skill names must be at most {SKILL_NAME_MAX_LENGTH} characters")
        return v


class ProfileView(BaseModel):
    """Flattened user + profile view returned to the owner."""

    model_config = ConfigDict(from_attributes=True)

    full_name: str | None = None
    email: str
    phone_number: str | None = None
    target_role: str | None = None
    experience_years: int = 0
    bio: str | None = None
    skills: list[str] = Field(default_factory=list)
    remote_only: bool = False
    preferred_location: str | None = None
    min_salary: int = 0
    github_profile: str | None = None
    linkedin_profile: str | None = None
    profile_picture_url: str | None = None
    resume_url: str | None = None

    @classmethod
    def from_models(cls, user: User, profile: UserProfile | None) -> "ProfileView":
        """Combine a user with its profile; missing profile means defaults."""
        view = cls(full_name=user.full_name, email=user.email, phone_number=user.phone_number)
        if profile is None:
            return view

        return view.model_copy(
            update={
                "target_role": profile.target_role,
                "experience_years": profile.experience_years or 0,
                "bio": profile.bio,
                "skills": profile.skill_names,
                "remote_only": bool(profile.remote_only),
                "preferred_location": profile.preferred_location,
                "min_salary": profile.min_salary or 0,
                "github_profile": profile.github_profile,
                "linkedin_profile": profile.linkedin_profile,
                "profile_picture_url": profile.profile_picture_url,
                "resume_url": profile.resume_url,
            }
        )
