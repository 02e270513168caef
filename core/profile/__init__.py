# Job-seeker profile aggregate: update/view types and merge rules

from .aggregate import (
    PROFILE_SCALAR_FIELDS,
    USER_FIELDS,
    apply_partial_update,
    apply_user_fields,
)
from .schemas import ProfileUpdate, ProfileView

__all__ = [
    "PROFILE_SCALAR_FIELDS",
    "USER_FIELDS",
    "apply_partial_update",
    "apply_user_fields",
    "ProfileUpdate",
    "ProfileView",
]
