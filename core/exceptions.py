"""
Error taxonomy for the profile core.

The HTTP layer maps each class to a status code in one place
(backend/app/error_handlers.py); core code never builds responses.
"""


class ProfileServiceError(Exception):
    """Base class for all profile service failures."""


class Unauthenticated(ProfileServiceError):
    """No principal, or the supplied credentials could not be verified."""


class UserNotFound(ProfileServiceError):
    """A verified principal has no backing user record."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class EmptyUpload(ProfileServiceError):
    """An uploaded asset has zero bytes."""


class StorageError(ProfileServiceError):
    """A blob or a database row could not be written or read."""


class AssetNotFound(ProfileServiceError):
    """
    A requested asset does not resolve to a file under the blob root.

    Path traversal attempts raise this too, with the same message.
    """

    def __init__(self) -> None:
        super().__init__("Not found")


__all__ = [
    "ProfileServiceError",
    "Unauthenticated",
    "UserNotFound",
    "EmptyUpload",
    "StorageError",
    "AssetNotFound",
]
