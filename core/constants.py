"""
Application constants for the Job Profile Service.

Contains asset categories, the content-type table used when serving
stored files, and upload naming rules.
"""

import re
from enum import Enum

# =============================================================================
# Asset Categories
# =============================================================================

PROFILE_PICTURES_DIR = "profile-pictures"
RESUMES_DIR = "resumes"

ASSET_CATEGORIES = (PROFILE_PICTURES_DIR, RESUMES_DIR)

# Public prefix of every retrieval path: /uploads/<category>/<stored name>
UPLOADS_URL_PREFIX = "/uploads"


class AssetKind(str, Enum):
    """Kind of binary asset attached to a profile."""
    PICTURE = "picture"
    RESUME = "resume"

    @property
    def sub_directory(self) -> str:
        return PROFILE_PICTURES_DIR if self is AssetKind.PICTURE else RESUMES_DIR

    @property
    def profile_field(self) -> str:
        """UserProfile attribute that holds the retrieval path."""
        return "profile_picture_url" if self is AssetKind.PICTURE else "resume_url"


# =============================================================================
# Content Types (display only, no security role)
# =============================================================================

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES_BY_EXTENSION = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
}

# =============================================================================
# Upload Naming
# =============================================================================

# Characters other than (Unicode) word characters, "." and "-" are replaced in original file names
UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.-]")

MAX_ORIGINAL_NAME_LENGTH = 100

FALLBACK_FILENAME = "upload"
