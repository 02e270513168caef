"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Database sessions
- The blob store
- Services
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from core.config import get_settings
from core.db import get_db
from core.services import ProfileService
from core.storage import BlobStore

# =============================================================================
# Storage Dependencies
# =============================================================================


@lru_cache(maxsize=1)
def get_blob_store() -> BlobStore:
    """Process-wide blob store rooted at settings.upload_root."""
    return BlobStore(get_settings().upload_root_path)


# =============================================================================
# Service Dependencies
# =============================================================================


def get_profile_service(
    db: Session = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store),
) -> ProfileService:
    """Get ProfileService bound to the request session."""
    return ProfileService(db, blob_store)
