"""
Profile management endpoints.

All routes act on the authenticated principal's own profile.
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from core.config import get_settings
from core.constants import AssetKind
from core.logging import get_logger, truncate
from core.services import ProfileService

from ..auth.dependencies import get_current_principal
from ..dependencies import get_profile_service
from ..schemas import AssetUploadResponse, MessageResponse, ProfileResponse, ProfileUpdateRequest

logger = get_logger("profile")

router = APIRouter(prefix="/profile", tags=["profile"])


def _read_upload(file: UploadFile) -> bytes:
    """
    Read an uploaded file, enforcing the configured size limit.

    Reads at most one byte past the limit so oversized bodies are not
    buffered in full.
    """
    max_size = get_settings().max_upload_size_bytes
    content = file.file.read(max_size + 1)
    if len(content) > max_size:
        logger.warning(
            "upload_too_large",
            filename=truncate(file.filename),
            max_size_bytes=max_size,
        )
        raise HTTPException(
            status_code=413,
            detail=f"File size must be less than {max_size // (1024 * 1024)}MB",
        )
    return content


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    user_id: int = Depends(get_current_principal),
    service: ProfileService = Depends(get_profile_service),
):
    """Get the current user's profile (defaults when none exists yet)."""
    return service.get_profile(user_id)


@router.post("/setup", response_model=MessageResponse)
def setup_profile(
    payload: ProfileUpdateRequest,
    user_id: int = Depends(get_current_principal),
    service: ProfileService = Depends(get_profile_service),
):
    """
    Create or partially update the current user's profile.

    Fields left out of the payload are not touched; `skills`, when sent,
    replaces the whole skill set.
    """
    service.update_profile(user_id, payload)
    return MessageResponse(message="Profile updated successfully!")


@router.put("", response_model=MessageResponse)
def update_profile(
    payload: ProfileUpdateRequest,
    user_id: int = Depends(get_current_principal),
    service: ProfileService = Depends(get_profile_service),
):
    """Same as POST /setup."""
    service.update_profile(user_id, payload)
    return MessageResponse(message="Profile updated successfully!")


@router.post("/upload-photo", response_model=AssetUploadResponse)
def upload_profile_picture(
    file: UploadFile = File(...),
    user_id: int = Depends(get_current_principal),
    service: ProfileService = Depends(get_profile_service),
):
    """Store a profile picture and point the profile at it."""
    content = _read_upload(file)
    url = service.attach_asset(user_id, AssetKind.PICTURE, content, file.filename)
    return AssetUploadResponse(url=url)


@router.post("/upload-resume", response_model=AssetUploadResponse)
def upload_resume(
    file: UploadFile = File(...),
    user_id: int = Depends(get_current_principal),
    service: ProfileService = Depends(get_profile_service),
):
    """Store a resume and point the profile at it."""
    content = _read_upload(file)
    url = service.attach_asset(user_id, AssetKind.RESUME, content, file.filename)
    return AssetUploadResponse(url=url)
