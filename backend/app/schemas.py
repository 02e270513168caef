"""
Pydantic schemas for request and response validation.

Profile payloads are the core types; they are re-exported here under the
request/response names the routers use.
"""

from pydantic import BaseModel, Field

from core.profile import ProfileUpdate, ProfileView

ProfileUpdateRequest = ProfileUpdate
ProfileResponse = ProfileView


class MessageResponse(BaseModel):
    message: str


class AssetUploadResponse(BaseModel):
    url: str = Field(description="Retrieval path of the stored file, e.g. /uploads/resumes/<name>")


__all__ = [
    "ProfileUpdateRequest",
    "ProfileResponse",
    "MessageResponse",
    "AssetUploadResponse",
]
