"""
Serving of stored profile assets.

Mounted at the application root so retrieval paths returned by uploads
(/uploads/<category>/<name>) resolve directly.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from core.constants import UPLOADS_URL_PREFIX
from core.storage import BlobStore

from ..dependencies import get_blob_store

router = APIRouter(prefix=UPLOADS_URL_PREFIX, tags=["uploads"])


@router.get("/{folder}/{filename:path}")
def serve_file(
    folder: str,
    filename: str,
    blob_store: BlobStore = Depends(get_blob_store),
):
    """
    Return a stored file.

    The blob store re-checks that the resolved path stays under its root,
    whatever the router matched.
    """
    asset = blob_store.retrieve(folder, filename)
    return FileResponse(asset.path, media_type=asset.content_type)
