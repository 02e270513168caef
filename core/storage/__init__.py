"""
File storage for uploaded profile assets.

Usage:
    from core.storage import BlobStore

    store = BlobStore(settings.upload_root_path)
    store.initialize()
    url = store.store(data, "cv.pdf", "resumes")
"""

from .blob_store import BlobStore, StoredAsset, content_type_for, sanitize_filename

__all__ = ["BlobStore", "StoredAsset", "content_type_for", "sanitize_filename"]
