"""
Filesystem blob store for profile pictures and resumes.

Files live at <root>/<category>/<token>_<original name>. The token is a
fresh UUID per call, so concurrent uploads of identically named files
never share a path. Retrieval canonicalizes the requested path and
refuses anything that lands outside the configured root.
"""

import contextlib
import shutil
import uuid
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from core.constants import (
    ASSET_CATEGORIES,
    CONTENT_TYPES_BY_EXTENSION,
    DEFAULT_CONTENT_TYPE,
    FALLBACK_FILENAME,
    MAX_ORIGINAL_NAME_LENGTH,
    UNSAFE_FILENAME_CHARS,
    UPLOADS_URL_PREFIX,
)
from core.exceptions import AssetNotFound, StorageError
from core.logging import get_logger, truncate

logger = get_logger("storage.blob")


def sanitize_filename(filename: str | None) -> str:
    """
    Reduce a client-supplied file name to a safe single path component.

    Args:
        filename: Original filename, possibly with directories

    Returns:
        Final path component with unsafe characters replaced by "_"
    """
    if not filename:
        return FALLBACK_FILENAME

    # Remove path components (prevent path traversal)
    filename = filename.replace("\\", "/").split("/")[-1].strip()

    filename = UNSAFE_FILENAME_CHARS.sub("_", filename)

    if len(filename) > MAX_ORIGINAL_NAME_LENGTH:
        filename = filename[-MAX_ORIGINAL_NAME_LENGTH:]

    return filename or FALLBACK_FILENAME


def content_type_for(file_name: str) -> str:
    """Derive a display content type from the file suffix."""
    return CONTENT_TYPES_BY_EXTENSION.get(Path(file_name).suffix.lower(), DEFAULT_CONTENT_TYPE)


def retrieval_path(sub_directory: str, stored_name: str) -> str:
    return f"{UPLOADS_URL_PREFIX}/{sub_directory}/{stored_name}"


@dataclass(frozen=True)
class StoredAsset:
    """A stored file resolved for serving."""

    path: Path
    content_type: str

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def open(self) -> BinaryIO:
        return self.path.open("rb")


class BlobStore:
    """
    Stores and serves uploaded files under a single root directory.

    The root is injected (usually Settings.upload_root_path) and created,
    along with one directory per category, by initialize().
    """

    def __init__(self, root: Path | str, categories: tuple[str, ...] = ASSET_CATEGORIES):
        self.root = Path(root).expanduser().resolve()
        self.categories = categories

    def initialize(self) -> None:
        """Create the root and category directories. Safe to call repeatedly."""
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            for category in self.categories:
                (self.root / category).mkdir(exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not create upload directories under {self.root}") from exc
        logger.info("blob_store_initialized", root=str(self.root), categories=list(self.categories))

    def store(self, data: bytes | BinaryIO, original_name: str | None, sub_directory: str) -> str:
        """
        Persist a file and return its retrieval path.

        Args:
            data: File contents, as bytes or a readable binary stream
            original_name: Client-supplied file name (sanitized before use)
            sub_directory: Category directory, one of self.categories

        Returns:
            "/uploads/<sub_directory>/<stored name>"

        Raises:
            StorageError: Unknown category, or the file could not be written
        """
        if sub_directory not in self.categories:
            raise StorageError(f"Unknown upload category: {sub_directory}")

        stored_name = f"{uuid.uuid4()}_{sanitize_filename(original_name)}"
        directory = self.root / sub_directory
        target = directory / stored_name

        try:
            directory.mkdir(parents=True, exist_ok=True)
            # "wb" replaces an existing file with the same generated name
            with target.open("wb") as fh:
                if isinstance(data, (bytes, bytearray, memoryview)):
                    fh.write(data)
                else:
                    shutil.copyfileobj(data, fh)
        except OSError as exc:
            with contextlib.suppress(OSError):
                target.unlink(missing_ok=True)
            logger.error(
                "asset_store_failed",
                category=sub_directory,
                filename=truncate(original_name),
                error=str(exc),
            )
            raise StorageError(f"Could not store file {original_name!r}") from exc

        logger.info("asset_stored", category=sub_directory, stored_name=truncate(stored_name, 80))
        return retrieval_path(sub_directory, stored_name)

    def resolve(self, sub_directory: str, file_name: str) -> Path:
        """
        Map a category and stored name to a file under the root.

        Raises:
            AssetNotFound: Missing file, unknown category, or a path that
                escapes the root after canonicalization
        """
        try:
            candidate = (self.root / sub_directory / file_name).resolve()
        except (OSError, ValueError):
            raise AssetNotFound() from None

        if not candidate.is_relative_to(self.root):
            logger.warning(
                "asset_path_rejected",
                category=truncate(sub_directory),
                filename=truncate(file_name),
            )
            raise AssetNotFound()

        relative = candidate.relative_to(self.root)
        if len(relative.parts) != 2 or relative.parts[0] not in self.categories:
            raise AssetNotFound()

        if not candidate.is_file():
            raise AssetNotFound()

        return candidate

    def retrieve(self, sub_directory: str, file_name: str) -> StoredAsset:
        """Resolve a stored file for serving, with its display content type."""
        path = self.resolve(sub_directory, file_name)
        return StoredAsset(path=path, content_type=content_type_for(path.name))

    def iter_retrieval_paths(self) -> Iterator[str]:
        """Yield the retrieval path of every stored file."""
        for category in self.categories:
            directory = self.root / category
            if not directory.is_dir():
                continue
            for entry in sorted(directory.iterdir()):
                if entry.is_file():
                    yield retrieval_path(category, entry.name)
