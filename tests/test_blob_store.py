"""Tests for the filesystem blob store."""

import io
import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from core.constants import PROFILE_PICTURES_DIR, RESUMES_DIR
from core.exceptions import AssetNotFound, StorageError
from core.storage import BlobStore, content_type_for, sanitize_filename


def _stored_name(url: str) -> str:
    return url.rsplit("/", 1)[1]


class TestInitialize:
    def test_creates_root_and_categories(self, tmp_path):
        store = BlobStore(tmp_path / "nested" / "uploads")
        store.initialize()

        assert (store.root / PROFILE_PICTURES_DIR).is_dir()
        assert (store.root / RESUMES_DIR).is_dir()

    def test_is_idempotent(self, blob_store):
        blob_store.initialize()
        blob_store.initialize()

        assert (blob_store.root / RESUMES_DIR).is_dir()

    def test_unwritable_root_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError):
            BlobStore(blocker / "uploads").initialize()


class TestStore:
    def test_returns_retrieval_path_and_writes_bytes(self, blob_store):
        url = blob_store.store(b"%PDF-1.7 resume", "cv.pdf", RESUMES_DIR)

        assert url.startswith("/uploads/resumes/")
        assert url.endswith("_cv.pdf")
        assert (blob_store.root / RESUMES_DIR / _stored_name(url)).read_bytes() == b"%PDF-1.7 resume"

    def test_accepts_stream(self, blob_store):
        url = blob_store.store(io.BytesIO(b"\x89PNG data"), "me.png", PROFILE_PICTURES_DIR)

        path = blob_store.resolve(PROFILE_PICTURES_DIR, _stored_name(url))
        assert path.read_bytes() == b"\x89PNG data"

    def test_same_name_twice_gives_distinct_paths(self, blob_store):
        first = blob_store.store(b"one", "cv.pdf", RESUMES_DIR)
        second = blob_store.store(b"two", "cv.pdf", RESUMES_DIR)

        assert first != second

    def test_concurrent_uploads_of_same_name_do_not_collide(self, blob_store):
        payloads = [f"resume of user {i}".encode() for i in range(16)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            urls = list(pool.map(lambda data: blob_store.store(data, "resume.pdf", RESUMES_DIR), payloads))

        assert len(set(urls)) == len(payloads)
        for url, data in zip(urls, payloads):
            assert blob_store.resolve(RESUMES_DIR, _stored_name(url)).read_bytes() == data

    def test_non_ascii_name_survives(self, blob_store):
        url = blob_store.store(b"%PDF", "résumé.pdf", RESUMES_DIR)

        assert _stored_name(url).endswith("_résumé.pdf")
        assert blob_store.retrieve(RESUMES_DIR, _stored_name(url)).content_type == "application/pdf"

    def test_original_name_path_components_are_dropped(self, blob_store):
        url = blob_store.store(b"x", "../../outside.sh", RESUMES_DIR)

        assert _stored_name(url).endswith("_outside.sh")
        assert "/" not in _stored_name(url)
        assert not (blob_store.root.parent / "outside.sh").exists()

    def test_unknown_category_raises(self, blob_store):
        with pytest.raises(StorageError):
            blob_store.store(b"x", "a.txt", "secrets")

    def test_write_failure_raises_storage_error(self, blob_store):
        category = blob_store.root / RESUMES_DIR
        os.rmdir(category)
        category.write_text("category replaced by a file")

        with pytest.raises(StorageError):
            blob_store.store(b"x", "cv.pdf", RESUMES_DIR)


class TestRetrieve:
    def test_returns_path_and_content_type(self, blob_store):
        url = blob_store.store(b"%PDF", "cv.pdf", RESUMES_DIR)

        asset = blob_store.retrieve(RESUMES_DIR, _stored_name(url))

        assert asset.content_type == "application/pdf"
        assert asset.size == 4
        with asset.open() as fh:
            assert fh.read() == b"%PDF"

    def test_missing_file(self, blob_store):
        with pytest.raises(AssetNotFound):
            blob_store.retrieve(RESUMES_DIR, "nope.pdf")

    @pytest.mark.parametrize(
        "sub_directory,file_name",
        [
            (RESUMES_DIR, "../../../etc/passwd"),
            (RESUMES_DIR, "../../secret.txt"),
            ("..", "secret.txt"),
            (RESUMES_DIR, "/etc/passwd"),
        ],
    )
    def test_traversal_is_not_found(self, blob_store, sub_directory, file_name):
        (blob_store.root.parent / "secret.txt").write_text("top secret")

        with pytest.raises(AssetNotFound):
            blob_store.retrieve(sub_directory, file_name)

    def test_traversal_and_missing_file_look_the_same(self, blob_store):
        with pytest.raises(AssetNotFound) as traversal:
            blob_store.retrieve(RESUMES_DIR, "../../../etc/passwd")
        with pytest.raises(AssetNotFound) as missing:
            blob_store.retrieve(RESUMES_DIR, "missing.pdf")

        assert str(traversal.value) == str(missing.value)

    def test_symlink_leaving_root_is_rejected(self, blob_store):
        outside = blob_store.root.parent / "outside.pdf"
        outside.write_bytes(b"outside")
        (blob_store.root / RESUMES_DIR / "link.pdf").symlink_to(outside)

        with pytest.raises(AssetNotFound):
            blob_store.retrieve(RESUMES_DIR, "link.pdf")

    def test_unknown_category_is_not_found(self, blob_store):
        (blob_store.root / "loose.txt").write_text("x")

        with pytest.raises(AssetNotFound):
            blob_store.retrieve("other", "loose.txt")
        with pytest.raises(AssetNotFound):
            blob_store.retrieve(".", "loose.txt")

    def test_iter_retrieval_paths(self, blob_store):
        picture = blob_store.store(b"p", "me.jpg", PROFILE_PICTURES_DIR)
        resume = blob_store.store(b"r", "cv.pdf", RESUMES_DIR)

        assert set(blob_store.iter_retrieval_paths()) == {picture, resume}


@pytest.mark.parametrize(
    "file_name,expected",
    [
        ("cv.pdf", "application/pdf"),
        ("photo.JPG", "image/jpeg"),
        ("photo.jpeg", "image/jpeg"),
        ("avatar.png", "image/png"),
        ("resume.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
        ("archive.tar.gz", "application/octet-stream"),
        ("no_extension", "application/octet-stream"),
    ],
)
def test_content_type_for(file_name, expected):
    assert content_type_for(file_name) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("cv.pdf", "cv.pdf"),
        ("C:\\Users\\me\\cv final.pdf", "cv_final.pdf"),
        ("../../etc/passwd", "passwd"),
        ("", "upload"),
        (None, "upload"),
        ("résumé.pdf", "résumé.pdf"),
        ("履歴書.pdf", "履歴書.pdf"),
        ("cv (1);rm.pdf", "cv__1__rm.pdf"),
        ("dir/", "upload"),
    ],
)
def test_sanitize_filename(raw, expected):
    assert sanitize_filename(raw) == expected
