from pathlib import Path

from studyparse.storage.base import BaseBlobStore
from studyparse.storage.exceptions import BlobNotFoundError, InvalidBlobKeyError, StorageError


class LocalBlobStore(BaseBlobStore):
    """Stores blobs as files under a root directory: {root}/{key}."""

    DEFAULT_ROOT = Path("/app/files")

    def __init__(self, root: Path | None = None, public_base_url: str | None = None) -> None:
        self._root = (root if root is not None else self.DEFAULT_ROOT).resolve()
        self._public_base_url = (public_base_url or "").rstrip("/")

    def get(self, key: str) -> bytes:
        path = self._resolve_path(key)
        if not path.is_file():
            raise BlobNotFoundError(f"Blob not found: {key}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read blob {key}: {exc}") from exc

    def put(self, key: str, data: bytes) -> None:
        path = self._resolve_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Failed to write blob {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        path = self._resolve_path(key)
        if not path.is_file():
            raise BlobNotFoundError(f"Blob not found: {key}")
        try:
            path.unlink()
        except OSError as exc:
            raise StorageError(f"Failed to delete blob {key}: {exc}") from exc

    def public_url(self, key: str) -> str | None:
        if not self._public_base_url:
            return None
        self._resolve_path(key)
        return f"{self._public_base_url}/{key.lstrip('/')}"

    def _resolve_path(self, key: str) -> Path:
        if not key or not key.strip("/"):
            raise InvalidBlobKeyError("Blob key must not be empty")
        path = (self._root / key.lstrip("/")).resolve()
        if not path.is_relative_to(self._root):
            raise InvalidBlobKeyError(f"Blob key escapes storage root: {key}")
        return path
