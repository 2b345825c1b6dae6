from pathlib import Path

from studyparse.config.settings import Settings
from studyparse.storage.base import BaseBlobStore
from studyparse.storage.exceptions import UnsupportedStorageDiskError
from studyparse.storage.local_store import LocalBlobStore


class BlobStoreFactory:
    """Creates the blob store for the configured storage disk."""

    @classmethod
    def create(cls, settings: Settings, root: Path | None = None) -> BaseBlobStore:
        disk = settings.storage_disk.lower()
        if disk != "local":
            raise UnsupportedStorageDiskError(f"storage_disk '{disk}' is not supported")
        return LocalBlobStore(
            root=root if root is not None else Path(settings.storage_root),
            public_base_url=settings.storage_public_base_url,
        )
