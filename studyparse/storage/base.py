from abc import ABC, abstractmethod


class BaseBlobStore(ABC):
    """Byte-addressable blob store keyed by storage path."""

    @abstractmethod
    def get(self, key: str) -> bytes:
        """Return the bytes stored under ``key``.

        Raises:
            BlobNotFoundError: if nothing is stored under ``key``.
        """

    @abstractmethod
    def put(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any previous blob."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the blob stored under ``key``.

        Raises:
            BlobNotFoundError: if nothing is stored under ``key``.
        """

    @abstractmethod
    def public_url(self, key: str) -> str | None:
        """URL an external service can fetch the blob from, if one exists."""
