class StorageError(Exception):
    """Base exception for all blob storage errors."""


class BlobNotFoundError(StorageError):
    """Raised when no blob is stored under the requested key."""


class InvalidBlobKeyError(StorageError):
    """Raised when a key is empty or resolves outside the storage root."""


class UnsupportedStorageDiskError(StorageError):
    """Raised when the configured storage disk type is not supported."""
