class StorageError(Exception):
    """Base exception for artifact store errors."""


class UploadFailedError(StorageError):
    """Raised when an artifact cannot be written to the store."""


class ArtifactNotFoundError(StorageError):
    """Raised when a reference does not resolve to a stored artifact."""
