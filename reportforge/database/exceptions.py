class DatabaseError(Exception):
    """Base exception for submission store errors."""


class PersistenceFailedError(DatabaseError):
    """Raised when a submission cannot be written or read."""


class SubmissionNotFoundError(DatabaseError):
    """Raised when a submission id has no row."""
