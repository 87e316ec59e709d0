class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedMediaTypeError(ExtractionError):
    """Raised when no extractor is registered for the declared media type."""


class ExtractionFailedError(ExtractionError):
    """Raised when the underlying conversion fails (corrupt, encrypted, empty stream)."""
