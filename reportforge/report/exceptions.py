class ReportError(Exception):
    """Base exception for report model errors."""


class InvalidSubmissionMetadataError(ReportError):
    """Raised when required submission metadata is missing or invalid."""
