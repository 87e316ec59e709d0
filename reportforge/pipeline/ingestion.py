import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import PurePosixPath

from reportforge.extraction.media_types import guess_media_type, is_accepted, normalize_media_type
from reportforge.pipeline.exceptions import InvalidInputError
from reportforge.pipeline.models import SubmissionUpload
from reportforge.report.models import SubmissionMeta


def validate_upload(upload: SubmissionUpload, max_upload_bytes: int) -> SubmissionUpload:
    """Reject bad uploads before any external call.

    Returns the upload with a sanitized filename and a normalized media type
    (guessed from the filename when none was declared).

    Raises:
        InvalidInputError: for a missing file, filename or user, a size
            mismatch or overflow, or an unsupported media type.
    """
    if not upload.content:
        raise InvalidInputError("No file uploaded")
    filename = PurePosixPath(upload.filename.replace("\\", "/")).name.strip()
    if not filename:
        raise InvalidInputError("Filename is required")
    if not upload.user_id:
        raise InvalidInputError("user_id is required")
    if upload.size_bytes != len(upload.content):
        raise InvalidInputError(
            f"Declared size {upload.size_bytes} does not match {len(upload.content)} bytes received"
        )
    if upload.size_bytes > max_upload_bytes:
        raise InvalidInputError(
            f"File is {upload.size_bytes} bytes; the limit is {max_upload_bytes}"
        )

    media_type = normalize_media_type(upload.media_type) if upload.media_type else ""
    if not media_type or media_type == "application/octet-stream":
        media_type = guess_media_type(filename) or ""
    if not media_type or not is_accepted(media_type):
        raise InvalidInputError(
            f"Unsupported media type '{upload.media_type or media_type}' for {filename}"
        )
    return replace(upload, filename=filename, media_type=media_type)


def new_submission_meta(
    upload: SubmissionUpload,
    now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    new_id: Callable[[], str] = lambda: str(uuid.uuid4()),
) -> SubmissionMeta:
    """Assign the submission id and creation time for a validated upload."""
    return SubmissionMeta(
        submission_id=new_id(),
        user_id=upload.user_id,
        filename=upload.filename,
        media_type=upload.media_type,
        size_bytes=upload.size_bytes,
        created_at=now(),
    )
