from datetime import datetime, timezone

import pytest

from reportforge.extraction.media_types import DOCX, PDF, PLAIN_TEXT
from reportforge.pipeline.exceptions import InvalidInputError
from reportforge.pipeline.ingestion import new_submission_meta, validate_upload
from reportforge.pipeline.models import SubmissionUpload

LIMIT = 1024


def _make_upload(
    content: bytes = b"%PDF-1.4 body",
    filename: str = "essay.pdf",
    media_type: str = PDF,
    size_bytes: int | None = None,
    user_id: str = "user-42",
) -> SubmissionUpload:
    return SubmissionUpload(
        content=content,
        filename=filename,
        media_type=media_type,
        size_bytes=len(content) if size_bytes is None else size_bytes,
        user_id=user_id,
    )


class TestValidateUpload:
    def test_accepts_valid_pdf(self) -> None:
        upload = validate_upload(_make_upload(), LIMIT)
        assert upload.media_type == PDF
        assert upload.filename == "essay.pdf"

    def test_empty_content_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="No file uploaded"):
            validate_upload(_make_upload(content=b""), LIMIT)

    def test_missing_filename_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="Filename is required"):
            validate_upload(_make_upload(filename="  "), LIMIT)

    def test_filename_is_reduced_to_basename(self) -> None:
        upload = validate_upload(_make_upload(filename="C:\\Users\\me\\essay.pdf"), LIMIT)
        assert upload.filename == "essay.pdf"

    def test_missing_user_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="user_id is required"):
            validate_upload(_make_upload(user_id=""), LIMIT)

    def test_size_mismatch_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="does not match"):
            validate_upload(_make_upload(size_bytes=3), LIMIT)

    def test_oversized_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="limit"):
            validate_upload(_make_upload(content=b"x" * (LIMIT + 1)), LIMIT)

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="image/png"):
            validate_upload(_make_upload(filename="scan.png", media_type="image/png"), LIMIT)

    def test_media_type_is_normalized(self) -> None:
        upload = validate_upload(
            _make_upload(filename="notes.txt", media_type="Text/Plain; charset=utf-8"), LIMIT
        )
        assert upload.media_type == PLAIN_TEXT

    def test_media_type_guessed_from_filename(self) -> None:
        upload = validate_upload(
            _make_upload(filename="essay.docx", media_type="application/octet-stream"), LIMIT
        )
        assert upload.media_type == DOCX


class TestNewSubmissionMeta:
    def test_copies_upload_fields(self) -> None:
        created = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
        meta = new_submission_meta(
            _make_upload(), now=lambda: created, new_id=lambda: "sub-1"
        )
        assert meta.submission_id == "sub-1"
        assert meta.user_id == "user-42"
        assert meta.filename == "essay.pdf"
        assert meta.size_bytes == len(b"%PDF-1.4 body")
        assert meta.created_at == created

    def test_defaults_assign_uuid_and_utc_time(self) -> None:
        meta = new_submission_meta(_make_upload())
        assert len(meta.submission_id) == 36
        assert meta.created_at is not None
        assert meta.created_at.tzinfo is timezone.utc
