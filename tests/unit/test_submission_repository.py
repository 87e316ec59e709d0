import uuid
from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import psycopg
import pytest

from reportforge.database.exceptions import PersistenceFailedError, SubmissionNotFoundError
from reportforge.database.models import SubmissionRecord
from reportforge.database.repositories.submission_repository import SubmissionRepository

SID = "0b9f3c1e-6a0e-4f5e-9a57-3f1f2d7b8c11"
CREATED_AT = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


def _make_record() -> SubmissionRecord:
    return SubmissionRecord(
        id=SID,
        user_id="user-42",
        filename="essay.pdf",
        media_type="application/pdf",
        size_bytes=265011,
        created_at=CREATED_AT,
        original_file_ref=f"local://submissions/{SID}/original.pdf",
        similarity_report_ref=f"local://submissions/{SID}/similarity.pdf",
        ai_report_ref=f"local://submissions/{SID}/ai.pdf",
    )


def _make_row() -> dict:
    record = _make_record()
    return {
        "id": uuid.UUID(SID),
        "user_id": record.user_id,
        "filename": record.filename,
        "media_type": record.media_type,
        "size_bytes": record.size_bytes,
        "created_at": record.created_at,
        "original_file_ref": record.original_file_ref,
        "similarity_report_ref": record.similarity_report_ref,
        "ai_report_ref": record.ai_report_ref,
    }


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    """Wire up a mock connection + cursor and return (mock_conn, mock_cursor)."""
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestInsert:
    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_inserts_and_commits(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)

        SubmissionRepository().insert(_make_record())

        sql, params = mock_conn.execute.call_args[0]
        assert "INSERT INTO submissions" in sql
        assert params[0] == SID
        assert params[-1] == f"local://submissions/{SID}/ai.pdf"
        mock_conn.commit.assert_called_once()

    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_rejects_record_without_references(self, mock_get_conn: MagicMock) -> None:
        record = replace(_make_record(), ai_report_ref="")

        with pytest.raises(ValueError, match="ai_report_ref"):
            SubmissionRepository().insert(record)

        mock_get_conn.assert_not_called()

    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_database_error_raises_persistence_failed(self, mock_get_conn: MagicMock) -> None:
        mock_conn, _cursor = _mock_connection(mock_get_conn)
        mock_conn.execute.side_effect = psycopg.OperationalError("connection lost")

        with pytest.raises(PersistenceFailedError, match="connection lost"):
            SubmissionRepository().insert(_make_record())


class TestListByUser:
    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_returns_records(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = [_make_row()]

        result = SubmissionRepository().list_by_user("user-42")

        assert result == [_make_record()]

    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_orders_newest_first_with_limit(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = []

        SubmissionRepository().list_by_user("user-42", limit=5)

        sql, params = mock_cursor.execute.call_args[0]
        assert "ORDER BY created_at DESC" in sql
        assert params == ("user-42", 5)

    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_empty_for_unknown_user(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = []

        assert SubmissionRepository().list_by_user("nobody") == []


class TestFindById:
    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_returns_record_with_string_id(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row()

        result = SubmissionRepository().find_by_id(SID)

        assert result.id == SID
        assert result.created_at == CREATED_AT

    @patch("reportforge.database.repositories.submission_repository.get_connection")
    def test_raises_when_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(SubmissionNotFoundError, match=f"Submission {SID} not found"):
            SubmissionRepository().find_by_id(SID)
