from typing import Any

import psycopg
from psycopg.rows import dict_row

from reportforge.database.connection import get_connection
from reportforge.database.exceptions import PersistenceFailedError, SubmissionNotFoundError
from reportforge.database.models import SubmissionRecord

_COLUMNS = """
    id, user_id, filename, media_type, size_bytes, created_at,
    original_file_ref, similarity_report_ref, ai_report_ref
"""


class SubmissionRepository:
    """Database operations for the submissions table."""

    def insert(self, record: SubmissionRecord) -> None:
        """Insert a fully populated submission.

        Raises:
            ValueError: if any artifact reference is unset.
            PersistenceFailedError: on database errors.
        """
        missing = record.missing_references()
        if missing:
            raise ValueError(
                f"Submission {record.id} is missing references: {', '.join(missing)}"
            )
        try:
            with get_connection() as conn:
                conn.execute(
                    f"""
                    INSERT INTO submissions ({_COLUMNS})
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    (
                        record.id,
                        record.user_id,
                        record.filename,
                        record.media_type,
                        record.size_bytes,
                        record.created_at,
                        record.original_file_ref,
                        record.similarity_report_ref,
                        record.ai_report_ref,
                    ),
                )
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceFailedError(
                f"Failed to insert submission {record.id}: {exc}"
            ) from exc

    def list_by_user(self, user_id: str, limit: int = 20) -> list[SubmissionRecord]:
        """Return the user's submissions, most recent first."""
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        SELECT {_COLUMNS}
                        FROM submissions
                        WHERE user_id = %s
                        ORDER BY created_at DESC
                        LIMIT %s
                        """,
                        (user_id, limit),
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise PersistenceFailedError(
                f"Failed to list submissions for user {user_id}: {exc}"
            ) from exc
        return [self._to_record(row) for row in rows]

    def find_by_id(self, submission_id: str) -> SubmissionRecord:
        """Find a submission by id.

        Raises:
            SubmissionNotFoundError: if no submission with this id exists.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"SELECT {_COLUMNS} FROM submissions WHERE id = %s",
                        (submission_id,),
                    )
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise PersistenceFailedError(
                f"Failed to load submission {submission_id}: {exc}"
            ) from exc

        if row is None:
            raise SubmissionNotFoundError(f"Submission {submission_id} not found")
        return self._to_record(row)

    def _to_record(self, row: dict[str, Any]) -> SubmissionRecord:
        return SubmissionRecord(
            id=str(row["id"]),
            user_id=row["user_id"],
            filename=row["filename"],
            media_type=row["media_type"],
            size_bytes=row["size_bytes"],
            created_at=row["created_at"],
            original_file_ref=row["original_file_ref"],
            similarity_report_ref=row["similarity_report_ref"],
            ai_report_ref=row["ai_report_ref"],
        )
