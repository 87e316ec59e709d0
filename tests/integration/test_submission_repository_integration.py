import uuid
from datetime import datetime, timedelta, timezone

import pytest

from reportforge.database.exceptions import SubmissionNotFoundError
from reportforge.database.models import SubmissionRecord
from reportforge.database.repositories.submission_repository import SubmissionRepository


def _make_record(user_id: str, created_at: datetime) -> SubmissionRecord:
    submission_id = str(uuid.uuid4())
    return SubmissionRecord(
        id=submission_id,
        user_id=user_id,
        filename="essay.pdf",
        media_type="application/pdf",
        size_bytes=2048,
        created_at=created_at,
        original_file_ref=f"local://submissions/{submission_id}/original.pdf",
        similarity_report_ref=f"local://submissions/{submission_id}/similarity.pdf",
        ai_report_ref=f"local://submissions/{submission_id}/ai.pdf",
    )


class TestSubmissionRepositoryIntegration:
    def test_insert_then_find(
        self, integration_pool: None, integration_cleanup: list[str]
    ) -> None:
        repo = SubmissionRepository()
        record = _make_record(f"user-{uuid.uuid4()}", datetime.now(timezone.utc))
        integration_cleanup.append(record.id)

        repo.insert(record)

        assert repo.find_by_id(record.id) == record

    def test_list_by_user_newest_first(
        self, integration_pool: None, integration_cleanup: list[str]
    ) -> None:
        repo = SubmissionRepository()
        user_id = f"user-{uuid.uuid4()}"
        base = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
        records = [_make_record(user_id, base + timedelta(minutes=i)) for i in range(3)]
        for record in records:
            integration_cleanup.append(record.id)
            repo.insert(record)

        result = repo.list_by_user(user_id)

        assert [r.id for r in result] == [r.id for r in reversed(records)]

    def test_list_respects_limit(
        self, integration_pool: None, integration_cleanup: list[str]
    ) -> None:
        repo = SubmissionRepository()
        user_id = f"user-{uuid.uuid4()}"
        base = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
        for i in range(3):
            record = _make_record(user_id, base + timedelta(minutes=i))
            integration_cleanup.append(record.id)
            repo.insert(record)

        assert len(repo.list_by_user(user_id, limit=2)) == 2

    def test_find_missing_raises(self, integration_pool: None) -> None:
        with pytest.raises(SubmissionNotFoundError):
            SubmissionRepository().find_by_id(str(uuid.uuid4()))
