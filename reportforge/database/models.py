from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SubmissionRecord:
    """Represents a row from the submissions table.

    A record is only written once all three artifact references are known.
    """

    id: str
    user_id: str
    filename: str
    media_type: str
    size_bytes: int
    created_at: datetime
    original_file_ref: str
    similarity_report_ref: str
    ai_report_ref: str

    def missing_references(self) -> list[str]:
        return [
            name
            for name in ("original_file_ref", "similarity_report_ref", "ai_report_ref")
            if not getattr(self, name)
        ]
