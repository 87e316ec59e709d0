from dataclasses import dataclass

from reportforge.report.models import ReportKind
from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.models import PDF_CONTENT_TYPE

DOWNLOAD_FILENAMES: dict[ReportKind, str] = {
    ReportKind.SIMILARITY: "Similarity_Report.pdf",
    ReportKind.AI: "AI_Writing_Report.pdf",
}


@dataclass(frozen=True)
class DownloadPayload:
    content: bytes
    filename: str
    content_type: str = PDF_CONTENT_TYPE

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Content-Disposition": self.content_disposition,
            "Content-Length": str(len(self.content)),
        }


class DownloadService:
    """Serves stored reports as file downloads."""

    def __init__(self, store: BaseArtifactStore) -> None:
        self._store = store

    def download(self, reference: str, kind: ReportKind) -> DownloadPayload:
        """Fetch a stored report for saving as a file.

        Raises:
            ArtifactNotFoundError: if the reference does not resolve.
        """
        return DownloadPayload(
            content=self._store.fetch(reference),
            filename=DOWNLOAD_FILENAMES[kind],
        )

    def signed_url(self, reference: str) -> str:
        return self._store.get_signed_url(reference)
