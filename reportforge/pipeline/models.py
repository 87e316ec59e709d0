from dataclasses import dataclass, field
from enum import Enum

from reportforge.database.models import SubmissionRecord
from reportforge.report.models import (
    PagedDocumentModel,
    Page,
    ReportArtifact,
    ReportKind,
    SubmissionMeta,
    TextMetrics,
)
from reportforge.storage.models import ArtifactKind


class PipelineStage(str, Enum):
    RECEIVED = "received"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    RENDERING_SIMILARITY = "rendering_similarity"
    RENDERING_AI = "rendering_ai"
    UPLOADING = "uploading"
    PERSISTING = "persisting"
    COMPLETE = "complete"
    FAILED = "failed"


RENDERING_STAGES: dict[ReportKind, PipelineStage] = {
    ReportKind.SIMILARITY: PipelineStage.RENDERING_SIMILARITY,
    ReportKind.AI: PipelineStage.RENDERING_AI,
}


@dataclass(frozen=True)
class SubmissionUpload:
    """One uploaded file as received at the ingestion boundary."""

    content: bytes
    filename: str
    media_type: str
    size_bytes: int
    user_id: str


@dataclass(frozen=True)
class StageFailure:
    stage: PipelineStage
    reason: str


@dataclass(frozen=True)
class SubmissionResponse:
    """What the caller receives on success."""

    submission_id: str
    similarity_report: str
    ai_report: str
    original_file: str


@dataclass(slots=True)
class PipelineContext:
    upload: SubmissionUpload
    meta: SubmissionMeta
    stage: PipelineStage = PipelineStage.RECEIVED
    history: list[PipelineStage] = field(default_factory=lambda: [PipelineStage.RECEIVED])
    extracted_text: str = ""
    metrics: TextMetrics | None = None
    pages: list[Page] = field(default_factory=list)
    models: dict[ReportKind, PagedDocumentModel] = field(default_factory=dict)
    artifacts: dict[ReportKind, ReportArtifact] = field(default_factory=dict)
    references: dict[ArtifactKind, str] = field(default_factory=dict)
    record: SubmissionRecord | None = None
    failure: StageFailure | None = None

    @property
    def submission_id(self) -> str:
        return self.meta.submission_id

    def advance(self, stage: PipelineStage) -> None:
        if self.stage in (PipelineStage.COMPLETE, PipelineStage.FAILED):
            raise RuntimeError(f"Submission {self.submission_id} is already {self.stage.value}")
        self.stage = stage
        self.history.append(stage)

    def response(self) -> SubmissionResponse:
        return SubmissionResponse(
            submission_id=self.submission_id,
            similarity_report=self.references[ArtifactKind.SIMILARITY],
            ai_report=self.references[ArtifactKind.AI],
            original_file=self.references[ArtifactKind.ORIGINAL],
        )
