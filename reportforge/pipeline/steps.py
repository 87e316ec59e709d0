from abc import ABC, abstractmethod

from reportforge.database.models import SubmissionRecord
from reportforge.database.repositories.submission_repository import SubmissionRepository
from reportforge.detection.base import BaseScoreProvider
from reportforge.extraction.extractor import DocumentExtractor
from reportforge.logging.logger import Log
from reportforge.pipeline.models import RENDERING_STAGES, PipelineContext, PipelineStage
from reportforge.rendering.factory import RenderEngineFactory
from reportforge.rendering.session import RenderSession
from reportforge.report.assembler import DocumentAssembler
from reportforge.report.metrics import compute_metrics
from reportforge.report.models import ReportArtifact, ReportKind
from reportforge.report.paginator import BasePaginator
from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.models import ArtifactKind
from reportforge.utils.timeouts import call_with_timeout


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentExtractor, timeout_seconds: float) -> None:
        self._extractor = extractor
        self._timeout_seconds = timeout_seconds

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(PipelineStage.EXTRACTING)
        context.extracted_text = call_with_timeout(
            self._timeout_seconds,
            self._extractor.extract,
            context.upload.content,
            context.upload.media_type,
        )
        context.advance(PipelineStage.EXTRACTED)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars",
            submission_id=context.submission_id,
        )
        return context


class RenderReportsStep(PipelineStep):
    """Builds both report models and renders them through one engine session."""

    KINDS = (ReportKind.SIMILARITY, ReportKind.AI)

    def __init__(
        self,
        paginator: BasePaginator,
        assembler: DocumentAssembler,
        score_provider: BaseScoreProvider,
        engine_factory: RenderEngineFactory,
        words_per_page_estimate: int,
    ) -> None:
        self._paginator = paginator
        self._assembler = assembler
        self._score_provider = score_provider
        self._engine_factory = engine_factory
        self._words_per_page_estimate = words_per_page_estimate

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(RENDERING_STAGES[self.KINDS[0]])
        context.metrics = compute_metrics(context.extracted_text, self._words_per_page_estimate)
        context.pages = self._paginator.paginate(context.extracted_text)
        Log.info(
            f"Paginated {context.metrics.word_count} words into {len(context.pages)} pages",
            submission_id=context.submission_id,
        )

        with RenderSession(self._engine_factory.create()) as session:
            for index, kind in enumerate(self.KINDS):
                if index:
                    context.advance(RENDERING_STAGES[kind])
                model = self._assembler.assemble(
                    context.meta,
                    context.metrics,
                    context.pages,
                    kind,
                    score=self._score_provider.score(context.extracted_text, kind),
                )
                context.models[kind] = model
                content = session.render(model)
                context.artifacts[kind] = ReportArtifact(
                    submission_id=context.submission_id,
                    kind=kind,
                    content=content,
                )
                Log.info(
                    f"Rendered {kind.value} report: {model.total_pages} pages, "
                    f"{len(content)} bytes",
                    submission_id=context.submission_id,
                )
        return context


class UploadArtifactsStep(PipelineStep):
    def __init__(self, store: BaseArtifactStore, timeout_seconds: float) -> None:
        self._store = store
        self._timeout_seconds = timeout_seconds

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(PipelineStage.UPLOADING)
        upload = context.upload
        context.references[ArtifactKind.ORIGINAL] = self._put(
            context,
            upload.content,
            ArtifactKind.ORIGINAL,
            filename=upload.filename,
            content_type=upload.media_type,
        )
        for report_kind, artifact_kind in (
            (ReportKind.SIMILARITY, ArtifactKind.SIMILARITY),
            (ReportKind.AI, ArtifactKind.AI),
        ):
            context.references[artifact_kind] = self._put(
                context, context.artifacts[report_kind].content, artifact_kind
            )
        return context

    def _put(
        self,
        context: PipelineContext,
        data: bytes,
        kind: ArtifactKind,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        reference = call_with_timeout(
            self._timeout_seconds,
            self._store.put,
            data,
            kind,
            context.submission_id,
            filename=filename,
            content_type=content_type,
        )
        Log.info(
            f"Uploaded {kind.value} artifact to {reference}",
            submission_id=context.submission_id,
        )
        return reference


class PersistSubmissionStep(PipelineStep):
    def __init__(self, submission_repo: SubmissionRepository) -> None:
        self._submission_repo = submission_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(PipelineStage.PERSISTING)
        meta = context.meta
        if meta.created_at is None:
            raise ValueError("SubmissionMeta.created_at must be set before persist")
        record = SubmissionRecord(
            id=meta.submission_id,
            user_id=meta.user_id,
            filename=meta.filename,
            media_type=meta.media_type,
            size_bytes=meta.size_bytes,
            created_at=meta.created_at,
            original_file_ref=context.references[ArtifactKind.ORIGINAL],
            similarity_report_ref=context.references[ArtifactKind.SIMILARITY],
            ai_report_ref=context.references[ArtifactKind.AI],
        )
        self._submission_repo.insert(record)
        context.record = record
        Log.info("Submission persisted", submission_id=context.submission_id)
        return context
