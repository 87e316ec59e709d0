from reportforge.config.settings import Settings
from reportforge.database.repositories.submission_repository import SubmissionRepository
from reportforge.detection.factory import ScoreProviderFactory
from reportforge.extraction.factory import ExtractorFactory
from reportforge.logging.logger import Log
from reportforge.pipeline.exceptions import ProcessingError, StageTimeoutError
from reportforge.pipeline.ingestion import new_submission_meta, validate_upload
from reportforge.pipeline.models import (
    PipelineContext,
    PipelineStage,
    StageFailure,
    SubmissionResponse,
    SubmissionUpload,
)
from reportforge.pipeline.steps import (
    ExtractTextStep,
    PersistSubmissionStep,
    PipelineStep,
    RenderReportsStep,
    UploadArtifactsStep,
)
from reportforge.rendering.factory import RenderEngineFactory
from reportforge.report.assembler import DocumentAssembler
from reportforge.report.paginator import PaginatorFactory
from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.factory import ArtifactStoreFactory


class ReportPipeline:
    """Runs one submission through its steps, one after another.

    Pipeline: received -> extracting -> extracted -> rendering_similarity ->
    rendering_ai -> uploading -> persisting -> complete. Any step error moves
    the submission to ``failed`` and is raised as a single ProcessingError.
    Nothing is retried here.
    """

    def __init__(self, steps: list[PipelineStep], max_upload_bytes: int) -> None:
        self._steps = steps
        self._max_upload_bytes = max_upload_bytes

    def submit(self, upload: SubmissionUpload) -> SubmissionResponse:
        """Validate an upload and process it.

        Raises:
            InvalidInputError: if the upload is rejected (no side effects).
            ProcessingError: if any stage fails.
        """
        upload = validate_upload(upload, self._max_upload_bytes)
        context = PipelineContext(upload=upload, meta=new_submission_meta(upload))
        self.process(context)
        return context.response()

    def process(self, context: PipelineContext) -> PipelineContext:
        Log.info(
            f"Processing {context.upload.filename} ({context.upload.size_bytes} bytes)",
            submission_id=context.submission_id,
            user_id=context.meta.user_id,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except TimeoutError as exc:
            raise self._fail(context, StageTimeoutError(context.stage, str(exc))) from exc
        except Exception as exc:
            raise self._fail(context, ProcessingError(context.stage, str(exc))) from exc
        context.advance(PipelineStage.COMPLETE)
        Log.info("Submission complete", submission_id=context.submission_id)
        return context

    def _fail(self, context: PipelineContext, error: ProcessingError) -> ProcessingError:
        context.failure = StageFailure(stage=error.stage, reason=error.reason)
        context.advance(PipelineStage.FAILED)
        Log.error(
            f"Submission failed at {error.stage.value}: {error.reason}",
            submission_id=context.submission_id,
        )
        return error


def build_pipeline(
    settings: Settings,
    submission_repo: SubmissionRepository | None = None,
    store: BaseArtifactStore | None = None,
) -> ReportPipeline:
    """Build a ReportPipeline with all required adapters."""
    steps: list[PipelineStep] = [
        ExtractTextStep(
            extractor=ExtractorFactory.create(settings),
            timeout_seconds=settings.extraction_timeout_seconds,
        ),
        RenderReportsStep(
            paginator=PaginatorFactory.create(settings),
            assembler=DocumentAssembler(
                brand=settings.report_brand,
                wrap_width=settings.pagination_wrap_width,
            ),
            score_provider=ScoreProviderFactory.create(settings),
            engine_factory=RenderEngineFactory(settings),
            words_per_page_estimate=settings.metrics_words_per_page_estimate,
        ),
        UploadArtifactsStep(
            store=store or ArtifactStoreFactory.create(settings),
            timeout_seconds=settings.upload_timeout_seconds,
        ),
        PersistSubmissionStep(submission_repo=submission_repo or SubmissionRepository()),
    ]
    return ReportPipeline(steps=steps, max_upload_bytes=settings.max_upload_bytes)
