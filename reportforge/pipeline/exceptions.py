from reportforge.pipeline.models import PipelineStage


class PipelineError(Exception):
    """Base exception for pipeline errors surfaced to callers."""


class InvalidInputError(PipelineError):
    """Raised when an upload is rejected before any external call."""


class ProcessingError(PipelineError):
    """Raised when a pipeline stage fails. The stage's error is chained as ``__cause__``."""

    def __init__(self, stage: PipelineStage, reason: str) -> None:
        super().__init__(f"Processing failed at stage '{stage.value}': {reason}")
        self.stage = stage
        self.reason = reason


class StageTimeoutError(ProcessingError):
    """Raised when a bounded stage call exceeds its timeout."""
