"""Placeholder detection scores.

No analysis is performed: the configured values are returned for every
submission. A real detector implements BaseScoreProvider and is registered in
ScoreProviderFactory.
"""

from reportforge.detection.base import BaseScoreProvider
from reportforge.report.models import ReportKind


class PlaceholderScoreProvider(BaseScoreProvider):
    """Returns fixed scores per report kind."""

    def __init__(self, similarity_score: float, ai_score: float) -> None:
        for name, value in (("similarity_score", similarity_score), ("ai_score", ai_score)):
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be within [0, 100], got {value}")
        self._scores = {
            ReportKind.SIMILARITY: similarity_score,
            ReportKind.AI: ai_score,
        }

    def score(self, text: str, report_kind: ReportKind) -> float:
        _ = text
        return self._scores[report_kind]
