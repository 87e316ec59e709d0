from abc import ABC, abstractmethod

from reportforge.report.models import ReportKind


class BaseScoreProvider(ABC):
    """Contract for detection score sources shown on the overview page."""

    @abstractmethod
    def score(self, text: str, report_kind: ReportKind) -> float:
        """Return a percentage in ``[0, 100]`` for ``report_kind``.

        Args:
            text: Extracted submission text.
            report_kind: Which report the score is printed on.
        """
