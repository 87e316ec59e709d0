from dataclasses import dataclass, replace
from datetime import datetime

from reportforge.report.exceptions import InvalidSubmissionMetadataError
from reportforge.report.models import (
    ContentPayload,
    CoverPayload,
    OverviewPayload,
    Page,
    PageDescriptor,
    PagedDocumentModel,
    PageKind,
    PagePayload,
    ReportKind,
    SubmissionMeta,
    TextMetrics,
)


@dataclass(frozen=True)
class ReportTemplate:
    """Fixed wording for one report kind."""

    title: str
    overview_label: str
    content_label: str
    score_label: str
    headline_format: str
    disclaimer: tuple[str, ...]


TEMPLATES: dict[ReportKind, ReportTemplate] = {
    ReportKind.SIMILARITY: ReportTemplate(
        title="Similarity Report",
        overview_label="Originality Overview",
        content_label="Similarity Report",
        score_label="SIMILARITY INDEX",
        headline_format="{score}% Overall Similarity",
        disclaimer=(
            "The similarity index is the share of the submission that matches "
            "text found in other sources.",
            "A similarity match is not proof of plagiarism. Quotations, "
            "references and common phrases may be matched legitimately.",
            "Review every match in context before drawing conclusions about "
            "the originality of the work.",
        ),
    ),
    ReportKind.AI: ReportTemplate(
        title="AI Writing Report",
        overview_label="AI Writing Overview",
        content_label="AI Writing Submission",
        score_label="AI WRITING",
        headline_format="{score}% detected as AI",
        disclaimer=(
            "The percentage indicates the amount of qualifying text that is "
            "likely AI-generated or likely AI-paraphrased.",
            "AI detection may produce false positives and false negatives and "
            "should not be used as the sole basis for adverse actions.",
            "Scores below 20% carry a higher likelihood of false positives; "
            "human judgment and the applicable academic policy must decide "
            "whether misconduct has occurred.",
        ),
    ),
}

_REQUIRED_TEXT_FIELDS = ("submission_id", "user_id", "filename", "media_type")


def format_score(score: float) -> str:
    return f"{score:g}"


class DocumentAssembler:
    """Builds the paged model of a report: cover, overview, then content pages."""

    def __init__(self, brand: str, wrap_width: int) -> None:
        self._brand = brand
        self._wrap_width = wrap_width

    def assemble(
        self,
        meta: SubmissionMeta,
        metrics: TextMetrics,
        pages: list[Page],
        report_kind: ReportKind,
        score: float,
    ) -> PagedDocumentModel:
        """Assemble one report.

        ``score`` is supplied by the caller and printed on the overview page
        as-is. Every descriptor's ``total_pages`` equals ``2 + len(pages)``.

        Raises:
            InvalidSubmissionMetadataError: if a required metadata field is
                missing or ``size_bytes`` is negative.
        """
        submitted_at = self._validate(meta)
        template = TEMPLATES[report_kind]

        descriptors = [
            self._descriptor(
                PageKind.COVER,
                "Cover Page",
                CoverPayload(
                    filename=meta.filename,
                    size_bytes=meta.size_bytes,
                    word_count=metrics.word_count,
                    char_count=metrics.char_count,
                    page_estimate=metrics.page_estimate,
                    submitted_at=submitted_at,
                ),
            ),
            self._descriptor(
                PageKind.OVERVIEW,
                template.overview_label,
                OverviewPayload(
                    score=score,
                    headline=template.headline_format.format(score=format_score(score)),
                    score_label=template.score_label,
                    disclaimer=template.disclaimer,
                ),
            ),
        ]
        descriptors.extend(
            self._descriptor(PageKind.CONTENT, template.content_label, ContentPayload(page))
            for page in pages
        )

        # Numbers and totals are only known once the sequence is complete.
        total = len(descriptors)
        numbered = tuple(
            replace(descriptor, number=number, total_pages=total)
            for number, descriptor in enumerate(descriptors, start=1)
        )
        return PagedDocumentModel(
            submission_id=meta.submission_id,
            report_kind=report_kind,
            title=template.title,
            brand=self._brand,
            wrap_width=self._wrap_width,
            pages=numbered,
        )

    def _descriptor(self, kind: PageKind, label: str, payload: PagePayload) -> PageDescriptor:
        return PageDescriptor(
            kind=kind,
            number=0,
            total_pages=0,
            label=label,
            payload=payload,
        )

    def _validate(self, meta: SubmissionMeta) -> datetime:
        problems = [name for name in _REQUIRED_TEXT_FIELDS if not getattr(meta, name)]
        created_at = meta.created_at
        if created_at is None:
            problems.append("created_at")
        if meta.size_bytes < 0:
            problems.append("size_bytes")
        if problems or created_at is None:
            raise InvalidSubmissionMetadataError(
                f"Submission metadata is missing or invalid: {', '.join(problems)}"
            )
        return created_at
