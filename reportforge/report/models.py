from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ReportKind(str, Enum):
    """The two report variants produced per submission."""

    SIMILARITY = "similarity"
    AI = "ai"


class PageKind(str, Enum):
    COVER = "cover"
    OVERVIEW = "overview"
    CONTENT = "content"


@dataclass(frozen=True)
class SubmissionMeta:
    """Submission metadata the reports are built from."""

    submission_id: str
    user_id: str
    filename: str
    media_type: str
    size_bytes: int
    created_at: datetime | None


@dataclass(frozen=True)
class TextMetrics:
    word_count: int
    char_count: int
    page_estimate: int


@dataclass(frozen=True)
class Page:
    """One paginator output block. ``index`` is 1-based within the content pages."""

    index: int
    text: str
    line_cost: int


@dataclass(frozen=True)
class CoverPayload:
    filename: str
    size_bytes: int
    word_count: int
    char_count: int
    page_estimate: int
    submitted_at: datetime


@dataclass(frozen=True)
class OverviewPayload:
    score: float
    headline: str
    score_label: str
    disclaimer: tuple[str, ...]


@dataclass(frozen=True)
class ContentPayload:
    page: Page


PagePayload = CoverPayload | OverviewPayload | ContentPayload


@dataclass(frozen=True)
class PageDescriptor:
    kind: PageKind
    number: int
    total_pages: int
    label: str
    payload: PagePayload


@dataclass(frozen=True)
class PagedDocumentModel:
    """Abstract paged report: cover, overview, then content pages."""

    submission_id: str
    report_kind: ReportKind
    title: str
    brand: str
    wrap_width: int
    pages: tuple[PageDescriptor, ...] = field(default_factory=tuple)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def content_pages(self) -> tuple[PageDescriptor, ...]:
        return tuple(p for p in self.pages if p.kind is PageKind.CONTENT)


@dataclass(frozen=True)
class ReportArtifact:
    """Rendered report bytes for one submission and report kind."""

    submission_id: str
    kind: ReportKind
    content: bytes
