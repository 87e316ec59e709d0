"""Draws a PagedDocumentModel onto an A4 PDF with reportlab.

Every call builds a new canvas, so a retried render never reuses page state
from a failed attempt. ``render_document`` is a module-level function so the
process engine can ship it to its worker.
"""

import io
import textwrap

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from reportforge.rendering.exceptions import RenderFailedError
from reportforge.report.assembler import format_score
from reportforge.report.models import (
    ContentPayload,
    CoverPayload,
    OverviewPayload,
    PageDescriptor,
    PagedDocumentModel,
    ReportKind,
)

W, H = A4
LEFT = 22 * mm
RIGHT = W - 22 * mm
TOP_Y = H - 26 * mm
BOTTOM = 20 * mm
BODY_FONT_SIZE = 9
BODY_LEADING = 5.6 * mm

BRAND = colors.HexColor("#009bde")
ACCENT = {
    ReportKind.SIMILARITY: colors.HexColor("#e8452c"),
    ReportKind.AI: colors.HexColor("#009bde"),
}
GREY = colors.HexColor("#555555")
LINE = colors.HexColor("#e0e0e0")
CAUTION = colors.HexColor("#e8f4fb")
BLACK = colors.HexColor("#1a1a1a")
WHITE = colors.white


def format_file_size(size_bytes: int) -> str:
    size = float(size_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024 or unit == "MB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def render_document(model: PagedDocumentModel) -> bytes:
    """Render ``model`` to PDF bytes.

    Raises:
        RenderFailedError: on any layout or conversion error.
    """
    buf = io.BytesIO()
    try:
        c = canvas.Canvas(buf, pagesize=A4, pageCompression=1)
        c.setTitle(f"{model.title} - {model.submission_id}")
        c.setAuthor(model.brand)
        for descriptor in model.pages:
            header_footer(c, model, descriptor)
            payload = descriptor.payload
            if isinstance(payload, CoverPayload):
                draw_cover(c, model, payload)
            elif isinstance(payload, OverviewPayload):
                draw_overview(c, model, payload)
            elif isinstance(payload, ContentPayload):
                draw_content(c, model, payload)
            else:
                raise RenderFailedError(f"Unknown page payload {type(payload).__name__}")
            c.showPage()
        c.save()
    except RenderFailedError:
        raise
    except Exception as exc:
        raise RenderFailedError(f"reportlab render failed: {exc}") from exc
    return buf.getvalue()


def header_footer(c: canvas.Canvas, model: PagedDocumentModel, page: PageDescriptor) -> None:
    """Brand badge, "Page N of total" label and submission id, top and bottom."""
    label = f"Page {page.number} of {page.total_pages} - {page.label}"
    c.saveState()
    c.setStrokeColor(LINE)
    c.setLineWidth(0.5)
    c.line(18 * mm, H - 13 * mm, W - 18 * mm, H - 13 * mm)
    c.line(18 * mm, 13 * mm, W - 18 * mm, 13 * mm)
    for badge_y, text_y in ((H - 12 * mm, H - 8.5 * mm), (6 * mm, 9 * mm)):
        _brand_badge(c, model.brand, badge_y, text_y)
        c.setFillColor(GREY)
        c.setFont("Helvetica", 7)
        c.drawCentredString(W / 2, text_y, label)
        c.setFont("Helvetica", 6.5)
        c.drawRightString(W - 18 * mm, text_y, f"Submission ID  {model.submission_id}")
    c.restoreState()


def _brand_badge(c: canvas.Canvas, brand: str, badge_y: float, text_y: float) -> None:
    c.setFillColor(BRAND)
    c.roundRect(18 * mm, badge_y, 8 * mm, 7 * mm, 1.2 * mm, fill=1, stroke=0)
    c.setFillColor(WHITE)
    c.setFont("Helvetica-Bold", 6.5)
    c.drawCentredString(22 * mm, badge_y + 3.2 * mm, (brand[:1] or "r").lower() + "]")
    c.setFillColor(BRAND)
    c.setFont("Helvetica-Bold", 8)
    c.drawString(28 * mm, text_y, brand)


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


def draw_cover(c: canvas.Canvas, model: PagedDocumentModel, cover: CoverPayload) -> None:
    y = H - 45 * mm
    c.setFont("Helvetica-Bold", 18)
    c.setFillColor(BLACK)
    c.drawString(LEFT, y, model.title)
    y -= 10 * mm
    c.setFont("Helvetica-Bold", 13)
    c.drawString(LEFT, y, _truncate(cover.filename, 55))
    y -= 10 * mm
    c.setStrokeColor(LINE)
    c.setLineWidth(0.5)
    c.line(LEFT, y, RIGHT, y)
    y -= 12 * mm
    c.setFont("Helvetica-Bold", 11)
    c.drawString(LEFT, y, "Document Details")
    y -= 12 * mm

    submitted = cover.submitted_at.strftime("%b %d, %Y, %I:%M %p UTC")
    for key, value in (
        ("Submission ID", model.submission_id),
        ("Submission Date", submitted),
        ("File Name", _truncate(cover.filename, 60)),
        ("File Size", format_file_size(cover.size_bytes)),
    ):
        c.setFont("Helvetica", 7.5)
        c.setFillColor(GREY)
        c.drawString(LEFT, y, key)
        y -= 5 * mm
        c.setFont("Helvetica-Bold", 8.5)
        c.setFillColor(BLACK)
        c.drawString(LEFT, y, value)
        y -= 10 * mm

    bx, by, bw, bh = W / 2 + 15 * mm, H - 110 * mm, 60 * mm, 30 * mm
    c.setStrokeColor(LINE)
    c.rect(bx, by, bw, bh)
    sy = by + bh - 9 * mm
    for stat in (
        f"{cover.page_estimate:,} Pages",
        f"{cover.word_count:,} Words",
        f"{cover.char_count:,} Characters",
    ):
        c.setFont("Helvetica-Bold", 9)
        c.setFillColor(BLACK)
        c.drawString(bx + 4 * mm, sy, stat)
        sy -= 9 * mm


def draw_overview(c: canvas.Canvas, model: PagedDocumentModel, overview: OverviewPayload) -> None:
    accent = ACCENT.get(model.report_kind, BRAND)
    y = H - 40 * mm
    c.setFont("Helvetica-Bold", 36)
    c.setFillColor(accent)
    c.drawString(LEFT, y, f"{format_score(overview.score)}%")
    y -= 7 * mm
    c.setFont("Helvetica", 7)
    c.setFillColor(GREY)
    c.drawString(LEFT, y, overview.score_label)
    y -= 14 * mm
    c.setFont("Helvetica-Bold", 16)
    c.setFillColor(BLACK)
    c.drawString(LEFT, y, overview.headline)
    y -= 12 * mm

    lines = [
        wrapped
        for paragraph in overview.disclaimer
        for wrapped in textwrap.wrap(paragraph, 100) + [""]
    ]
    box_h = (len(lines) + 2) * 4.5 * mm
    c.setFillColor(CAUTION)
    c.setStrokeColor(LINE)
    c.roundRect(LEFT, y - box_h, RIGHT - LEFT, box_h, 2 * mm, fill=1, stroke=1)
    ty = y - 6 * mm
    c.setFont("Helvetica-Bold", 8)
    c.setFillColor(BLACK)
    c.drawString(LEFT + 3 * mm, ty, "Disclaimer")
    ty -= 6 * mm
    c.setFont("Helvetica", 7.5)
    c.setFillColor(GREY)
    for line in lines:
        c.drawString(LEFT + 3 * mm, ty, line)
        ty -= 4.5 * mm


def draw_content(c: canvas.Canvas, model: PagedDocumentModel, content: ContentPayload) -> None:
    """Draw one content page. Leading shrinks so the block always fits."""
    lines: list[str] = []
    for raw in content.page.text.split("\n"):
        lines.extend(textwrap.wrap(raw, model.wrap_width, drop_whitespace=False) or [""])

    available = TOP_Y - BOTTOM
    leading = BODY_LEADING
    if lines and len(lines) * leading > available:
        leading = available / len(lines)
    font_size = BODY_FONT_SIZE * leading / BODY_LEADING

    text = c.beginText(LEFT, TOP_Y)
    text.setFont("Helvetica", font_size, leading=leading)
    text.setFillColor(BLACK)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
