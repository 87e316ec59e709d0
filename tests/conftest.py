import io
from datetime import datetime, timezone

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from reportforge.report.models import SubmissionMeta


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs."""
    document = docx.Document()
    document.add_paragraph("First paragraph of the essay.")
    document.add_paragraph("Second paragraph follows.")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def submission_meta() -> SubmissionMeta:
    return SubmissionMeta(
        submission_id="0b9f3c1e-6a0e-4f5e-9a57-3f1f2d7b8c11",
        user_id="user-42",
        filename="essay.pdf",
        media_type="application/pdf",
        size_bytes=265011,
        created_at=datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc),
    )
