import io

import pdfplumber

from reportforge.extraction.base import BaseExtractor
from reportforge.extraction.exceptions import ExtractionFailedError


class PdfPlumberAdapter(BaseExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, data: bytes) -> str:
        if not data:
            raise ExtractionFailedError("PDF stream is empty")
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pdfplumber extraction failed: {exc}") from exc
