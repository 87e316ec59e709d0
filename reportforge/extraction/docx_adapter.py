import io

import docx

from reportforge.extraction.base import BaseExtractor
from reportforge.extraction.exceptions import ExtractionFailedError


class DocxAdapter(BaseExtractor):
    """Extracts paragraph text from DOCX using python-docx."""

    def extract(self, data: bytes) -> str:
        if not data:
            raise ExtractionFailedError("DOCX stream is empty")
        try:
            document = docx.Document(io.BytesIO(data))
            paragraphs = [paragraph.text for paragraph in document.paragraphs]
            return "\n".join(paragraphs).strip()
        except Exception as exc:
            raise ExtractionFailedError(f"python-docx extraction failed: {exc}") from exc
