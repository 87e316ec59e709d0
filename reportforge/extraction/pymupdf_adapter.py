import pymupdf

from reportforge.extraction.base import BaseExtractor
from reportforge.extraction.exceptions import ExtractionFailedError


class PyMuPdfAdapter(BaseExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, data: bytes) -> str:
        if not data:
            raise ExtractionFailedError("PDF stream is empty")
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise ExtractionFailedError("PDF is password protected")
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pymupdf extraction failed: {exc}") from exc
