from reportforge.extraction.base import BaseExtractor
from reportforge.extraction.exceptions import ExtractionFailedError


class PlainTextAdapter(BaseExtractor):
    """Decodes plain text uploads as UTF-8 (a leading BOM is dropped)."""

    def extract(self, data: bytes) -> str:
        if not data:
            raise ExtractionFailedError("Text stream is empty")
        try:
            return data.decode("utf-8-sig").strip()
        except UnicodeDecodeError as exc:
            raise ExtractionFailedError(f"Text is not valid UTF-8: {exc}") from exc
