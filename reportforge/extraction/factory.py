from reportforge.config.settings import Settings
from reportforge.extraction.base import BaseExtractor
from reportforge.extraction.docx_adapter import DocxAdapter
from reportforge.extraction.extractor import DocumentExtractor
from reportforge.extraction.media_types import DOCX, PDF, PLAIN_TEXT
from reportforge.extraction.pdfplumber_adapter import PdfPlumberAdapter
from reportforge.extraction.pymupdf_adapter import PyMuPdfAdapter
from reportforge.extraction.text_adapter import PlainTextAdapter


class ExtractorFactory:
    """Creates the media-type router with the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> DocumentExtractor:
        engine = settings.extractor_pdf_engine.lower()
        pdf_adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if pdf_adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return DocumentExtractor(
            {
                PDF: pdf_adapter_cls(),
                DOCX: DocxAdapter(),
                PLAIN_TEXT: PlainTextAdapter(),
            }
        )
