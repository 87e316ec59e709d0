from reportforge.extraction.extractor import DocumentExtractor
from reportforge.extraction.factory import ExtractorFactory

__all__ = ["DocumentExtractor", "ExtractorFactory"]
