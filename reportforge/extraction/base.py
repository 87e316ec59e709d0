from abc import ABC, abstractmethod


class BaseExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single stripped string. May be empty.

        Raises:
            ExtractionFailedError: if extraction fails for any reason.
        """
