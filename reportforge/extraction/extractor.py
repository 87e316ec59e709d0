from reportforge.extraction.base import BaseExtractor
from reportforge.extraction.exceptions import UnsupportedMediaTypeError
from reportforge.extraction.media_types import normalize_media_type


class DocumentExtractor:
    """Routes document bytes to the adapter registered for their media type."""

    def __init__(self, adapters: dict[str, BaseExtractor]) -> None:
        self._adapters = {normalize_media_type(k): v for k, v in adapters.items()}

    @property
    def media_types(self) -> frozenset[str]:
        return frozenset(self._adapters)

    def extract(self, data: bytes, media_type: str) -> str:
        """Extract text from ``data`` declared as ``media_type``.

        Raises:
            UnsupportedMediaTypeError: if no adapter handles the media type.
            ExtractionFailedError: if the adapter fails to convert the bytes.
        """
        adapter = self._adapters.get(normalize_media_type(media_type))
        if adapter is None:
            raise UnsupportedMediaTypeError(
                f"Media type '{media_type}' is not supported. "
                f"Choose from: {sorted(self._adapters)}"
            )
        return adapter.extract(data)
