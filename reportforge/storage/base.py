from abc import ABC, abstractmethod

from reportforge.storage.models import ArtifactKind


class BaseArtifactStore(ABC):
    """Contract for durable artifact storage."""

    @abstractmethod
    def put(
        self,
        data: bytes,
        kind: ArtifactKind,
        submission_id: str,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        """Store raw bytes unmodified and return a durable reference.

        Raises:
            UploadFailedError: if the bytes cannot be stored.
        """

    @abstractmethod
    def get_signed_url(self, reference: str) -> str:
        """Return a short-lived URL for fetching ``reference``.

        Raises:
            ArtifactNotFoundError: if the reference is unknown to this store.
        """

    @abstractmethod
    def fetch(self, reference: str) -> bytes:
        """Return the stored bytes for ``reference``.

        Raises:
            ArtifactNotFoundError: if nothing is stored under the reference.
        """
