from abc import ABC, abstractmethod

from reportforge.report.models import PagedDocumentModel


class BaseRenderEngine(ABC):
    """Contract for render engines driven by a RenderSession."""

    @abstractmethod
    def start(self) -> None:
        """Acquire the engine's resources.

        Raises:
            EngineStartFailedError: if the engine cannot be launched.
        """

    @abstractmethod
    def render(self, model: PagedDocumentModel) -> bytes:
        """Render one document model to PDF bytes.

        Raises:
            RenderFailedError: on layout/conversion errors.
            RenderTimeoutError: if rendering exceeds the engine timeout.
        """

    @abstractmethod
    def stop(self) -> None:
        """Release every resource acquired by ``start``. Safe to call twice."""
