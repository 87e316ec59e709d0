from reportforge.rendering.base import BaseRenderEngine
from reportforge.rendering.exceptions import RenderTimeoutError
from reportforge.rendering.reportlab_renderer import render_document
from reportforge.report.models import PagedDocumentModel
from reportforge.utils.timeouts import call_with_timeout


class InlineRenderEngine(BaseRenderEngine):
    """Renders inside the current process on a bounded daemon thread.

    A render that times out is abandoned, not killed; use the process engine
    where a hung render must be reclaimed.
    """

    def __init__(self, render_timeout_seconds: float) -> None:
        self._render_timeout_seconds = render_timeout_seconds

    def start(self) -> None:
        pass

    def render(self, model: PagedDocumentModel) -> bytes:
        try:
            return call_with_timeout(self._render_timeout_seconds, render_document, model)
        except TimeoutError as exc:
            raise RenderTimeoutError(
                f"Render of {model.report_kind.value} report exceeded "
                f"{self._render_timeout_seconds}s"
            ) from exc

    def stop(self) -> None:
        pass
