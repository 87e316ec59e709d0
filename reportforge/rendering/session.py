from types import TracebackType

from reportforge.logging.logger import Log
from reportforge.rendering.base import BaseRenderEngine
from reportforge.rendering.exceptions import (
    EngineStartFailedError,
    RenderFailedError,
    SessionClosedError,
)
from reportforge.report.models import PagedDocumentModel


class RenderSession:
    """Scoped use of one render engine: open once, render many, close once.

    Use as a context manager so the engine is released on every exit path::

        with RenderSession(engine) as session:
            similarity_pdf = session.render(similarity_model)
            ai_pdf = session.render(ai_model)

    A failed render does not invalidate the session or earlier results.
    """

    RENDER_ATTEMPTS = 2

    def __init__(self, engine: BaseRenderEngine) -> None:
        self._engine = engine
        self._opened = False
        self._closed = False

    @property
    def is_open(self) -> bool:
        return self._opened and not self._closed

    def open(self) -> "RenderSession":
        """Start the engine.

        Raises:
            EngineStartFailedError: if the engine cannot be launched.
            SessionClosedError: if the session was already used.
        """
        if self._opened:
            raise SessionClosedError("RenderSession can only be opened once")
        self._opened = True
        try:
            self._engine.start()
        except EngineStartFailedError:
            self.close()
            raise
        except Exception as exc:
            self.close()
            raise EngineStartFailedError(f"Render engine failed to start: {exc}") from exc
        Log.info("Render session opened", engine=type(self._engine).__name__)
        return self

    def render(self, model: PagedDocumentModel) -> bytes:
        """Render ``model``, retrying once on RenderFailedError.

        Raises:
            RenderFailedError: if both attempts fail.
            RenderTimeoutError: if an attempt times out (not retried).
            SessionClosedError: if the session is not open.
        """
        if not self.is_open:
            raise SessionClosedError("RenderSession is not open")
        attempt = 1
        while True:
            try:
                return self._engine.render(model)
            except RenderFailedError as exc:
                if attempt >= self.RENDER_ATTEMPTS:
                    Log.error(
                        f"Render failed: {exc}",
                        submission_id=model.submission_id,
                        kind=model.report_kind.value,
                    )
                    raise
                Log.warning(
                    f"Render failed, retrying on a fresh page context: {exc}",
                    submission_id=model.submission_id,
                    kind=model.report_kind.value,
                )
                attempt += 1

    def close(self) -> None:
        """Release the engine. Only the first call has an effect."""
        if self._closed:
            return
        self._closed = True
        self._engine.stop()
        Log.info("Render session closed", engine=type(self._engine).__name__)

    def __enter__(self) -> "RenderSession":
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
