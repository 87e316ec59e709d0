import multiprocessing
from multiprocessing.pool import Pool

from reportforge.logging.logger import Log
from reportforge.rendering.base import BaseRenderEngine
from reportforge.rendering.exceptions import (
    EngineStartFailedError,
    RenderFailedError,
    RenderTimeoutError,
    SessionClosedError,
)
from reportforge.rendering.reportlab_renderer import render_document
from reportforge.report.models import PagedDocumentModel


def _ping() -> str:
    return "pong"


class ProcessRenderEngine(BaseRenderEngine):
    """Renders in a dedicated worker process.

    The worker is spawned by ``start`` and verified with a ping; ``stop``
    terminates it, so a hung render never outlives the session.
    """

    def __init__(
        self,
        start_timeout_seconds: float,
        render_timeout_seconds: float,
        start_method: str = "spawn",
    ) -> None:
        self._start_timeout_seconds = start_timeout_seconds
        self._render_timeout_seconds = render_timeout_seconds
        self._start_method = start_method
        self._pool: Pool | None = None

    @property
    def is_running(self) -> bool:
        return self._pool is not None

    def start(self) -> None:
        if self._pool is not None:
            return
        try:
            context = multiprocessing.get_context(self._start_method)
            self._pool = context.Pool(processes=1)
            reply = self._pool.apply_async(_ping).get(timeout=self._start_timeout_seconds)
        except Exception as exc:
            self.stop()
            raise EngineStartFailedError(f"Render engine failed to start: {exc}") from exc
        if reply != "pong":
            self.stop()
            raise EngineStartFailedError(f"Render engine answered {reply!r} to ping")
        Log.debug("Render engine process started")

    def render(self, model: PagedDocumentModel) -> bytes:
        if self._pool is None:
            raise SessionClosedError("Render engine is not running")
        pending = self._pool.apply_async(render_document, (model,))
        try:
            return pending.get(timeout=self._render_timeout_seconds)
        except multiprocessing.TimeoutError as exc:
            raise RenderTimeoutError(
                f"Render of {model.report_kind.value} report exceeded "
                f"{self._render_timeout_seconds}s"
            ) from exc
        except RenderFailedError:
            raise
        except Exception as exc:
            raise RenderFailedError(f"Render worker failed: {exc}") from exc

    def stop(self) -> None:
        pool, self._pool = self._pool, None
        if pool is None:
            return
        pool.terminate()
        pool.join()
        Log.debug("Render engine process stopped")
