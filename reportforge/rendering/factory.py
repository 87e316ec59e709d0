from reportforge.config.settings import Settings
from reportforge.rendering.base import BaseRenderEngine
from reportforge.rendering.inline_engine import InlineRenderEngine
from reportforge.rendering.process_engine import ProcessRenderEngine


class RenderEngineFactory:
    """Creates a fresh render engine per request from settings."""

    ENGINES = ("process", "inline")

    def __init__(self, settings: Settings) -> None:
        engine = settings.render_engine.lower()
        if engine not in self.ENGINES:
            raise ValueError(
                f"Unknown render engine '{engine}'. Choose from: {list(self.ENGINES)}"
            )
        self._engine = engine
        self._start_timeout_seconds = settings.render_engine_start_timeout_seconds
        self._render_timeout_seconds = settings.render_timeout_seconds

    def create(self) -> BaseRenderEngine:
        if self._engine == "process":
            return ProcessRenderEngine(
                start_timeout_seconds=self._start_timeout_seconds,
                render_timeout_seconds=self._render_timeout_seconds,
            )
        return InlineRenderEngine(render_timeout_seconds=self._render_timeout_seconds)
