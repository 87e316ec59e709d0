class RenderError(Exception):
    """Base exception for all render engine errors."""


class EngineStartFailedError(RenderError):
    """Raised when the render engine cannot be started."""


class RenderFailedError(RenderError):
    """Raised when a document cannot be laid out or converted."""


class RenderTimeoutError(RenderError, TimeoutError):
    """Raised when a render does not finish within the configured timeout."""


class SessionClosedError(RenderError):
    """Raised when rendering through a session that is not open."""
