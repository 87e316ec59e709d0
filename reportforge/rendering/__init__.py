from reportforge.rendering.factory import RenderEngineFactory
from reportforge.rendering.session import RenderSession

__all__ = ["RenderEngineFactory", "RenderSession"]
