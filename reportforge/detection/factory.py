from reportforge.config.settings import Settings
from reportforge.detection.base import BaseScoreProvider
from reportforge.detection.placeholder_provider import PlaceholderScoreProvider


class ScoreProviderFactory:
    """Creates the configured detection score provider."""

    PROVIDERS = ("placeholder",)

    @classmethod
    def create(cls, settings: Settings) -> BaseScoreProvider:
        provider = settings.detection_provider.lower()
        if provider == "placeholder":
            return PlaceholderScoreProvider(
                similarity_score=settings.placeholder_similarity_score,
                ai_score=settings.placeholder_ai_score,
            )
        raise ValueError(
            f"Unknown detection provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
