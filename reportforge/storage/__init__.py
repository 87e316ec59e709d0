from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.factory import ArtifactStoreFactory
from reportforge.storage.models import ArtifactKind

__all__ = ["ArtifactKind", "ArtifactStoreFactory", "BaseArtifactStore"]
