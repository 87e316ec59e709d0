from pathlib import Path

from reportforge.config.settings import Settings
from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.local_disk_adapter import LocalDiskArtifactStore
from reportforge.storage.s3_adapter import S3ArtifactStore


class ArtifactStoreFactory:
    """Creates the configured artifact store."""

    BACKENDS = ("local", "s3")

    @classmethod
    def create(cls, settings: Settings) -> BaseArtifactStore:
        backend = settings.artifact_storage.lower()
        if backend == "local":
            return LocalDiskArtifactStore(
                root=Path(settings.artifact_local_root),
                prefix=settings.artifact_prefix,
            )
        if backend == "s3":
            return S3ArtifactStore(
                bucket=settings.s3_bucket,
                prefix=settings.artifact_prefix,
                signed_url_ttl_seconds=settings.signed_url_ttl_seconds,
                region=settings.s3_region,
                endpoint_url=settings.s3_endpoint_url,
                timeout_seconds=settings.upload_timeout_seconds,
            )
        raise ValueError(
            f"Unknown artifact storage '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
