from pathlib import Path

from reportforge.storage.base import BaseArtifactStore
from reportforge.storage.exceptions import ArtifactNotFoundError, UploadFailedError
from reportforge.storage.models import ArtifactKind, artifact_key

SCHEME = "local://"


class LocalDiskArtifactStore(BaseArtifactStore):
    """Stores artifacts under a root directory: {root}/{prefix}/{submission_id}/{kind}{suffix}."""

    ROOT = Path("/app/files/artifacts")

    def __init__(self, root: Path | None = None, prefix: str = "submissions") -> None:
        self._root = root if root is not None else self.ROOT
        self._prefix = prefix

    def put(
        self,
        data: bytes,
        kind: ArtifactKind,
        submission_id: str,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        _ = content_type
        key = artifact_key(self._prefix, submission_id, kind, filename)
        path = self._root / key
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise UploadFailedError(f"Failed to write {path}: {exc}") from exc
        return f"{SCHEME}{key}"

    def get_signed_url(self, reference: str) -> str:
        path = self._resolve(reference)
        if not path.exists():
            raise ArtifactNotFoundError(f"Artifact not found: {reference}")
        return path.as_uri()

    def fetch(self, reference: str) -> bytes:
        path = self._resolve(reference)
        if not path.exists():
            raise ArtifactNotFoundError(f"Artifact not found: {reference}")
        return path.read_bytes()

    def _resolve(self, reference: str) -> Path:
        if not reference.startswith(SCHEME):
            raise ArtifactNotFoundError(f"Not a local artifact reference: {reference}")
        root = self._root.resolve()
        path = (root / reference[len(SCHEME) :]).resolve()
        if not path.is_relative_to(root):
            raise ArtifactNotFoundError(f"Reference escapes the artifact root: {reference}")
        return path
