from enum import Enum
from pathlib import PurePosixPath

PDF_CONTENT_TYPE = "application/pdf"


class ArtifactKind(str, Enum):
    """What a stored object is: the uploaded file or one of the reports."""

    ORIGINAL = "original"
    SIMILARITY = "similarity"
    AI = "ai"


def artifact_key(
    prefix: str,
    submission_id: str,
    kind: ArtifactKind,
    filename: str | None = None,
) -> str:
    """Build ``{prefix}/{submission_id}/{kind}{suffix}``.

    Reports always get ``.pdf``; the original keeps its filename's suffix.
    """
    if kind is ArtifactKind.ORIGINAL:
        suffix = PurePosixPath(filename or "").suffix.lower()
    else:
        suffix = ".pdf"
    parts = [p for p in (prefix.strip("/"), submission_id, f"{kind.value}{suffix}") if p]
    return "/".join(parts)
