import mimetypes

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PLAIN_TEXT = "text/plain"

ACCEPTED_MEDIA_TYPES: frozenset[str] = frozenset({PDF, DOCX, PLAIN_TEXT})


def normalize_media_type(media_type: str) -> str:
    """Lowercase a declared media type and drop parameters such as ``charset``."""
    return media_type.split(";", 1)[0].strip().lower()


def guess_media_type(filename: str) -> str | None:
    """Guess the media type from a filename extension."""
    if filename.lower().endswith(".docx"):
        return DOCX
    guessed, _encoding = mimetypes.guess_type(filename)
    return guessed


def is_accepted(media_type: str) -> bool:
    return normalize_media_type(media_type) in ACCEPTED_MEDIA_TYPES
