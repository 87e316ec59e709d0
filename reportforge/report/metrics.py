import math

from reportforge.report.models import TextMetrics

DEFAULT_WORDS_PER_PAGE_ESTIMATE = 250


def compute_metrics(
    text: str,
    words_per_page_estimate: int = DEFAULT_WORDS_PER_PAGE_ESTIMATE,
) -> TextMetrics:
    """Count words and characters and estimate the source page count.

    Words are maximal runs of non-whitespace. Characters are counted
    including whitespace.
    """
    if words_per_page_estimate <= 0:
        raise ValueError("words_per_page_estimate must be positive")
    word_count = len(text.split())
    return TextMetrics(
        word_count=word_count,
        char_count=len(text),
        page_estimate=math.ceil(word_count / words_per_page_estimate),
    )
