import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from reportforge.config.settings import Settings
from reportforge.report.models import Page


class WrapCostEstimator(ABC):
    """Estimates how many rendered lines a raw text line occupies."""

    @abstractmethod
    def cost(self, line: str) -> int:
        """Return the rendered line count for ``line`` (at least 1)."""


class CharWidthEstimator(WrapCostEstimator):
    """Fixed-width heuristic: ``max(1, ceil(len(line) / wrap_width))``."""

    def __init__(self, wrap_width: int) -> None:
        if wrap_width <= 0:
            raise ValueError("wrap_width must be positive")
        self._wrap_width = wrap_width

    def cost(self, line: str) -> int:
        return max(1, math.ceil(len(line) / self._wrap_width))


@dataclass(frozen=True)
class LineBudget:
    max_lines_per_page: int
    wrap_width: int


@dataclass(frozen=True)
class WordBudget:
    words_per_page: int


class BasePaginator(ABC):
    """Splits text into ordered pages without losing or duplicating text."""

    separator: str = "\n"

    @abstractmethod
    def paginate(self, text: str) -> list[Page]:
        """Split ``text`` into pages. Empty input yields no pages."""

    def join(self, pages: list[Page]) -> str:
        """Rebuild the paginated stream from ``pages``."""
        return self.separator.join(page.text for page in pages)


class LinePaginator(BasePaginator):
    """Packs raw lines into pages under a rendered-line budget.

    A line that alone exceeds the budget still gets a page of its own.
    """

    separator = "\n"

    def __init__(
        self,
        max_lines_per_page: int,
        estimator: WrapCostEstimator,
    ) -> None:
        if max_lines_per_page <= 0:
            raise ValueError("max_lines_per_page must be positive")
        self._max_lines = max_lines_per_page
        self._estimator = estimator

    def paginate(self, text: str) -> list[Page]:
        if not text:
            return []
        pages: list[Page] = []
        current: list[str] = []
        current_cost = 0
        for line in text.split("\n"):
            line_cost = self._estimator.cost(line)
            if current and current_cost + line_cost > self._max_lines:
                pages.append(self._page(len(pages) + 1, current, current_cost))
                current, current_cost = [], 0
            current.append(line)
            current_cost += line_cost
        if current:
            pages.append(self._page(len(pages) + 1, current, current_cost))
        return pages

    def _page(self, index: int, lines: list[str], cost: int) -> Page:
        return Page(index=index, text="\n".join(lines), line_cost=cost)


class WordPaginator(BasePaginator):
    """Groups whitespace tokens into fixed-size chunks. Line breaks are not kept."""

    separator = " "

    def __init__(self, words_per_page: int, estimator: WrapCostEstimator) -> None:
        if words_per_page <= 0:
            raise ValueError("words_per_page must be positive")
        self._words_per_page = words_per_page
        self._estimator = estimator

    def paginate(self, text: str) -> list[Page]:
        tokens = text.split()
        pages: list[Page] = []
        for start in range(0, len(tokens), self._words_per_page):
            chunk = " ".join(tokens[start : start + self._words_per_page])
            pages.append(
                Page(
                    index=len(pages) + 1,
                    text=chunk,
                    line_cost=self._estimator.cost(chunk),
                )
            )
        return pages


def build_paginator(
    budget: LineBudget | WordBudget,
    estimator: WrapCostEstimator | None = None,
    wrap_width: int = 95,
) -> BasePaginator:
    """Create the paginator for a budget policy.

    ``wrap_width`` only applies to word budgets; a line budget carries its own.
    """
    if isinstance(budget, LineBudget):
        return LinePaginator(
            budget.max_lines_per_page,
            estimator or CharWidthEstimator(budget.wrap_width),
        )
    return WordPaginator(budget.words_per_page, estimator or CharWidthEstimator(wrap_width))


def paginate(text: str, budget: LineBudget | WordBudget) -> list[Page]:
    return build_paginator(budget).paginate(text)


class PaginatorFactory:
    """Creates the paginator selected by ``pagination_policy``."""

    POLICIES = ("line", "word")

    @classmethod
    def create(cls, settings: Settings) -> BasePaginator:
        policy = settings.pagination_policy.lower()
        if policy == "line":
            return build_paginator(
                LineBudget(
                    max_lines_per_page=settings.pagination_max_lines_per_page,
                    wrap_width=settings.pagination_wrap_width,
                )
            )
        if policy == "word":
            return build_paginator(
                WordBudget(words_per_page=settings.pagination_words_per_page),
                wrap_width=settings.pagination_wrap_width,
            )
        raise ValueError(
            f"Unknown pagination policy '{policy}'. Choose from: {list(cls.POLICIES)}"
        )
