"""Error kinds raised by the search core."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every failure the core reports to its caller."""

    kind = "search_error"


class InvalidIndex(SearchError, IndexError):
    kind = "invalid_index"

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid function index {index} (registry holds {size})")


class NoMinimumBracketed(SearchError):
    """Derivative signs at the interval ends do not enclose a minimum."""

    kind = "no_minimum_bracketed"

    def __init__(self, left: float, right: float, d_left: float, d_right: float):
        self.left = left
        self.right = right
        self.d_left = d_left
        self.d_right = d_right
        super().__init__(f"No minimum bracketed on [{left};{right}]")


class IterationLimitReached(SearchError):
    kind = "iteration_limit_reached"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Iteration limit reached ({limit})")
