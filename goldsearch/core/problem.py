"""Search parameters for one session and the bracketed minimum search."""

from __future__ import annotations

import logging
import math

from goldsearch.core.errors import NoMinimumBracketed
from goldsearch.core.functions import Function
from goldsearch.core.solver import ITERATION_LIMIT, golden_section

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 5
DEFAULT_LEFT = -1.0
DEFAULT_RIGHT = 1.0


def _is_bracketed(d_left: float, d_right: float) -> bool:
    return d_left < 0 and d_right > 0


class Problem:
    """Interval, precision and the outcome of the last successful search.

    `epsilon` is derived from `precision` and cannot be set on its own.
    `iterations` and `minimum` change only when a search succeeds.
    """

    def __init__(
        self,
        left: float = DEFAULT_LEFT,
        right: float = DEFAULT_RIGHT,
        precision: int = DEFAULT_PRECISION,
        iteration_limit: int = ITERATION_LIMIT,
    ):
        self.iteration_limit = iteration_limit
        self._iterations = 0
        self._minimum: float | None = None
        self.set_bounds(left, right)
        self.set_precision(precision)

    @property
    def left(self) -> float:
        return self._left

    @property
    def right(self) -> float:
        return self._right

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def minimum(self) -> float | None:
        """Last found minimizer, None before the first successful search."""
        return self._minimum

    def set_bounds(self, a: float, b: float) -> None:
        self._left = min(a, b)
        self._right = max(a, b)
        logger.info("Interval set to [%r; %r]", self._left, self._right)

    def set_precision(self, precision: int) -> None:
        # Non-positive values are allowed and give a coarse threshold >= 1.
        self._precision = precision
        try:
            self._epsilon = 10.0 ** -precision
        except OverflowError:
            self._epsilon = math.inf
        logger.info("Precision set to %d (epsilon=%r)", precision, self._epsilon)

    def _endpoint_slopes(self, fn: Function) -> tuple[float, float]:
        return (
            fn.derivative(self._left, self._precision),
            fn.derivative(self._right, self._precision),
        )

    def has_bracketed_minimum(self, fn: Function) -> bool:
        """True when fn falls at the left end and rises at the right end."""
        return _is_bracketed(*self._endpoint_slopes(fn))

    def find_minimum(self, fn: Function) -> float:
        """Locate the minimum of fn on [left; right] and record it.

        Raises NoMinimumBracketed before iterating if the endpoint slopes
        do not enclose a minimum, and IterationLimitReached if the search
        does not converge. State is untouched on either failure.
        """
        d_left, d_right = self._endpoint_slopes(fn)
        if not _is_bracketed(d_left, d_right):
            raise NoMinimumBracketed(self._left, self._right, d_left, d_right)

        result = golden_section(
            fn.evaluate,
            self._left,
            self._right,
            self._epsilon,
            limit=self.iteration_limit,
        )
        self._minimum = result.minimum
        self._iterations = result.iterations
        logger.debug(
            "Minimum of %s on [%r; %r]: %r in %d iteration(s)",
            fn.name, self._left, self._right, result.minimum, result.iterations,
        )
        return result.minimum
