"""Golden-section search over a bracketed interval."""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterator, NamedTuple

from goldsearch.core.errors import IterationLimitReached

logger = logging.getLogger(__name__)

ITERATION_LIMIT = 10000
INV_PHI = 2 / (1 + math.sqrt(5))


class GoldenStep(NamedTuple):
    """Working set after one iteration."""

    iteration: int
    a: float
    b: float
    x1: float
    x2: float
    y1: float
    y2: float


class GoldenResult(NamedTuple):
    minimum: float
    iterations: int


def golden_section_steps(
    f: Callable[[float], float],
    left: float,
    right: float,
    limit: int = ITERATION_LIMIT,
) -> Iterator[GoldenStep]:
    """Yield the state after each iteration, at most `limit` times.

    Each iteration reuses one of the previous two evaluations, so f is
    called exactly once per step after the initial pair. Ties (y1 == y2)
    shrink the interval from the left.
    """
    a, b = left, right
    x1 = b - (b - a) * INV_PHI
    x2 = a + (b - a) * INV_PHI
    y1 = f(x1)
    y2 = f(x2)

    for iteration in range(1, limit + 1):
        if y1 >= y2:
            a = x1
            x1, y1 = x2, y2
            x2 = a + (b - a) * INV_PHI
            y2 = f(x2)
        else:
            b = x2
            x2, y2 = x1, y1
            x1 = b - (b - a) * INV_PHI
            y1 = f(x1)
        yield GoldenStep(iteration, a, b, x1, x2, y1, y2)


def golden_section(
    f: Callable[[float], float],
    left: float,
    right: float,
    epsilon: float,
    limit: int = ITERATION_LIMIT,
) -> GoldenResult:
    """Run the search until |b - a| < epsilon; return the midpoint.

    Raises IterationLimitReached if `limit` iterations do not converge.
    """
    logger.debug("Golden-section on [%r; %r], eps=%r, limit=%d", left, right, epsilon, limit)
    for step in golden_section_steps(f, left, right, limit):
        if abs(step.b - step.a) < epsilon:
            minimum = (step.a + step.b) / 2
            logger.debug("Converged to %r after %d iteration(s)", minimum, step.iteration)
            return GoldenResult(minimum, step.iteration)
    raise IterationLimitReached(limit)
