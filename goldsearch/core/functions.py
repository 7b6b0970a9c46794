"""Named scalar functions with a numeric derivative."""

from __future__ import annotations

import math
from typing import Callable


class Function:
    """A named, evaluable function of one real variable.

    The derivative is always estimated by forward difference so every
    function, built-in or registered later, behaves the same way.
    """

    def __init__(self, expression: str, func: Callable[[float], float]):
        self._name = f"y = {expression}"
        self._func = func

    @property
    def name(self) -> str:
        return self._name

    def evaluate(self, x: float) -> float:
        return self._func(x)

    __call__ = evaluate

    def derivative(self, x: float, precision: int) -> float:
        """Forward-difference slope at x, step one decade below 10^-precision."""
        try:
            dx = 10.0 ** -precision / 10.0
        except OverflowError:
            return 0.0
        # A step that underflows to zero has no measurable slope.
        if dx == 0.0:
            return 0.0
        return (self._func(x + dx) - self._func(x)) / dx

    def __repr__(self) -> str:
        return f"Function({self._name!r})"


def _square(x: float) -> float:
    return x * x


SQUARE = Function("x^2", _square)
SIN = Function("sin(x)", math.sin)

BUILTINS: tuple[Function, ...] = (SQUARE, SIN)
