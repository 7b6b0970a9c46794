"""Text rendering of search parameters and results. Reads, never mutates."""

from __future__ import annotations

from goldsearch.core.problem import Problem
from goldsearch.core.registry import FunctionRegistry


def _digits(problem: Problem) -> int:
    return max(problem.precision, 0)


def bounds_string(problem: Problem) -> str:
    d = _digits(problem)
    return f"[{problem.left:.{d}f};{problem.right:.{d}f}]"


def precision_string(problem: Problem) -> str:
    d = _digits(problem)
    return f"{problem.precision} digits after the decimal point ({problem.epsilon:.{d}f})"


def solution_string(problem: Problem) -> str:
    if problem.minimum is None:
        return "No minimum found yet"
    d = _digits(problem)
    return f"Minimum: {problem.minimum:.{d}f} (found in {problem.iterations} iterations)"


def function_menu(registry: FunctionRegistry) -> list[str]:
    """Menu rows numbered from 1; 0 is reserved for "Back"."""
    return [f"{index + 1}] {name}" for index, name in registry.items()]
