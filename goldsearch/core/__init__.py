"""Numeric core: functions, registry, search parameters and the solver."""

from goldsearch.core.errors import (
    SearchError,
    InvalidIndex,
    NoMinimumBracketed,
    IterationLimitReached,
)
from goldsearch.core.functions import Function, SQUARE, SIN
from goldsearch.core.registry import FunctionRegistry, default_registry
from goldsearch.core.problem import Problem
from goldsearch.core.solver import (
    ITERATION_LIMIT,
    GoldenResult,
    GoldenStep,
    golden_section,
    golden_section_steps,
)

__all__ = [
    "SearchError",
    "InvalidIndex",
    "NoMinimumBracketed",
    "IterationLimitReached",
    "Function",
    "SQUARE",
    "SIN",
    "FunctionRegistry",
    "default_registry",
    "Problem",
    "ITERATION_LIMIT",
    "GoldenResult",
    "GoldenStep",
    "golden_section",
    "golden_section_steps",
]
