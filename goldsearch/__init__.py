"""goldsearch: golden-section minimum search for unimodal functions."""

__version__ = "1.0.0"

from goldsearch.core import (  # noqa: E402
    Function,
    FunctionRegistry,
    Problem,
    SearchError,
    default_registry,
)

__all__ = ["__version__", "Function", "FunctionRegistry", "Problem", "SearchError", "default_registry"]
