"""Ordered, index-addressed collection of available functions."""

from __future__ import annotations

import logging
from typing import Iterable

from goldsearch.core.errors import InvalidIndex
from goldsearch.core.functions import BUILTINS, Function

logger = logging.getLogger(__name__)


class FunctionRegistry:
    """Holds functions at stable 0-based indices."""

    def __init__(self, functions: Iterable[Function] = ()):
        self._functions: list[Function] = list(functions)

    def get(self, index: int) -> Function:
        size = len(self._functions)
        if index < 0 or index >= size:
            raise InvalidIndex(index, size)
        return self._functions[index]

    def size(self) -> int:
        return len(self._functions)

    __len__ = size

    def register(self, func: Function) -> int:
        """Append a function and return its index. Existing indices never move."""
        self._functions.append(func)
        index = len(self._functions) - 1
        logger.debug("Registered %s at index %d", func.name, index)
        return index

    def items(self) -> list[tuple[int, str]]:
        """(index, name) pairs in registry order."""
        return [(i, fn.name) for i, fn in enumerate(self._functions)]


def default_registry() -> FunctionRegistry:
    """Registry with the built-ins: 0 -> x^2, 1 -> sin(x)."""
    return FunctionRegistry(BUILTINS)
