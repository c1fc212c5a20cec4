from __future__ import annotations

from typing import Any, Callable

import jmespath as _jmespath  # type: ignore[import-untyped]
from jmespath import exceptions as _jmespath_exceptions  # type: ignore[import-untyped]

__all__ = ["QueryError", "compile_query"]

_query_cache: dict[str, Any] = {}


class QueryError(ValueError):
    """Raised when a JMESPath expression cannot be compiled."""

    expression: str


def compile_query(expression: str) -> Callable[[Any], Any]:
    """Create a callable that applies a JMESPath expression.

    Compiled expressions are cached by source text.
    """
    compiled = _query_cache.get(expression)
    if compiled is None:
        try:
            compiled = _jmespath.compile(expression)
        except _jmespath_exceptions.JMESPathError as exc:
            err = QueryError(f"invalid query {expression!r}: {exc}")
            err.expression = expression
            raise err from exc
        _query_cache[expression] = compiled

    def apply(data):
        return compiled.search(data)

    return apply
