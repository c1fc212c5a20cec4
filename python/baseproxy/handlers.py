"""Handlers run by ``PropertyProxy`` before a lookup."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .path import is_truthy

__all__ = ["Flow", "Handler", "FunctionHandler", "as_handler"]


class Flow(enum.Enum):
    CONTINUE = "continue"
    HALT = "halt"


@runtime_checkable
class Handler(Protocol):
    def matches(self, value: Any) -> bool: ...

    def run(self) -> Optional[Flow]: ...


@dataclass
class FunctionHandler:
    """A predicate/callback pair with an optional ``end`` flag.

    Only ``end is True`` halts the handler pass; other truthy values do
    not. A handler without a callable predicate never matches.
    """

    predicate: Optional[Callable[[Any], Any]] = None
    callback: Optional[Callable[[], Any]] = None
    end: Any = False

    def matches(self, value: Any) -> bool:
        if not callable(self.predicate):
            return False
        return is_truthy(self.predicate(value))

    def run(self) -> Flow:
        if callable(self.callback):
            self.callback()
        return Flow.HALT if self.end is True else Flow.CONTINUE


def as_handler(obj: Any) -> Handler:
    """Normalise a handler record.

    Protocol objects pass through. Mappings and other objects are read for
    ``predicate``, ``callback`` and ``end``; whatever is missing is left
    unset.
    """
    if isinstance(obj, Mapping):
        return FunctionHandler(
            predicate=obj.get("predicate"),
            callback=obj.get("callback"),
            end=obj.get("end", False),
        )
    if isinstance(obj, Handler):
        return obj
    return FunctionHandler(
        predicate=getattr(obj, "predicate", None),
        callback=getattr(obj, "callback", None),
        end=getattr(obj, "end", False),
    )
