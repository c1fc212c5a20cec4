"""Registry-backed property access with pre-lookup handlers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from . import log
from .handlers import Flow, Handler, as_handler
from .path import is_falsy, is_truthy, lookup, resolve_path
from .query import compile_query

__all__ = ["Storage", "PropertyProxy"]

logger = log.get(__name__)

_MISSING_TARGET = (
    "You are trying to access a property of an object that is not defined, "
    "Fallback on setting mode. (target=%r)"
)


def _normalize_handlers(handlers: Optional[Iterable[Any]]) -> list[Handler]:
    if handlers is None:
        return []
    return [as_handler(handler) for handler in handlers]


@dataclass
class Storage:
    """State owned by one ``PropertyProxy``: the registry and its handlers."""

    objects: Mapping[str, Any] = field(default_factory=dict)
    handlers: list[Handler] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.handlers = _normalize_handlers(self.handlers)


class PropertyProxy:
    """Look up properties of named registry entries.

    Every lookup first offers the entry to each handler in order. A
    matching handler runs, and a handler that halts ends the lookup with
    None. A falsy entry logs a warning and falls back to ``set``.
    """

    def __init__(self, storage: Optional[Storage] = None) -> None:
        self.storage = storage if storage is not None else Storage()

    def init(
        self,
        objects: Optional[Mapping[str, Any]] = None,
        handlers: Optional[Iterable[Any]] = None,
    ) -> None:
        """Replace the registry and handlers wholesale."""
        self.storage.objects = {} if objects is None else objects
        self.storage.handlers = _normalize_handlers(handlers)

    def _entry(self, target: Any) -> Any:
        return lookup(self.storage.objects, target)

    def _run_handlers(self, target: Any) -> bool:
        # Callbacks may call init(); keep walking the list we started with.
        for handler in self.storage.handlers:
            if handler.matches(self._entry(target)) and handler.run() is Flow.HALT:
                return True
        return False

    def _dispatch(self, target: Any) -> tuple[bool, Any]:
        if self._run_handlers(target):
            return True, None
        entry = self._entry(target)
        if is_falsy(entry):
            logger.warning(_MISSING_TARGET, target)
            return True, self.set(target)
        return False, entry

    def get(self, target: Any, property_path: Any = None) -> Any:
        """Return ``property_path`` of the entry named ``target``.

        A list or tuple path is walked key by key, a single truthy key is
        looked up directly, and no path returns the whole entry.
        """
        done, entry = self._dispatch(target)
        if done:
            return entry
        if isinstance(property_path, (list, tuple)):
            return resolve_path(entry, property_path)
        if is_truthy(property_path):
            return lookup(entry, property_path)
        return entry

    def set(self, prop_name: Any) -> Any:
        """Read ``prop_name`` from the storage container, not the registry."""
        if not isinstance(prop_name, str):
            return None
        return vars(self.storage).get(prop_name)

    def query(self, target: Any, expression: str) -> Any:
        """Like ``get``, but select from the entry with a JMESPath expression."""
        apply = compile_query(expression)
        done, entry = self._dispatch(target)
        if done:
            return entry
        return apply(entry)
