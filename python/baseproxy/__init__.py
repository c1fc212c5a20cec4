from __future__ import annotations

from .handlers import Flow, FunctionHandler, Handler, as_handler
from .path import is_falsy, is_truthy, lookup, resolve_path
from .proxy import PropertyProxy, Storage
from .query import QueryError, compile_query
from .registry import RegistryError, load_registry


def _resolve_version() -> str:
    try:
        from importlib.metadata import version

        return version("baseproxy")
    except Exception:  # pragma: no cover - during development
        return "0.0.0"


def __getattr__(name: str):
    if name == "__version__":
        value = _resolve_version()
        globals()["__version__"] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["__version__"])


__all__ = [
    "Flow",
    "FunctionHandler",
    "Handler",
    "PropertyProxy",
    "QueryError",
    "RegistryError",
    "Storage",
    "as_handler",
    "compile_query",
    "is_falsy",
    "is_truthy",
    "load_registry",
    "lookup",
    "resolve_path",
    "__version__",
]
