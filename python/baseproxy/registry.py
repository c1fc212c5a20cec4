from __future__ import annotations

import json as _json
from typing import Any


class RegistryError(ValueError):
    """Raised when registry input is not a JSON object."""


def _read_text(source: Any) -> Any:
    if hasattr(source, "read"):
        content = source.read()
    elif isinstance(source, (str, bytes)):
        content = source
    else:
        raise TypeError(
            f"registry source must be JSON text or readable, got {type(source).__name__}"
        )
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return content


def load_registry(source: Any) -> dict[str, Any]:
    """Parse a registry from JSON text or a readable object.

    The top-level value must be an object; its keys become the target
    names. Paths are never opened.
    """
    try:
        data = _json.loads(_read_text(source))
    except UnicodeDecodeError as exc:
        raise RegistryError(f"registry is not valid UTF-8: {exc.reason}") from exc
    except _json.JSONDecodeError as exc:
        raise RegistryError(f"invalid registry JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise RegistryError(
            f"registry must be a JSON object, got {type(data).__name__}"
        )
    return data
