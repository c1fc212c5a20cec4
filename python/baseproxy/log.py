from __future__ import annotations

import json
import logging
import sys
from typing import Optional

_installed: Optional[logging.Handler] = None


class JsonHandler(logging.StreamHandler):
    """One JSON object per log record."""

    def __init__(self, stream=None):
        super().__init__(stream=stream if stream is not None else sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            obj = {
                "ts": record.created,
                "lvl": record.levelname,
                "name": record.name,
                "msg": record.getMessage(),
            }
            self.stream.write(json.dumps(obj, ensure_ascii=False) + "\n")
            self.flush()
        except Exception:  # pragma: no cover
            self.handleError(record)


def setup(
    level: str = "WARNING",
    json_mode: bool = False,
    *,
    stream=None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the root logger.

    Only the first call has an effect unless ``force`` is set, in which
    case the handler installed earlier is replaced. Handlers installed by
    anything else are left alone.
    """
    global _installed
    if _installed is not None and not force:
        return

    py_level = getattr(logging, level.upper(), None)
    if not isinstance(py_level, int):
        py_level = logging.WARNING

    if json_mode:
        handler: logging.Handler = JsonHandler(stream)
    else:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s | %(message)s")
        )

    root = logging.getLogger()
    teardown()
    root.setLevel(py_level)
    root.addHandler(handler)
    _installed = handler


def teardown() -> None:
    """Remove the handler installed by ``setup``, if any."""
    global _installed
    if _installed is not None:
        logging.getLogger().removeHandler(_installed)
        _installed = None


def get(name: str) -> logging.Logger:
    """Helper to get a namespaced logger."""
    return logging.getLogger(name)
