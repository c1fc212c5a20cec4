from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest

PYTHON_DIR = Path(__file__).resolve().parents[1]
if str(PYTHON_DIR) not in sys.path:
    sys.path.insert(0, str(PYTHON_DIR))

from baseproxy import log  # noqa: E402
from baseproxy.demo import demo_objects  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo root logger changes made by ``log.setup`` inside a test."""
    root = logging.getLogger()
    level = root.level
    try:
        yield
    finally:
        log.teardown()
        root.setLevel(level)


@pytest.fixture
def objects() -> dict[str, Any]:
    return demo_objects()
