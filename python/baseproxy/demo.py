"""Reference registry and handler used by ``baseproxy --demo``."""

from __future__ import annotations

import copy
import sys
from typing import Any, TextIO

from .handlers import FunctionHandler
from .path import is_truthy
from .proxy import PropertyProxy

DEMO_OBJECTS: dict[str, Any] = {
    "test": {
        "subtest": {
            "subSubText": "Hello World",
        }
    }
}


def demo_objects() -> dict[str, Any]:
    return copy.deepcopy(DEMO_OBJECTS)


def demo_handlers(out: TextIO | None = None) -> list[FunctionHandler]:
    def announce() -> None:
        print("Predicate matched!", file=out if out is not None else sys.stdout)

    return [FunctionHandler(predicate=is_truthy, callback=announce)]


def run_demo(out: TextIO | None = None) -> Any:
    if out is None:
        out = sys.stdout
    proxy = PropertyProxy()
    proxy.init(demo_objects(), demo_handlers(out))
    result = proxy.get("test", ["subtest", "subSubText"])
    print(result, file=out)
    return result
