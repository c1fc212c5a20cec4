from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from baseproxy.handlers import Flow, FunctionHandler, Handler, as_handler


class _Recorder:
    def __init__(self) -> None:
        self.seen: list[Any] = []

    def matches(self, value: Any) -> bool:
        self.seen.append(value)
        return True

    def run(self) -> Flow:
        return Flow.CONTINUE


def test_function_handler_matches_truthy_predicate_result() -> None:
    handler = FunctionHandler(predicate=lambda value: value)
    assert handler.matches({"a": 1})
    assert handler.matches({})
    assert not handler.matches(None)
    assert not handler.matches(0)


def test_function_handler_without_predicate_never_matches() -> None:
    assert not FunctionHandler().matches({"a": 1})
    assert not FunctionHandler(predicate="yes").matches({"a": 1})  # type: ignore[arg-type]


def test_function_handler_runs_callback() -> None:
    calls: list[str] = []
    handler = FunctionHandler(predicate=bool, callback=lambda: calls.append("ran"))
    assert handler.run() is Flow.CONTINUE
    assert calls == ["ran"]


def test_function_handler_without_callback_is_noop() -> None:
    assert FunctionHandler(predicate=bool).run() is Flow.CONTINUE


def test_only_end_true_halts() -> None:
    assert FunctionHandler(end=True).run() is Flow.HALT
    assert FunctionHandler(end=1).run() is Flow.CONTINUE
    assert FunctionHandler(end="yes").run() is Flow.CONTINUE
    assert FunctionHandler(end=False).run() is Flow.CONTINUE


def test_as_handler_from_mapping() -> None:
    calls: list[int] = []
    handler = as_handler(
        {"predicate": lambda v: True, "callback": lambda: calls.append(1), "end": True}
    )
    assert isinstance(handler, FunctionHandler)
    assert handler.matches(None)
    assert handler.run() is Flow.HALT
    assert calls == [1]


def test_as_handler_mapping_with_missing_fields() -> None:
    handler = as_handler({})
    assert not handler.matches({"a": 1})
    assert handler.run() is Flow.CONTINUE


def test_as_handler_passes_protocol_objects_through() -> None:
    recorder = _Recorder()
    assert isinstance(recorder, Handler)
    assert as_handler(recorder) is recorder


def test_as_handler_reads_attributes_of_plain_objects() -> None:
    record = SimpleNamespace(predicate=lambda v: v == "x", end=True)
    handler = as_handler(record)
    assert handler.matches("x")
    assert not handler.matches("y")
    assert handler.run() is Flow.HALT
