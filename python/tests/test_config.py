from __future__ import annotations

import io
import json
import logging

import pytest

from baseproxy import log
from baseproxy.config import LOG_JSON_VAR, LOG_LEVEL_VAR, Settings


def test_settings_defaults() -> None:
    assert Settings.from_env({}) == Settings(log_level="WARNING", log_json=False)


def test_settings_from_mapping() -> None:
    settings = Settings.from_env({LOG_LEVEL_VAR: " debug ", LOG_JSON_VAR: "1"})
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_settings_unknown_level_falls_back() -> None:
    assert Settings.from_env({LOG_LEVEL_VAR: "chatty"}).log_level == "WARNING"


def test_settings_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_VAR, "error")
    monkeypatch.delenv(LOG_JSON_VAR, raising=False)
    assert Settings.from_env() == Settings(log_level="ERROR", log_json=False)


def test_log_setup_plain_text() -> None:
    stream = io.StringIO()
    log.setup("info", stream=stream)
    log.get("baseproxy.test").info("hello %s", "there")
    assert stream.getvalue() == "INFO baseproxy.test | hello there\n"


def test_log_setup_json() -> None:
    stream = io.StringIO()
    log.setup("warning", json_mode=True, stream=stream)
    log.get("baseproxy.test").info("dropped")
    log.get("baseproxy.test").warning("kept")
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["lvl"] == "WARNING"
    assert record["name"] == "baseproxy.test"
    assert record["msg"] == "kept"


def test_log_setup_is_idempotent_without_force() -> None:
    first = io.StringIO()
    second = io.StringIO()
    log.setup("info", stream=first)
    log.setup("info", stream=second)
    log.get("baseproxy.test").info("once")
    assert "once" in first.getvalue()
    assert second.getvalue() == ""

    log.setup("info", stream=second, force=True)
    log.get("baseproxy.test").info("twice")
    assert "twice" not in first.getvalue()
    assert "twice" in second.getvalue()


def test_log_teardown_leaves_other_handlers() -> None:
    other = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(other)
    try:
        log.setup("info", stream=io.StringIO())
        log.teardown()
        assert other in root.handlers
    finally:
        root.removeHandler(other)
