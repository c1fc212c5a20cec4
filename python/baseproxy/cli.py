from __future__ import annotations

import json
import os
import sys
from typing import Any, Optional

from . import log
from .config import Settings
from .demo import demo_objects, run_demo
from .proxy import PropertyProxy
from .query import QueryError
from .registry import RegistryError, load_registry

_USAGE = "baseproxy [options] <target> [key]..."
_DESCRIPTION = "Look up a property of a named registry entry"
_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

_log = log.get(__name__)


class _Args:
    def __init__(self) -> None:
        self.registry: Optional[str] = None
        self.query: Optional[str] = None
        self.log_level: Optional[str] = None
        self.demo = False
        self.version = False
        self.help = False
        self.target: Optional[str] = None
        self.keys: list[str] = []


def _print_help(file=None) -> None:
    if file is None:
        file = sys.stdout
    print(f"usage: {_USAGE}", file=file)
    print("", file=file)
    print(_DESCRIPTION, file=file)
    print("", file=file)
    print("options:", file=file)
    print(
        "  -r, --registry <json>   registry as JSON text ('-' for stdin)",
        file=file,
    )
    print(
        "  -q, --query <expr>      JMESPath expression applied to the entry",
        file=file,
    )
    print("  --demo                  run the reference demo and exit", file=file)
    print(
        "  --log-level <level>     log level (default from $BASEPROXY_LOG_LEVEL)",
        file=file,
    )
    print("  -v, --version           show version and exit", file=file)
    print("  -h, --help              show this help message and exit", file=file)


def _take_value(argv: list[str], idx: int, token: str) -> str:
    if idx + 1 >= len(argv):
        raise ValueError(f"option {token} requires an argument")
    return argv[idx + 1]


def _parse_args(argv: list[str]) -> _Args:
    args = _Args()
    positional: list[str] = []
    idx = 0
    while idx < len(argv):
        token = argv[idx]
        if token == "--":
            positional.extend(argv[idx + 1 :])
            break
        if token == "-" or not token.startswith("-"):
            positional.append(token)
            idx += 1
            continue
        if token in ("-h", "--help"):
            args.help = True
            return args
        if token in ("-v", "--version"):
            args.version = True
            idx += 1
            continue
        if token == "--demo":
            args.demo = True
            idx += 1
            continue
        if token in ("-r", "--registry"):
            args.registry = _take_value(argv, idx, token)
            idx += 2
            continue
        if token in ("-q", "--query"):
            args.query = _take_value(argv, idx, token)
            idx += 2
            continue
        if token == "--log-level":
            value = _take_value(argv, idx, token).lower()
            if value not in _LOG_LEVELS:
                raise ValueError(f"unknown log level: {value}")
            args.log_level = value
            idx += 2
            continue
        raise ValueError(f"unknown option: {token}")

    if positional:
        args.target = positional[0]
        args.keys = positional[1:]
    if args.target is None and not (args.demo or args.version):
        raise ValueError("no target provided")
    if args.query is not None and args.keys:
        raise ValueError("--query and keys cannot be used together")
    return args


def _get_version() -> str:
    from . import __version__ as version

    return version


def _format_python_runtime() -> str:
    version = (
        f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    )
    executable = sys.executable or "<unknown>"
    if executable != "<unknown>":
        executable = os.path.abspath(executable)
    return f"Python {version} ({executable})"


def _load_objects(source: Optional[str]) -> dict[str, Any]:
    if source is None:
        return demo_objects()
    if source == "-":
        try:
            is_tty = sys.stdin.isatty()
        except Exception:
            is_tty = False
        if is_tty:
            raise RegistryError("no registry provided on stdin")
        return load_registry(sys.stdin)
    return load_registry(source)


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        namespace = _parse_args(argv)
    except ValueError as exc:
        _print_help(file=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if namespace.help:
        _print_help()
        return 0
    if namespace.version:
        print(f"v{_get_version()}")
        print(_format_python_runtime())
        return 0

    settings = Settings.from_env()
    log.setup(
        namespace.log_level or settings.log_level,
        settings.log_json,
        force=True,
    )

    if namespace.demo:
        run_demo(sys.stdout)
        return 0

    try:
        objects = _load_objects(namespace.registry)
    except RegistryError as exc:
        print(f"failed to read registry: {exc}", file=sys.stderr)
        return 1

    proxy = PropertyProxy()
    proxy.init(objects, [])
    _log.debug("loaded %d registry entries", len(objects))

    if namespace.query is not None:
        try:
            result = proxy.query(namespace.target, namespace.query)
        except QueryError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        result = proxy.get(namespace.target, namespace.keys or None)

    if result is None:
        return 1
    print(json.dumps(result, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
