# pyright: reportAny=false, reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- JSON output for parsed records
- Console utilities for error handling
"""

import sys
from dataclasses import fields, is_dataclass
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Never

import orjson
from rich.markup import escape

from gitparse.hash import Hash

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_with_error",
    "format_json",
    "get_error_console",
    "read_input",
]


class ExitCode(IntEnum):
    """Standard exit codes for gitparse CLI commands."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    PARSE_ERROR = 2
    IO_ERROR = 3


def _default(obj: Any) -> Any:
    if isinstance(obj, Hash):
        return str(obj)
    if isinstance(obj, Path):
        return str(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    msg = f"Type is not JSON serializable: {type(obj).__name__}"
    raise TypeError(msg)


def format_json(data: Any, *, indent: bool = True) -> str:
    """Format parsed records as JSON.

    Hashes and paths render as strings; dataclasses render as objects of
    their fields.

    Args:
        data: Record, collection or plain data to format.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    options = orjson.OPT_PASSTHROUGH_DATACLASS
    if indent:
        options |= orjson.OPT_INDENT_2
    return orjson.dumps(data, default=_default, option=options).decode("utf-8")


def read_input(path: Path | None, *, console: "Console | None" = None) -> str:
    """Read captured tool output from ``path``, or standard input if None.

    A read failure exits with ``IO_ERROR``, reported on ``console``.
    """
    if path is None:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        exit_with_error(f"Cannot read {path}: {e}", ExitCode.IO_ERROR, console=console)


def get_error_console() -> "Console":  # noqa: UP037
    """Get a Rich console configured for error output to stderr.

    Returns:
        Console instance writing to stderr.
    """
    from rich.console import Console

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.PARSE_ERROR,
    *,
    console: "Console | None" = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to PARSE_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(code)
