"""Shared CLI utilities for protodump.

Provides the standard error helper and input loading so that the command
reports every setup failure the same way.

Usage::

    from protodump.cli import error_exit, load_source

    source = load_source(file, stdin=stdin, encoding="utf-8")
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from protodump.source import SourceBuffer

# Exit code for invalid flag combinations, matching click's UsageError.
USAGE_ERROR = 2

_err_console = Console(stderr=True)


def error_exit(msg: str, *, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    _err_console.print(f"[red bold]error:[/red bold] {escape(msg)}", highlight=False)
    raise typer.Exit(code=code)


def load_source(file: Path | None, *, stdin: bool, encoding: str = "utf-8") -> SourceBuffer:
    """Read the whole input from *file* or standard input, exiting on failure.

    Exactly one of *file* and *stdin* must be selected.
    """
    if (file is None) == (not stdin):
        error_exit("Specify exactly one of --file PATH or --stdin", code=USAGE_ERROR)

    try:
        if file is not None:
            return SourceBuffer.from_path(file, encoding=encoding)
        return SourceBuffer.from_stream(encoding=encoding)
    except OSError as exc:
        error_exit(f"Failed to read input: {exc}")
    except ValueError as exc:
        error_exit(str(exc))
