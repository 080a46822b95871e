"""main.py – CLI entry point for protodump.

Reads a C file (or standard input), and prints one prototype per function
definition with external linkage.

Usage:
    protodump --file src/pool.c
    cat src/pool.c | protodump --stdin
    protodump --file src/pool.c --debug --query extra.scm
"""

from pathlib import Path

import typer

from protodump.cli import error_exit, load_source
from protodump.config import ExtractOptions
from protodump.extract import extract_prototypes
from protodump.roles import C_LANGUAGE, RoleRegistry
from protodump.trace import DebugTrace

_EPILOG = """\
[bold]Examples:[/bold]

protodump --file pool.c                    Print prototypes of non-static functions

cat pool.c | protodump --stdin             Read the source from standard input

protodump --file pool.c --query more.scm -d   Trace captures from extra patterns

[dim]Static functions are skipped.  Each prototype is the text between the
start of the definition and its body, trimmed and terminated with ';'.[/dim]"""

app = typer.Typer(
    help="Extract C function prototypes from a source file.",
    rich_markup_mode="rich",
    epilog=_EPILOG,
)


@app.callback(invoke_without_command=True)
def main(
    file: Path | None = typer.Option(None, "--file", help="C source file to read"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the C source from standard input"),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Print captures that map to no known role"
    ),
    query: Path | None = typer.Option(
        None, "--query", help="File of extra tree-sitter patterns to run alongside the built-ins"
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Text encoding of the input"),
) -> None:
    """Print a ``signature;`` line for every non-static function definition.

    The input is read and validated in full before parsing.  Definitions whose
    storage-class specifier contains ``static`` are skipped, as are
    declarations without a body.

    Args:
        file: Path of the C source to read.
        stdin: Read the source from standard input instead of ``--file``.
        debug: Print ``name: "text"`` lines for unclassified captures.
        query: Optional file of extra patterns appended to the built-in query.
        encoding: Encoding used for the checked decode of the input.
    """
    try:
        opts = ExtractOptions.with_query_file(query, debug=debug, encoding=encoding)
    except (OSError, ValueError) as exc:
        error_exit(f"Failed to read query file: {exc}")

    source = load_source(file, stdin=stdin, encoding=opts.encoding)

    try:
        registry = RoleRegistry.compile(C_LANGUAGE, extra=opts.extra_query)
    except RuntimeError as exc:
        error_exit(str(exc))

    trace = DebugTrace(source, typer.echo)
    for line in extract_prototypes(source, opts, registry=registry, on_unclassified=trace):
        typer.echo(line)


def main_entry() -> None:
    """Package entry point for ``protodump``."""
    app()


if __name__ == "__main__":
    main_entry()
