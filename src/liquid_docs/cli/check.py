from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from liquid_docs.cli.report import CheckSummary, CiReporter, HumanReporter, Reporter, err_console
from liquid_docs.cli.version import version_callback
from liquid_docs.config import get_max_batch_bytes, load_vendor_types
from liquid_docs.core.aggregate import iter_parse_files
from liquid_docs.core.engine import DocParser
from liquid_docs.core.files import expand_pattern, read_files


def run_check(pattern: str, parser: DocParser, max_batch_bytes: int, reporter: Reporter) -> CheckSummary:
    """Check every template matching ``pattern`` and report through ``reporter``."""
    paths = expand_pattern(pattern)
    reporter.start()
    for result in iter_parse_files(read_files(paths), max_batch_bytes, parser):
        reporter.file(result)
    return reporter.finish()


def check(
    pattern: Annotated[
        str, typer.Argument(help="Path to a file or directory of .liquid files. Glob patterns are supported.")
    ] = "./*.liquid",
    warn: Annotated[
        bool, typer.Option("-w", "--warn", help="Throw a warning instead of an error on files without doc tags.")
    ] = False,
    eparse: Annotated[
        bool,
        typer.Option("-e", "--eparse", help="Error on parsing issues such as unknown types (default: warning)."),
    ] = False,
    ci: Annotated[
        bool, typer.Option("-c", "--ci", help="Emit GCC diagnostics on stderr and GitHub annotations on stdout.")
    ] = False,
    max_batch_bytes: Annotated[
        int | None, typer.Option(min=1, help="Maximum bytes of template content parsed per batch.")
    ] = None,
    vendor_types: Annotated[
        Path | None, typer.Option(help="JSON file listing the vendor types accepted in @param types.")
    ] = None,
    version: Annotated[
        bool,
        typer.Option("-v", "--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Check that every Liquid template carries {% doc %} tags."""
    try:
        bound = max_batch_bytes if max_batch_bytes is not None else get_max_batch_bytes()
        parser = DocParser(load_vendor_types(vendor_types))
    except (OSError, ValueError) as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(2) from None

    reporter = CiReporter(warn, eparse) if ci else HumanReporter(warn, eparse)
    summary = run_check(pattern, parser, bound, reporter)
    raise typer.Exit(summary.exit_code(warn=warn, eparse=eparse))
