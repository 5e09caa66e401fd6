from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from liquid_docs.cli.report import err_console
from liquid_docs.config import load_vendor_types
from liquid_docs.core.engine import DocParser
from liquid_docs.core.files import read_files


def parse(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Liquid template to parse.")],
    vendor_types: Annotated[
        Path | None, typer.Option(help="JSON file listing the vendor types accepted in @param types.")
    ] = None,
    indent: Annotated[int, typer.Option(min=0, help="JSON indentation.")] = 2,
) -> None:
    """Print the doc blocks and diagnostics of one template as JSON."""
    try:
        parser = DocParser(load_vendor_types(vendor_types))
    except (OSError, ValueError) as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(2) from None

    file = next(read_files([path]))
    result = parser.parse_file(file)
    typer.echo(result.model_dump_json(indent=indent or None))
