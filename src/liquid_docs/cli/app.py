import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from liquid_docs.cli.check import check
from liquid_docs.cli.parse import parse
from liquid_docs.cli.report import err_console
from liquid_docs.cli.version import version_callback

app = typer.Typer(
    name="liquid-docs",
    help="Liquid Docs CLI: check and parse {% doc %} tags in Shopify Liquid templates.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("check")(check)
app.command("parse")(parse)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback()
def root(
    verbose: Annotated[bool, typer.Option(help="Log batching and registry details to stderr.")] = False,
    version: Annotated[
        bool,
        typer.Option("-v", "--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    _configure_logging(verbose)


def main() -> None:
    app()
