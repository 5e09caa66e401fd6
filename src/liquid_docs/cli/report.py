"""Terminal and CI renderings of check results."""

from __future__ import annotations

from dataclasses import dataclass, field

import typer
from rich.console import Console
from rich.markup import escape

from liquid_docs.models import Diagnostic, FileResult

MISSING_DOC = "Missing doc"

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


@dataclass
class CheckSummary:
    files: int = 0
    missing_docs: list[str] = field(default_factory=list)
    diagnostics: list[tuple[str, Diagnostic]] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        self.files += 1
        if not result.has_docs:
            self.missing_docs.append(result.path)
        self.diagnostics.extend((result.path, d) for d in result.diagnostics)

    def exit_code(self, warn: bool = False, eparse: bool = False) -> int:
        if self.diagnostics and eparse:
            return 1
        if self.missing_docs and not warn:
            return 1
        return 0


def gcc_line(path: str, line: int, column: int, severity: str, message: str) -> str:
    return f"{path}:{line}:{column}: {severity}: {message}"


def github_annotation(path: str, line: int, column: int, severity: str, message: str) -> str:
    return f"::{severity} file={path},line={line},col={column}::{message}"


class Reporter:
    def __init__(self, warn: bool = False, eparse: bool = False) -> None:
        self.warn = warn
        self.eparse = eparse
        self.summary = CheckSummary()

    def start(self) -> None:
        pass

    def file(self, result: FileResult) -> None:
        self.summary.record(result)

    def finish(self) -> CheckSummary:
        return self.summary


class HumanReporter(Reporter):
    """Check-mark listing followed by a parse issue section and a verdict."""

    def start(self) -> None:
        console.print("Checking files...")

    def file(self, result: FileResult) -> None:
        super().file(result)
        if result.has_docs:
            console.print(f"[green]✔️[/green] {escape(result.path)}")
        else:
            err_console.print(f"[red]✖️ {escape(result.path)}[/red]")

    def finish(self) -> CheckSummary:
        summary = self.summary
        if summary.diagnostics:
            heading = "Parsing errors:" if self.eparse else "Parsing warnings:"
            err_console.print(f"\n[{'red' if self.eparse else 'yellow'}]{heading}[/]")
            for path, diagnostic in summary.diagnostics:
                location = f"{escape(path)}:{diagnostic.line}:{diagnostic.column}"
                err_console.print(f"  [red]{location}[/red]: {escape(diagnostic.message)}")

        missing = len(summary.missing_docs)
        if missing:
            noun = "file" if missing == 1 else "files"
            style = "yellow" if self.warn else "red"
            err_console.print(f"\n[{style}]Found {missing} liquid {noun} without doc tags[/]")
        else:
            console.print(f"\n✨ All liquid files ({summary.files}) have doc tags")
        return summary


class CiReporter(Reporter):
    """GCC-style diagnostics on stderr and GitHub annotations on stdout."""

    def file(self, result: FileResult) -> None:
        super().file(result)
        for diagnostic in result.diagnostics:
            self._emit(result.path, diagnostic.line, diagnostic.column, "warning", diagnostic.message)
        if not result.has_docs:
            self._emit(result.path, 1, 1, "warning" if self.warn else "error", MISSING_DOC)

    @staticmethod
    def _emit(path: str, line: int, column: int, severity: str, message: str) -> None:
        typer.echo(gcc_line(path, line, column, severity, message), err=True)
        typer.echo(github_annotation(path, line, column, severity, message))
