from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from liquid_docs.core.directives import DirectiveParser
from liquid_docs.core.ports.registry import TypeLookup
from liquid_docs.core.registry import VendorTypeRegistry
from liquid_docs.core.scanner import BlockScanner
from liquid_docs.core.types import TypeResolver
from liquid_docs.models import Diagnostic, DocBlock, FileInput, FileResult, ParseResult


class DocParser:
    """Parse ``{% doc %}`` blocks out of template text.

    The only state is the vendor type lookup, so one instance can be reused
    for any number of files and calls.
    """

    def __init__(self, vendor_types: TypeLookup | None = None) -> None:
        self.vendor_types = vendor_types if vendor_types is not None else default_registry()
        self._directives = DirectiveParser(TypeResolver(self.vendor_types))

    def _parse_text(self, content: str) -> tuple[list[DocBlock], list[Diagnostic]]:
        scanner = BlockScanner(content)
        blocks: list[DocBlock] = []
        diagnostics: list[Diagnostic] = scanner.diagnostics
        for span in scanner:
            block, block_diagnostics = self._directives.parse(span.content, span.line, span.column)
            blocks.append(block)
            diagnostics.extend(block_diagnostics)
        diagnostics.sort(key=lambda d: (d.line, d.column))
        return blocks, diagnostics

    def parse(self, content: str) -> ParseResult:
        blocks, diagnostics = self._parse_text(content)
        return ParseResult(blocks=blocks, diagnostics=diagnostics)

    def parse_file(self, file: FileInput) -> FileResult:
        blocks, diagnostics = self._parse_text(file.content)
        return FileResult(path=file.path, blocks=blocks, diagnostics=diagnostics)

    def parse_batch(self, files: Iterable[FileInput]) -> list[FileResult]:
        return [self.parse_file(file) for file in files]


@lru_cache(maxsize=1)
def default_registry() -> VendorTypeRegistry:
    return VendorTypeRegistry.load_default()


@lru_cache(maxsize=1)
def default_parser() -> DocParser:
    return DocParser(default_registry())


def parse(content: str) -> ParseResult:
    """Parse one template with the bundled vendor type registry."""
    return default_parser().parse(content)


def parse_batch(files: Iterable[FileInput]) -> list[FileResult]:
    """Parse many templates in one call; results follow input order."""
    return default_parser().parse_batch(files)
