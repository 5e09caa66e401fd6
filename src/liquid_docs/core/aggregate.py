from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from liquid_docs.core.batching import DEFAULT_MAX_BATCH_BYTES, iter_batches, utf8_length
from liquid_docs.core.engine import DocParser, default_parser
from liquid_docs.models import FileInput, FileResult

logger = logging.getLogger(__name__)


def iter_parse_files(
    files: Iterable[FileInput],
    max_batch_bytes: int = DEFAULT_MAX_BATCH_BYTES,
    parser: DocParser | None = None,
    measure: Callable[[str], int] = utf8_length,
) -> Iterator[FileResult]:
    """Parse ``files`` one batch at a time, yielding results in input order."""
    batches = iter_batches(files, max_batch_bytes, measure)
    doc_parser = parser if parser is not None else default_parser()

    def _run() -> Iterator[FileResult]:
        for number, batch in enumerate(batches, start=1):
            logger.debug("Parsing batch %d: %d file(s), %d bytes", number, len(batch), batch.byte_size)
            yield from doc_parser.parse_batch(batch.files)

    return _run()


def parse_files(
    files: Iterable[FileInput],
    max_batch_bytes: int = DEFAULT_MAX_BATCH_BYTES,
    parser: DocParser | None = None,
    measure: Callable[[str], int] = utf8_length,
) -> list[FileResult]:
    return list(iter_parse_files(files, max_batch_bytes, parser, measure))
