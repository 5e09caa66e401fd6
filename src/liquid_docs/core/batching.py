from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from liquid_docs.models import FileInput

DEFAULT_MAX_BATCH_BYTES = 10 * 1024 * 1024


def utf8_length(content: str) -> int:
    return len(content.encode("utf-8"))


@dataclass
class Batch:
    files: list[FileInput] = field(default_factory=list)
    byte_size: int = 0

    def add(self, file: FileInput, size: int) -> None:
        self.files.append(file)
        self.byte_size += size

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FileInput]:
        return iter(self.files)


def iter_batches(
    files: Iterable[FileInput],
    max_bytes: int = DEFAULT_MAX_BATCH_BYTES,
    measure: Callable[[str], int] = utf8_length,
) -> Iterator[Batch]:
    """Greedily pack ``files`` into batches of at most ``max_bytes``.

    Input order is kept and each file lands in exactly one batch. A file that
    is larger than ``max_bytes`` on its own is emitted as a single-file batch.
    ``files`` is consumed lazily, one pass.
    """
    if max_bytes <= 0:
        raise ValueError(f"max_bytes must be positive, got {max_bytes}")
    return _pack(files, max_bytes, measure)


def _pack(files: Iterable[FileInput], max_bytes: int, measure: Callable[[str], int]) -> Iterator[Batch]:
    batch = Batch()
    for file in files:
        size = measure(file.content)

        if size > max_bytes and not batch:
            yield Batch([file], size)
            continue

        if batch.byte_size + size > max_bytes and batch:
            yield batch
            batch = Batch()

        batch.add(file, size)

    if batch:
        yield batch
