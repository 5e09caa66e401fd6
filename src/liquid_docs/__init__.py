from importlib.metadata import PackageNotFoundError, version

from liquid_docs.core.aggregate import iter_parse_files, parse_files
from liquid_docs.core.batching import DEFAULT_MAX_BATCH_BYTES, Batch, iter_batches
from liquid_docs.core.engine import DocParser, parse, parse_batch
from liquid_docs.core.registry import VendorTypeRegistry
from liquid_docs.models import (
    ArrayOf,
    Diagnostic,
    DocBlock,
    FileInput,
    FileResult,
    Param,
    ParseResult,
    Scalar,
    ScalarKind,
    TypeSpec,
    VendorType,
)

try:
    __version__ = version("liquid-docs")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DEFAULT_MAX_BATCH_BYTES",
    "ArrayOf",
    "Batch",
    "Diagnostic",
    "DocBlock",
    "DocParser",
    "FileInput",
    "FileResult",
    "Param",
    "ParseResult",
    "Scalar",
    "ScalarKind",
    "TypeSpec",
    "VendorType",
    "VendorTypeRegistry",
    "__version__",
    "iter_batches",
    "iter_parse_files",
    "parse",
    "parse_batch",
    "parse_files",
]
