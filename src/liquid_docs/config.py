import os
from pathlib import Path

from liquid_docs.core.batching import DEFAULT_MAX_BATCH_BYTES
from liquid_docs.core.registry import VendorTypeRegistry

MAX_BATCH_BYTES_ENV = "LIQUID_DOCS_MAX_BATCH_BYTES"
VENDOR_TYPES_ENV = "LIQUID_DOCS_VENDOR_TYPES"


def get_max_batch_bytes() -> int:
    raw = os.getenv(MAX_BATCH_BYTES_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_BATCH_BYTES
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_BATCH_BYTES_ENV} must be an integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{MAX_BATCH_BYTES_ENV} must be positive, got {value}")
    return value


def get_vendor_types_path() -> Path | None:
    raw = os.getenv(VENDOR_TYPES_ENV)
    if not raw:
        return None
    return Path(raw)


def load_vendor_types(path: str | Path | None = None) -> VendorTypeRegistry:
    """Load the registry from ``path``, then the environment, then the bundled data."""
    source = Path(path) if path is not None else get_vendor_types_path()
    if source is None:
        return VendorTypeRegistry.load_default()
    return VendorTypeRegistry.from_json(source)
