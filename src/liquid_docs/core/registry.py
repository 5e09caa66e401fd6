from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from importlib import resources
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_DEFAULT_DATA_FILE = "vendor_types.json"


def _names_from_payload(payload: Any, source: str) -> list[str]:
    """Accept a list of names or a list of objects carrying a ``name`` key."""
    if not isinstance(payload, list):
        raise ValueError(f"Vendor type data in {source} must be a JSON array.")
    names: list[str] = []
    for entry in payload:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
            names.append(entry["name"])
        else:
            raise ValueError(f"Invalid vendor type entry in {source}: {entry!r}")
    return names


class VendorTypeRegistry:
    """Immutable set of vendor type identifiers accepted in ``@param`` types."""

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(name.strip() for name in names if name.strip())

    @classmethod
    def from_json(cls, path: str | Path) -> VendorTypeRegistry:
        file_path = Path(path)
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise FileNotFoundError(f"Vendor type file not found: {path}") from None
        except json.JSONDecodeError as exc:
            raise ValueError(f"Vendor type file {path} is not valid JSON: {exc}") from exc

        registry = cls(_names_from_payload(payload, str(path)))
        logger.info("Loaded %d vendor types from %s", len(registry), file_path)
        return registry

    @classmethod
    def load_default(cls) -> VendorTypeRegistry:
        data = (resources.files("liquid_docs") / "data" / _DEFAULT_DATA_FILE).read_text(encoding="utf-8")
        registry = cls(_names_from_payload(json.loads(data), _DEFAULT_DATA_FILE))
        logger.debug("Loaded %d bundled vendor types", len(registry))
        return registry

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VendorTypeRegistry):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"VendorTypeRegistry({len(self._names)} types)"
