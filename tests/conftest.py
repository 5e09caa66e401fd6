"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from liquid_docs.core.directives import DirectiveParser
from liquid_docs.core.engine import DocParser
from liquid_docs.core.registry import VendorTypeRegistry
from liquid_docs.core.types import TypeResolver

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the Liquid template fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def registry() -> VendorTypeRegistry:
    """A small vendor registry independent of the bundled data."""
    return VendorTypeRegistry(["currency", "collection", "product", "image"])


@pytest.fixture
def resolver(registry: VendorTypeRegistry) -> TypeResolver:
    return TypeResolver(registry)


@pytest.fixture
def directive_parser(resolver: TypeResolver) -> DirectiveParser:
    return DirectiveParser(resolver)


@pytest.fixture
def doc_parser(registry: VendorTypeRegistry) -> DocParser:
    return DocParser(registry)
