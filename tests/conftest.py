"""Shared fixtures and helpers for tests."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from collection_tree.backends import RecordingBackend
from collection_tree.core.config import CollectionConfig
from collection_tree.core.hierarchy.samples import SAMPLE_TREE
from collection_tree.core.hierarchy.view import HierarchyView
from collection_tree.models import Node

_REPO_ROOT = Path(__file__).parent.parent

FIXED_ID = "00000000-0000-4000-8000-000000000000"
FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_tree() -> Node:
    return SAMPLE_TREE


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def view(sample_tree: Node, backend: RecordingBackend) -> HierarchyView:
    return HierarchyView(sample_tree, backend)


@pytest.fixture
def config(tmp_path: Path) -> CollectionConfig:
    return CollectionConfig(output_dir=tmp_path / "build")


@pytest.fixture
def fixed_id() -> str:
    return FIXED_ID


@pytest.fixture
def fixed_clock() -> datetime:
    return FIXED_TIME
