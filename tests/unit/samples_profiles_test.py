from pathlib import Path

import pytest
from pydantic import ValidationError

from collection_tree.core.hierarchy.samples import SAMPLE_TREE, count_nodes, load_tree
from collection_tree.core.profiles import PROFILES, resolve_profile


def test_sample_tree_shape() -> None:
    assert count_nodes(SAMPLE_TREE) == 16
    assert [child.name for child in SAMPLE_TREE.children or ()] == ["Branch 1", "Branch 2", "Branch 3"]


def test_load_tree_defaults_to_sample() -> None:
    assert load_tree() is SAMPLE_TREE


def test_load_tree_from_file(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_text('{"name": "a", "children": [{"name": "b", "children": [{"name": "c"}]}]}', encoding="utf-8")
    tree = load_tree(path)
    assert tree.name == "a"
    assert count_nodes(tree) == 3


def test_load_tree_rejects_missing_name(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_text('{"children": []}', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_tree(path)


def test_load_tree_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_tree(tmp_path / "absent.json")


def test_resolve_profile_normalizes_name() -> None:
    assert resolve_profile(" Extended ") is PROFILES["extended"]


def test_resolve_profile_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported profile 'mobile'"):
        resolve_profile("mobile")
