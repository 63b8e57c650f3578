"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from fully_pub.deep_merge import deep_merge
from fully_pub.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"include": ["*.rs"]}, {"include": ["lib.rs"]})
    assert merged == {"include": ["lib.rs"]}


def test_deep_merge_exclude_additive() -> None:
    """Verify that the exclude list is merged additively."""
    merged = deep_merge({"exclude": ["target", "b"]}, {"exclude": ["b", "a"]})
    assert merged["exclude"] == ["a", "b", "target"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["files"]["exclude"].append("vendor")
    assert "vendor" not in DEFAULT_CONFIG["files"]["exclude"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "fully_pub.yml"
    config_data = {"marker": "all_pub", "files": {"exclude": ["vendor"]}}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["marker"] == "all_pub"
    assert loaded["files"]["include"] == ["*.rs"]  # Default
    assert loaded["files"]["exclude"] == ["target", "vendor"]  # Added
