from __future__ import annotations

import pytest

from defgraph.registry import TargetRegistry, build_default_registry
from defgraph.targets.dataset import JsonDatasetGenerator


def test_default_registry_lists_targets_with_output_files() -> None:
    registry = build_default_registry()
    assert registry.describe() == [("dataset", "dataset.json.zstd"), ("json", "dataset.json")]


def test_building_twice_gives_independent_registries() -> None:
    first = build_default_registry()
    second = build_default_registry()
    assert first.get("json") is not second.get("json")
    assert first.names() == second.names()


def test_duplicate_and_unknown_targets_are_rejected() -> None:
    registry = TargetRegistry()
    registry.register(JsonDatasetGenerator())
    with pytest.raises(ValueError, match="already registered"):
        registry.register(JsonDatasetGenerator())
    with pytest.raises(ValueError, match="Supported targets: json"):
        registry.get("csv")
