from __future__ import annotations

from dataclasses import dataclass, field

from .base import GeneratorTarget

_TARGET_CLASSES: list[type[GeneratorTarget]] = []


def _key(name: str) -> str:
    return name.lower().strip()


@dataclass(slots=True)
class TargetRegistry:
    """Output targets keyed by lower-cased name."""

    _targets: dict[str, GeneratorTarget] = field(default_factory=dict)

    def register(self, target: GeneratorTarget) -> None:
        key = _key(target.name)
        if not key:
            raise ValueError("Target name must not be empty.")
        if key in self._targets:
            raise ValueError(f"Target '{key}' already registered.")
        self._targets[key] = target

    def get(self, name: str) -> GeneratorTarget:
        key = _key(name)
        if key not in self._targets:
            supported = ", ".join(self.names()) or "<none>"
            raise ValueError(f"Unknown target '{name}'. Supported targets: {supported}")
        return self._targets[key]

    def names(self) -> list[str]:
        return sorted(self._targets)

    def describe(self) -> list[tuple[str, str]]:
        """(name, default output file) pairs for listing."""
        return [(name, self._targets[name].default_filename) for name in self.names()]


def register_target(cls: type[GeneratorTarget]) -> type[GeneratorTarget]:
    """Class decorator adding a target to every registry built afterwards."""
    if cls not in _TARGET_CLASSES:
        _TARGET_CLASSES.append(cls)
    return cls


def build_default_registry() -> TargetRegistry:
    # Importing the package runs the register_target decorators.
    from . import targets as _targets  # noqa: F401

    registry = TargetRegistry()
    for cls in _TARGET_CLASSES:
        registry.register(cls())
    return registry
