from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .parsing import ScanResult


@dataclass(slots=True)
class GenerationOptions:
    version: str
    root_dir: Path
    output_dir: Path
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class GeneratedArtifact:
    path: Path
    artifact_type: str
    size_bytes: int = 0


class GeneratorTarget(ABC):
    """Base contract for output targets (compressed dataset, plain JSON, ...)."""

    name: str
    default_filename: str

    @abstractmethod
    def generate(
        self,
        scan: ScanResult,
        options: GenerationOptions,
    ) -> list[GeneratedArtifact]:
        """Generate output artifacts for a fully resolved scan."""
