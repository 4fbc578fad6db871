from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .base import GeneratedArtifact, GenerationOptions
from .errors import GenerationError
from .parsing import ScanResult, parse_defs_directory
from .registry import TargetRegistry
from .validation import validate_root_dir


@dataclass(slots=True)
class RunResult:
    scan: ScanResult
    artifacts: list[GeneratedArtifact]


def run_generation(
    *,
    registry: TargetRegistry,
    target_name: str,
    root_dir: Path,
    output_dir: Path,
    version: str,
    extra: dict | None = None,
) -> RunResult:
    try:
        target = registry.get(target_name)
    except ValueError as exc:
        raise GenerationError(str(exc)) from exc

    validate_root_dir(root_dir)
    try:
        scan = parse_defs_directory(root_dir)
    except GenerationError:
        raise
    except Exception as exc:  # pragma: no cover - defensive coding
        raise GenerationError(f"Failed to scan definitions under root_dir={root_dir}") from exc

    options = GenerationOptions(
        version=version,
        root_dir=root_dir,
        output_dir=output_dir,
        extra=dict(extra or {}),
    )
    try:
        artifacts = target.generate(scan, options)
    except GenerationError:
        raise
    except Exception as exc:  # pragma: no cover - defensive coding
        raise GenerationError(
            f"Target '{target_name}' failed while generating artifacts into {output_dir}"
        ) from exc

    return RunResult(scan=scan, artifacts=artifacts)
