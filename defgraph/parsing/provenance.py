"""Source path helpers: extension detection and root-relative paths."""
from __future__ import annotations

from pathlib import Path

from .model import UNKNOWN

# Checked in order; the first substring found in the lower-cased path wins.
EXTENSION_MARKERS: tuple[tuple[str, str], ...] = (
    ("anomaly", "Anomaly"),
    ("biotech", "Biotech"),
    ("ideology", "Ideology"),
    ("royalty", "Royalty"),
    ("odyssey", "Odyssey"),
    ("core", "Core"),
)


def detect_extension(path: Path | str) -> str:
    lowered = str(path).lower()
    for marker, extension in EXTENSION_MARKERS:
        if marker in lowered:
            return extension
    return UNKNOWN


def relative_source_path(path: Path, root: Path | None) -> str:
    if root is not None:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.name
