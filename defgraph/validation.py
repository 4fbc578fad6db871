from __future__ import annotations

from pathlib import Path

from .errors import ValidationError
from .parsing.driver import DATA_SUBDIR


def validate_root_dir(root_dir: Path, data_subdir: str = DATA_SUBDIR) -> None:
    """Fail the run before any parsing when there is nothing to process."""
    if not root_dir.exists():
        raise ValidationError(f"Root path does not exist: {root_dir}")
    data_dir = root_dir / data_subdir
    if not data_dir.is_dir():
        raise ValidationError(f"Data directory not found: {data_dir}")


def duplicate_identities(identities: dict[str, list[int]]) -> dict[str, int]:
    """Identities shared by more than one record (patch/override pattern), with counts."""
    return {identity: len(idxs) for identity, idxs in identities.items() if len(idxs) > 1}
