from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base error for all generation-related failures."""


class ParsingError(GenerationError):
    """Errors raised while parsing a single definition file."""


class MarkupError(ParsingError):
    """Tag-syntax violation met while streaming a definition file."""

    def __init__(self, message: str, *, path: Path | None = None, line: int | None = None) -> None:
        self.path = path
        self.line = line
        location = str(path) if path is not None else "<markup>"
        if line is not None:
            location = f"{location}:{line}"
        super().__init__(f"{location}: {message}")


class ValidationError(GenerationError):
    """Errors raised while validating the run configuration (fatal for the run)."""
