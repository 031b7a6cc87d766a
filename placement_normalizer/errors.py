from __future__ import annotations

from pathlib import Path


class NormalizerError(Exception):
    """Base error for file-level failures. Row-level transformation never raises."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class CatalogWriteError(NormalizerError):
    """A catalog file could not be opened for appending."""


class ConversionError(NormalizerError):
    """An input file could not be read or its output could not be created."""
