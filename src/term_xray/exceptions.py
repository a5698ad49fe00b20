from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Invalid settings or CLI input; the CLI exits with code 2."""


class DocumentLoadError(Exception):
    """A book could not be read from disk (missing, unreadable, bad PDF)."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
