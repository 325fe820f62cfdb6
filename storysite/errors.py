"""Build errors. Core code raises these; only the CLI decides how to report them."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Base class for every failure that aborts a build."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class NotFoundError(BuildError):
    """A required path does not exist."""


class ConversionError(BuildError):
    """A chapter could not be read or converted to HTML."""


class TemplateError(BuildError):
    """A template could not be loaded or rendered."""


class FilesystemError(BuildError):
    """Reading, writing or copying a file failed."""


class DuplicateChapterError(BuildError):
    """Two chapters of one story share an ordering key."""


class ConfigError(BuildError):
    """site.yaml is unreadable or malformed."""
