"""Static site generator for Markdown stories organized by genre."""

from __future__ import annotations

from .build import BuildReport, build_site
from .catalog import Catalog, Chapter, Genre, Story
from .config import SiteConfig, load_site_config
from .errors import (
    BuildError,
    ConfigError,
    ConversionError,
    DuplicateChapterError,
    FilesystemError,
    NotFoundError,
    TemplateError,
)
from .scanner import scan_content

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "BuildReport",
    "Catalog",
    "Chapter",
    "ConfigError",
    "ConversionError",
    "DuplicateChapterError",
    "FilesystemError",
    "Genre",
    "NotFoundError",
    "SiteConfig",
    "Story",
    "TemplateError",
    "build_site",
    "load_site_config",
    "scan_content",
]
