"""Markdown chapter -> HTML fragment."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import markdown

from .errors import ConversionError

DEFAULT_EXTENSIONS = ("extra", "sane_lists")


class MarkdownConverter:
    """Thin wrapper around `markdown.Markdown` that speaks bytes and raises ConversionError."""

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = list(extensions)
        try:
            self._md = markdown.Markdown(extensions=self.extensions, output_format="html")
        except (ImportError, AttributeError, TypeError, ValueError) as e:
            raise ConversionError(f"cannot load markdown extensions {self.extensions} ({e})") from e

    def convert(self, source: bytes, path: Path | None = None) -> str:
        try:
            text = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ConversionError(f"chapter is not valid UTF-8 ({e.reason} at byte {e.start})", path) from e
        try:
            return self._md.reset().convert(text)
        except Exception as e:
            raise ConversionError(f"markdown conversion failed ({e})", path) from e

    def convert_file(self, path: Path) -> str:
        try:
            source = path.read_bytes()
        except OSError as e:
            raise ConversionError(f"cannot read chapter ({e.strerror})", path) from e
        return self.convert(source, path)
