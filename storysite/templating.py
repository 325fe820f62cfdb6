"""Jinja2 page templates.

Lookup order: the project's templates directory, then the templates shipped
inside this package.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import jinja2

from .errors import FilesystemError, TemplateError

BUNDLED_TEMPLATES = Path(__file__).resolve().parent / "templates"

STORY_TEMPLATE = "story.html"
INDEX_TEMPLATE = "index.html"


class TemplateRenderer:
    def __init__(self, templates_dir: Path | None = None) -> None:
        search = [str(templates_dir)] if templates_dir is not None and templates_dir.is_dir() else []
        search.append(str(BUNDLED_TEMPLATES))
        self.search_path = search
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(search),
            autoescape=jinja2.select_autoescape(["html"]),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, name: str, context: Mapping[str, Any], out_path: Path | None = None) -> str:
        try:
            return self.env.get_template(name).render(**context)
        except jinja2.TemplateNotFound as e:
            raise TemplateError(f"template {e.name} not found in {', '.join(self.search_path)}", out_path) from e
        except jinja2.TemplateError as e:
            raise TemplateError(f"template {name} failed ({e})", out_path) from e

    def write(self, name: str, context: Mapping[str, Any], out_path: Path) -> None:
        """Render fully in memory, then write; a failed render leaves no file behind."""
        page = self.render(name, context, out_path)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(page, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"cannot write page ({e.strerror})", out_path) from e
