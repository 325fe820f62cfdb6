"""
Full site build: scan -> render chapters -> index -> static assets.

Inputs:
  - <content>/<genre>/<story>/*.md
  - <content>/<genre>/<story>/cover.{png,jpg,jpeg}
  - <static>/**
Outputs:
  - <output>/<genre>/<story>/<chapter>.html
  - <output>/<genre>/<story>/cover.<ext>
  - <output>/static/**
  - <output>/index.html
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from .assets import copy_static
from .config import SiteConfig
from .convert import MarkdownConverter
from .errors import BuildError, FilesystemError
from .index import build_index
from .render import PageRenderer
from .scanner import scan_content
from .templating import TemplateRenderer

STATIC_SUBDIR = "static"


@dataclass
class BuildReport:
    output_root: Path
    genres: int = 0
    stories: int = 0
    chapters: int = 0
    covers: int = 0
    static_files: int = 0


def _is_within(child: Path, parent: Path) -> bool:
    child, parent = child.resolve(), parent.resolve()
    return child == parent or parent in child.parents


def clean_output(output_root: Path, config: SiteConfig) -> None:
    """Empty `output_root` so the build is a full rebuild."""
    if _is_within(config.content_dir, output_root) or _is_within(config.root, output_root):
        raise BuildError("refusing to clean an output directory that contains the project or content", output_root)
    if not output_root.exists():
        return
    try:
        for entry in output_root.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
    except OSError as e:
        raise FilesystemError(f"cannot clean output directory ({e.strerror})", output_root) from e


def build_site(
    config: SiteConfig,
    *,
    converter: MarkdownConverter | None = None,
    templates: TemplateRenderer | None = None,
    built: datetime | None = None,
    echo: Callable[[str], None] = print,
    verbose: bool = True,
) -> BuildReport:
    """Run the whole pipeline once. Any BuildError propagates to the caller."""
    converter = converter or MarkdownConverter(config.markdown_extensions)
    templates = templates or TemplateRenderer(config.templates_dir)
    built = built or datetime.now().astimezone()
    item_echo = echo if verbose else None
    out = config.output_dir

    catalog = scan_content(config.content_dir)
    echo(f"Found {catalog.chapter_count} chapters in {catalog.story_count} stories")

    if config.clean:
        clean_output(out, config)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"cannot create output directory ({e.strerror})", out) from e

    report = BuildReport(output_root=out, genres=len(catalog.genres), stories=catalog.story_count)
    renderer = PageRenderer(converter, templates, out, site_title=config.title, built=built, echo=item_echo)
    for story in catalog.stories():
        report.chapters += len(renderer.render_story(story, catalog.root))
        if story.cover is not None:
            report.covers += 1

    index_path = build_index(catalog, templates, out, site_title=config.title, built=built)
    if item_echo:
        item_echo(f"  ✓ {index_path.name}")

    if config.static_dir.is_dir():
        report.static_files = len(copy_static(config.static_dir, out / STATIC_SUBDIR))
        if item_echo:
            item_echo(f"  ✓ {STATIC_SUBDIR}/ ({report.static_files} files)")
    else:
        echo(f"No static directory at {config.static_dir}; skipping assets")

    echo(
        f"\nDone. {report.chapters} chapters, {report.stories} stories, {report.genres} genres "
        f"-> {os.path.relpath(out, config.root)}"
    )
    return report
