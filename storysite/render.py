"""Chapter pages: Markdown source -> full HTML document via `story.html`."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from .assets import copy_file, output_path
from .catalog import Chapter, Story
from .convert import MarkdownConverter
from .linker import ChapterLinks, Crumb, link_story
from .paths import relative_url, root_prefix
from .templating import STORY_TEMPLATE, TemplateRenderer


@dataclass(frozen=True)
class PageData:
    title: str
    content: str
    year: int
    built_at: str
    root: str
    index_link: str
    site_title: str
    prev_link: str | None = None
    next_link: str | None = None
    breadcrumbs: tuple[Crumb, ...] = ()

    def as_context(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "year": self.year,
            "built_at": self.built_at,
            "root": self.root,
            "index_link": self.index_link,
            "site_title": self.site_title,
            "prev_link": self.prev_link,
            "next_link": self.next_link,
            "breadcrumbs": list(self.breadcrumbs),
        }


def chapter_title(story: Story, chapter: Chapter) -> str:
    return f"{story.name} — Chapter {chapter.key}"


class PageRenderer:
    def __init__(
        self,
        converter: MarkdownConverter,
        templates: TemplateRenderer,
        output_root: Path,
        *,
        site_title: str = "Stories",
        built: datetime | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self.converter = converter
        self.templates = templates
        self.output_root = output_root
        self.site_title = site_title
        self.built = built or datetime.now().astimezone()
        self.echo = echo or (lambda _msg: None)

    def page_data(self, story: Story, links: ChapterLinks, content: str) -> PageData:
        page_dir = story.output_dir
        return PageData(
            title=chapter_title(story, links.chapter),
            content=content,
            year=self.built.year,
            built_at=self.built.isoformat(timespec="seconds"),
            root=root_prefix(page_dir),
            index_link=relative_url("index.html", page_dir),
            site_title=self.site_title,
            prev_link=links.prev_link,
            next_link=links.next_link,
            breadcrumbs=links.breadcrumbs,
        )

    def copy_cover(self, story: Story) -> Path | None:
        if story.cover is None or story.cover_path is None:
            return None
        dst = output_path(self.output_root, story.cover_path)
        copy_file(story.cover, dst)
        self.echo(f"  ✓ {story.cover_path}")
        return dst

    def render_chapter(self, story: Story, links: ChapterLinks) -> Path:
        chapter = links.chapter
        content = self.converter.convert_file(chapter.source)
        out_path = output_path(self.output_root, chapter.output_path)
        self.templates.write(STORY_TEMPLATE, self.page_data(story, links, content).as_context(), out_path)
        self.echo(f"  ✓ {chapter.output_path}")
        return out_path

    def render_story(self, story: Story, content_root: Path) -> list[Path]:
        """Copy the cover, then write one page per chapter in story order."""
        self.copy_cover(story)
        return [self.render_chapter(story, links) for links in link_story(story, content_root)]
