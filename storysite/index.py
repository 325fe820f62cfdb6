"""Site index: every genre, its stories, covers and chapter links on one page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .assets import output_path
from .catalog import Catalog, Story
from .paths import to_url
from .templating import INDEX_TEMPLATE, TemplateRenderer

INDEX_NAME = "index.html"


@dataclass(frozen=True)
class ChapterEntry:
    label: str
    url: str


@dataclass(frozen=True)
class StoryEntry:
    name: str
    genre: str
    cover_url: str | None
    chapters: tuple[ChapterEntry, ...]

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @property
    def first_url(self) -> str | None:
        return self.chapters[0].url if self.chapters else None


@dataclass(frozen=True)
class GenreEntry:
    name: str
    stories: tuple[StoryEntry, ...]


def story_entry(story: Story) -> StoryEntry:
    return StoryEntry(
        name=story.name,
        genre=story.genre,
        cover_url=to_url(story.cover_path) if story.cover_path else None,
        chapters=tuple(ChapterEntry(label=f"Chapter {ch.key}", url=to_url(ch.output_path)) for ch in story.chapters),
    )


def index_entries(catalog: Catalog) -> list[GenreEntry]:
    return [GenreEntry(name=g.name, stories=tuple(story_entry(s) for s in g.stories)) for g in catalog.genres]


def build_index(
    catalog: Catalog,
    templates: TemplateRenderer,
    output_root: Path,
    *,
    site_title: str = "Stories",
    built: datetime | None = None,
) -> Path:
    built = built or datetime.now().astimezone()
    out_path = output_path(output_root, INDEX_NAME)
    context = {
        "genres": index_entries(catalog),
        "year": built.year,
        "built_at": built.isoformat(timespec="seconds"),
        "site_title": site_title,
        "root": "",
        "chapter_count": catalog.chapter_count,
        "story_count": catalog.story_count,
    }
    templates.write(INDEX_TEMPLATE, context, out_path)
    return out_path
