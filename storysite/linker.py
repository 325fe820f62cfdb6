"""Previous/next navigation and breadcrumbs for the chapters of one story."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .catalog import Chapter, Story
from .paths import relative_url


@dataclass(frozen=True)
class Crumb:
    name: str
    link: str


@dataclass(frozen=True)
class ChapterLinks:
    chapter: Chapter
    previous: Chapter | None
    next: Chapter | None
    breadcrumbs: tuple[Crumb, ...]

    @property
    def prev_link(self) -> str | None:
        return _link(self.chapter, self.previous)

    @property
    def next_link(self) -> str | None:
        return _link(self.chapter, self.next)


def _link(page: Chapter, target: Chapter | None) -> str | None:
    if target is None:
        return None
    page_dir = page.output_path.rsplit("/", 1)[0]
    return relative_url(target.output_path, page_dir)


def breadcrumbs(story: Story, content_root: Path, page: Chapter) -> tuple[Crumb, ...]:
    """One crumb per directory from the content root down to the story."""
    first = story.first_chapter
    if first is None:
        return ()
    link = _link(page, first)
    try:
        segments = story.directory.relative_to(content_root).parts
    except ValueError:
        segments = (story.genre, story.name)
    return tuple(Crumb(name=seg, link=link) for seg in segments)


def link_story(story: Story, content_root: Path) -> list[ChapterLinks]:
    """Navigation and breadcrumbs per chapter.

    Previous/next follow position in `story.chapters`, not key arithmetic:
    `2.md, 4.md` link to each other.
    """
    chapters = story.chapters
    out: list[ChapterLinks] = []
    for i, ch in enumerate(chapters):
        out.append(
            ChapterLinks(
                chapter=ch,
                previous=chapters[i - 1] if i > 0 else None,
                next=chapters[i + 1] if i + 1 < len(chapters) else None,
                breadcrumbs=breadcrumbs(story, content_root, ch),
            )
        )
    return out
