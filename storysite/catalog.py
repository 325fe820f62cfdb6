"""In-memory catalog of genres, stories and chapters for one build."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .paths import url_path


@dataclass(frozen=True)
class Chapter:
    genre: str
    story: str
    key: int
    source: Path

    @property
    def filename(self) -> str:
        return self.source.name

    @property
    def stem(self) -> str:
        return self.source.stem

    @property
    def output_path(self) -> str:
        """Output-relative path: the source path with `.md` swapped for `.html`."""
        return url_path(self.genre, self.story, f"{self.stem}.html")


@dataclass(frozen=True)
class Story:
    genre: str
    name: str
    directory: Path
    chapters: tuple[Chapter, ...]
    cover: Path | None = None

    @property
    def output_dir(self) -> str:
        return url_path(self.genre, self.name)

    @property
    def cover_path(self) -> str | None:
        if self.cover is None:
            return None
        return url_path(self.genre, self.name, self.cover.name)

    @property
    def first_chapter(self) -> Chapter | None:
        return self.chapters[0] if self.chapters else None


@dataclass(frozen=True)
class Genre:
    name: str
    stories: tuple[Story, ...]


@dataclass(frozen=True)
class Catalog:
    root: Path
    genres: tuple[Genre, ...]

    def stories(self) -> Iterator[Story]:
        for genre in self.genres:
            yield from genre.stories

    def chapters(self) -> Iterator[Chapter]:
        for story in self.stories():
            yield from story.chapters

    @property
    def chapter_count(self) -> int:
        return sum(len(s.chapters) for s in self.stories())

    @property
    def story_count(self) -> int:
        return sum(len(g.stories) for g in self.genres)
