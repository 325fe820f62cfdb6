"""
Walk `<content>/<genre>/<story>/*.md` and build the Catalog.

Read-only: nothing is copied or written here.
"""

from __future__ import annotations

import re
from pathlib import Path

from .catalog import Catalog, Chapter, Genre, Story
from .errors import DuplicateChapterError, FilesystemError, NotFoundError
from .paths import exists

CHAPTER_SUFFIX = ".md"
COVER_EXTENSIONS = ("png", "jpg", "jpeg")

NUMERIC_RE = re.compile(r"^\d+$")


def _list_dir(path: Path) -> list[Path]:
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FilesystemError(f"cannot read directory ({e.strerror})", path) from e


def _subdirs(path: Path) -> list[Path]:
    return [p for p in _list_dir(path) if p.is_dir() and not p.name.startswith(".")]


def ordering_keys(filenames: list[str]) -> dict[str, int]:
    """Map each chapter filename to its ordering key.

    Numeric stems use their integer value. Anything else falls back to its
    1-based position in lexicographically sorted filename order.
    """
    keys: dict[str, int] = {}
    for pos, name in enumerate(sorted(filenames), start=1):
        stem = name[: -len(CHAPTER_SUFFIX)] if name.endswith(CHAPTER_SUFFIX) else name
        keys[name] = int(stem) if NUMERIC_RE.match(stem) else pos
    return keys


def find_cover(story_dir: Path) -> Path | None:
    for ext in COVER_EXTENSIONS:
        p = story_dir / f"cover.{ext}"
        if exists(p) and not p.is_dir():
            return p
    return None


def scan_story(genre: str, story_dir: Path) -> Story:
    files = [
        p.name
        for p in _list_dir(story_dir)
        if p.is_file() and p.name.endswith(CHAPTER_SUFFIX) and not p.name.startswith(".")
    ]
    keys = ordering_keys(files)

    chapters = sorted(
        (Chapter(genre=genre, story=story_dir.name, key=keys[name], source=story_dir / name) for name in files),
        key=lambda c: (c.key, c.filename),
    )
    for prev, cur in zip(chapters, chapters[1:]):
        if prev.key == cur.key:
            message = f"chapters {prev.filename} and {cur.filename} share ordering key {cur.key}"
            positional = [c.filename for c in (prev, cur) if not NUMERIC_RE.match(c.stem)]
            if positional:
                message += (
                    f"; {positional[0]} has no number, so its key is its sorted position ({cur.key}),"
                    f" which clashes with a numbered chapter. Rename it to an unused number"
                )
            else:
                message += "; rename one of them"
            raise DuplicateChapterError(message, story_dir)

    return Story(
        genre=genre,
        name=story_dir.name,
        directory=story_dir,
        chapters=tuple(chapters),
        cover=find_cover(story_dir),
    )


def scan_content(content_root: str | Path) -> Catalog:
    root = Path(content_root)
    if not root.is_dir():
        raise NotFoundError("content directory not found", root)

    genres: list[Genre] = []
    for genre_dir in _subdirs(root):
        stories = tuple(scan_story(genre_dir.name, story_dir) for story_dir in _subdirs(genre_dir))
        genres.append(Genre(name=genre_dir.name, stories=stories))

    return Catalog(root=root, genres=tuple(genres))
