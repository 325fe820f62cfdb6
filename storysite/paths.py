"""Path helpers shared by the scanner, linker, renderer and index builder.

Filesystem paths stay `pathlib.Path`; everything that ends up in an href is a
POSIX string built with the helpers below.
"""

from __future__ import annotations

import posixpath
from pathlib import Path, PurePosixPath
from urllib.parse import quote


def exists(path: str | Path) -> bool:
    try:
        return Path(path).exists()
    except OSError:
        return False


def safe_join(root: str | Path, *parts: str) -> Path:
    """Join `parts` under `root`, refusing anything that lands outside it."""
    base = Path(root).resolve()
    joined = base.joinpath(*parts).resolve()
    if joined != base and base not in joined.parents:
        raise ValueError(f"{'/'.join(parts)!r} escapes {base}")
    return joined


def url_path(*parts: str) -> str:
    """Output-relative POSIX path from raw segments (no encoding)."""
    return PurePosixPath(*[p.replace("\\", "/").strip("/") for p in parts if p]).as_posix()


def to_url(path: str | PurePosixPath | Path) -> str:
    """Normalize a relative path for use in an href.

    Backslashes become slashes, empty and `.` segments are dropped and every
    segment is percent-encoded.
    """
    raw = str(path).replace("\\", "/")
    trailing = raw.endswith("/") and raw.strip("/") != ""
    segments = [s for s in raw.split("/") if s and s != "."]
    url = "/".join(quote(s) for s in segments)
    return url + "/" if trailing else url


def relative_url(target: str, start_dir: str) -> str:
    """URL for output-relative `target` as seen from a page in `start_dir`."""
    rel = posixpath.relpath(target or ".", start_dir or ".")
    return to_url(rel)


def root_prefix(page_dir: str) -> str:
    """`../` repeated once per segment of `page_dir`; empty at the root."""
    depth = len([s for s in page_dir.split("/") if s and s != "."])
    return "../" * depth
