"""
Copy covers and mirror `static/` into the output tree.

Plain file sync, no processing.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import FilesystemError
from .paths import safe_join


def output_path(output_root: Path, rel: str) -> Path:
    """Destination for output-relative `rel`; never outside `output_root`."""
    try:
        return safe_join(output_root, rel)
    except ValueError as e:
        raise FilesystemError(f"refusing to write outside the output directory ({e})", output_root / rel) from e


def copy_file(src: Path, dst: Path) -> None:
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)
    except OSError as e:
        raise FilesystemError(f"cannot copy {src} ({e.strerror})", dst) from e


def copy_static(src: Path, dst: Path) -> list[Path]:
    """Mirror every file under `src` into `dst`, keeping relative paths.

    Returns the destination paths written. Directories are created before any
    file is copied into them; the first failure aborts.
    """
    if not src.is_dir():
        raise FilesystemError("static directory is not a directory", src)

    written: list[Path] = []
    try:
        entries = sorted(src.rglob("*"))
    except OSError as e:
        raise FilesystemError(f"cannot walk static directory ({e.strerror})", src) from e

    try:
        dst.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"cannot create directory ({e.strerror})", dst) from e

    for path in entries:
        target = dst / path.relative_to(src)
        if path.is_dir():
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FilesystemError(f"cannot create directory ({e.strerror})", target) from e
            continue
        copy_file(path, target)
        written.append(target)
    return written
