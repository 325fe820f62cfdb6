from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the in-repo package importable without an editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storysite.config import SiteConfig  # noqa: E402


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    for rel, body in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(body, bytes):
            p.write_bytes(body)
        else:
            p.write_text(body, encoding="utf-8")
    return root


class StubConverter:
    """Returns a fixed fragment naming the source file."""

    def __init__(self) -> None:
        self.calls: list[Path] = []

    def convert_file(self, path: Path) -> str:
        self.calls.append(path)
        return f"<p>stub {path.name}</p>"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    write_tree(
        tmp_path,
        {
            "content/fantasy/red-lily/1.md": "# One\n\nFirst *chapter*.\n",
            "content/fantasy/red-lily/2.md": "# Two\n\nSecond chapter.\n",
            "content/fantasy/red-lily/cover.png": b"\x89PNG fake",
            "static/style.css": "body { color: black; }\n",
        },
    )
    return tmp_path


@pytest.fixture
def config(project: Path) -> SiteConfig:
    return SiteConfig(
        root=project,
        content_dir=project / "content",
        output_dir=project / "public",
        static_dir=project / "static",
        templates_dir=project / "templates",
    )
