from dataclasses import replace
from datetime import datetime
from pathlib import Path

import pytest

from conftest import StubConverter, write_tree
from storysite.build import build_site
from storysite.errors import BuildError, ConversionError, NotFoundError

BUILT = datetime(2025, 3, 14, 9, 30)


def _outputs(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


def test_red_lily_scenario(config) -> None:
    lines: list[str] = []
    report = build_site(config, built=BUILT, echo=lines.append)
    out = config.output_dir

    assert _outputs(out) == {
        "fantasy/red-lily/1.html",
        "fantasy/red-lily/2.html",
        "fantasy/red-lily/cover.png",
        "index.html",
        "static/style.css",
    }
    assert (report.genres, report.stories, report.chapters, report.covers, report.static_files) == (1, 1, 2, 1, 1)

    one = (out / "fantasy/red-lily/1.html").read_text(encoding="utf-8")
    two = (out / "fantasy/red-lily/2.html").read_text(encoding="utf-8")
    assert "<em>chapter</em>" in one
    assert 'class="next" href="2.html"' in one and 'class="prev"' not in one
    assert 'class="prev" href="1.html"' in two and 'class="next"' not in two

    index = (out / "index.html").read_text(encoding="utf-8")
    assert "<h2>fantasy</h2>" in index
    assert "<h3>red-lily</h3>" in index
    assert 'data-chapters="2"' in index
    assert 'src="fantasy/red-lily/cover.png"' in index

    assert lines[0] == "Found 2 chapters in 1 stories"
    assert "  ✓ fantasy/red-lily/1.html" in lines
    assert lines[-1].startswith("\nDone. 2 chapters")


def test_every_chapter_has_exactly_one_output(config) -> None:
    write_tree(
        config.content_dir,
        {
            "mystery/house/1.md": "a",
            "mystery/house/4.md": "b",
            "mystery/house/appendix.md": "c",
            "scifi/orbit/10.md": "d",
        },
    )
    build_site(config, converter=StubConverter(), built=BUILT, echo=lambda _m: None)

    sources = {p.relative_to(config.content_dir).as_posix() for p in config.content_dir.rglob("*.md")}
    pages = {p for p in _outputs(config.output_dir) if p.endswith(".html") and p != "index.html"}
    assert pages == {s[: -len(".md")] + ".html" for s in sources}


def test_full_rebuild_removes_stale_output(config) -> None:
    write_tree(config.output_dir, {"old/story/9.html": "stale", "index.html": "old"})
    build_site(config, built=BUILT, echo=lambda _m: None)
    assert not (config.output_dir / "old").exists()
    assert (config.output_dir / "index.html").read_text(encoding="utf-8") != "old"


def test_no_clean_keeps_existing_files(config) -> None:
    write_tree(config.output_dir, {"CNAME": "stories.example"})
    build_site(replace(config, clean=False), built=BUILT, echo=lambda _m: None)
    assert (config.output_dir / "CNAME").read_text(encoding="utf-8") == "stories.example"


def test_missing_content_root_leaves_output_untouched(config) -> None:
    write_tree(config.output_dir, {"keep.html": "previous build"})
    broken = replace(config, content_dir=config.root / "missing")
    with pytest.raises(NotFoundError):
        build_site(broken, built=BUILT, echo=lambda _m: None)
    assert _outputs(config.output_dir) == {"keep.html"}


def test_conversion_failure_aborts(config) -> None:
    write_tree(config.content_dir, {"fantasy/red-lily/3.md": b"\xff\xfe broken"})
    with pytest.raises(ConversionError) as exc:
        build_site(config, built=BUILT, echo=lambda _m: None)
    assert exc.value.path == config.content_dir / "fantasy/red-lily/3.md"
    assert not (config.output_dir / "fantasy/red-lily/3.html").exists()
    assert not (config.output_dir / "index.html").exists()


def test_missing_static_dir_is_skipped(config) -> None:
    lines: list[str] = []
    report = build_site(replace(config, static_dir=config.root / "nostatic"), built=BUILT, echo=lines.append)
    assert report.static_files == 0
    assert not (config.output_dir / "static").exists()
    assert any(l.startswith("No static directory") for l in lines)


def test_refuses_to_clean_project_root(config) -> None:
    with pytest.raises(BuildError):
        build_site(replace(config, output_dir=config.root), built=BUILT, echo=lambda _m: None)
    assert (config.content_dir / "fantasy/red-lily/1.md").exists()


def test_quiet_build_prints_summary_only(config) -> None:
    lines: list[str] = []
    build_site(config, built=BUILT, echo=lines.append, verbose=False)
    assert not any(l.startswith("  ✓") for l in lines)
    assert lines[-1].startswith("\nDone.")
