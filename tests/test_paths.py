from pathlib import Path

import pytest

from storysite.paths import exists, relative_url, root_prefix, safe_join, to_url, url_path


def test_exists(tmp_path: Path) -> None:
    (tmp_path / "a.md").write_text("x", encoding="utf-8")
    assert exists(tmp_path / "a.md")
    assert not exists(tmp_path / "b.md")


def test_safe_join_stays_under_root(tmp_path: Path) -> None:
    assert safe_join(tmp_path, "fantasy", "red-lily") == (tmp_path / "fantasy" / "red-lily").resolve()
    with pytest.raises(ValueError):
        safe_join(tmp_path, "..", "elsewhere")


def test_to_url_normalizes_slashes_and_encodes() -> None:
    assert to_url("fantasy\\red lily\\1.html") == "fantasy/red%20lily/1.html"
    assert to_url("./a//b/") == "a/b/"
    assert to_url("../x.html") == "../x.html"


def test_url_path_strips_stray_slashes() -> None:
    assert url_path("fantasy/", "/red-lily", "1.html") == "fantasy/red-lily/1.html"


def test_relative_url_between_pages() -> None:
    assert relative_url("fantasy/red-lily/2.html", "fantasy/red-lily") == "2.html"
    assert relative_url("index.html", "fantasy/red-lily") == "../../index.html"
    assert relative_url("mystery/house/1.html", "fantasy/red-lily") == "../../mystery/house/1.html"


def test_root_prefix() -> None:
    assert root_prefix("") == ""
    assert root_prefix("fantasy/red-lily") == "../../"
