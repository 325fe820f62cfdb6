"""Site configuration: optional `site.yaml` merged over defaults."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

CONFIG_NAME = "site.yaml"

DEFAULTS: dict[str, Any] = {
    "title": "Stories",
    "content_dir": "content",
    "output_dir": "public",
    "static_dir": "static",
    "templates_dir": "templates",
    "markdown_extensions": ["extra", "sane_lists"],
    "clean": True,
}


@dataclass(frozen=True)
class SiteConfig:
    root: Path
    title: str = DEFAULTS["title"]
    content_dir: Path = Path(DEFAULTS["content_dir"])
    output_dir: Path = Path(DEFAULTS["output_dir"])
    static_dir: Path = Path(DEFAULTS["static_dir"])
    templates_dir: Path = Path(DEFAULTS["templates_dir"])
    markdown_extensions: tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULTS["markdown_extensions"]))
    clean: bool = True

    def with_overrides(self, **overrides: Any) -> "SiteConfig":
        """Apply CLI overrides; `None` means "not given"."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in ("content_dir", "output_dir", "static_dir", "templates_dir"):
            if key in changes:
                changes[key] = _resolve(self.root, changes[key])
        return replace(self, **changes)


def _resolve(root: Path, value: str | Path) -> Path:
    p = Path(value).expanduser()
    return p if p.is_absolute() else (root / p).resolve()


def load_site_config(root: str | Path = ".", config_path: str | Path | None = None) -> SiteConfig:
    """Load `site.yaml` from `root` (or `config_path`); a missing default file is fine."""
    root = Path(root).resolve()
    explicit = config_path is not None
    p = Path(config_path) if explicit else root / CONFIG_NAME

    cfg: dict[str, Any] = {}
    if p.is_file():
        try:
            loaded = yaml.safe_load(p.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML ({e})", p) from e
        except OSError as e:
            raise ConfigError(f"cannot read config ({e.strerror})", p) from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError("config must be a mapping", p)
        cfg = loaded
    elif explicit:
        raise ConfigError("config file not found", p)

    out = DEFAULTS.copy()
    out.update({k: v for k, v in cfg.items() if k in DEFAULTS and v is not None})

    for key in ("content_dir", "output_dir", "static_dir", "templates_dir"):
        if not isinstance(out[key], str) or not out[key].strip():
            raise ConfigError(f"{key} must be a path string, got {out[key]!r}", p)
    if not isinstance(out["title"], (str, int, float)) or isinstance(out["title"], bool):
        raise ConfigError(f"title must be text, got {out['title']!r}", p)
    if not isinstance(out["clean"], bool):
        raise ConfigError(f"clean must be true or false, got {out['clean']!r}", p)

    exts = out["markdown_extensions"]
    if isinstance(exts, str):
        exts = [exts]
    if not isinstance(exts, list) or not all(isinstance(e, str) for e in exts):
        raise ConfigError("markdown_extensions must be a list of names", p)

    return SiteConfig(
        root=root,
        title=str(out["title"]),
        content_dir=_resolve(root, out["content_dir"]),
        output_dir=_resolve(root, out["output_dir"]),
        static_dir=_resolve(root, out["static_dir"]),
        templates_dir=_resolve(root, out["templates_dir"]),
        markdown_extensions=tuple(exts),
        clean=bool(out["clean"]),
    )
