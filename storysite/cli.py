"""
storysite command line.

  storysite build   # content/ -> public/
  storysite serve   # preview public/ at http://localhost:8080
"""

from __future__ import annotations

import argparse
import sys

from .build import build_site
from .config import load_site_config
from .errors import BuildError, ConfigError
from .serve import serve


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--root", default=".", help="Project root holding site.yaml (default: cwd)")
    p.add_argument("--config", help="Path to site.yaml (default: <root>/site.yaml)")
    p.add_argument("--output", help="Output directory (default: public)")


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="storysite", description="Build a static site from Markdown stories.")
    sub = ap.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="Rebuild the output directory from the content tree")
    _add_common(b)
    b.add_argument("--content", help="Content directory (default: content)")
    b.add_argument("--static", help="Static assets directory (default: static)")
    b.add_argument("--templates", help="Templates directory (default: templates)")
    b.add_argument("--no-clean", action="store_true", help="Do not empty the output directory first")
    b.add_argument("-q", "--quiet", action="store_true", help="Only print the summary")

    s = sub.add_parser("serve", help="Serve the output directory over HTTP")
    _add_common(s)
    s.add_argument("--host", default="localhost")
    s.add_argument("--port", type=int, default=8080)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    try:
        config = load_site_config(args.root, args.config).with_overrides(output_dir=args.output)
    except ConfigError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 2

    if args.command == "serve":
        try:
            serve(config.output_dir, args.host, args.port)
        except BuildError as e:
            print(f"❌ Error: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"❌ Error: cannot bind {args.host}:{args.port} ({e.strerror})", file=sys.stderr)
            return 1
        return 0

    config = config.with_overrides(
        content_dir=args.content,
        static_dir=args.static,
        templates_dir=args.templates,
        clean=False if args.no_clean else None,
    )
    try:
        build_site(config, verbose=not args.quiet)
    except BuildError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    print(f"✨ Site built in {config.output_dir}")
    return 0

