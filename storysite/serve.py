"""Local preview: serve the built site as plain files."""

from __future__ import annotations

import functools
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from .errors import NotFoundError


def make_server(output_root: Path, host: str = "localhost", port: int = 8080) -> ThreadingHTTPServer:
    if not output_root.is_dir():
        raise NotFoundError("output directory not found (run `storysite build` first)", output_root)
    handler = functools.partial(SimpleHTTPRequestHandler, directory=str(output_root))
    return ThreadingHTTPServer((host, port), handler)


def serve(output_root: Path, host: str = "localhost", port: int = 8080) -> None:
    httpd = make_server(output_root, host, port)
    print(f"Serving {output_root} at http://{host}:{httpd.server_address[1]}/")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("\nStopped.")
    finally:
        httpd.server_close()
