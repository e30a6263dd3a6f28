"""Static file server for the front end."""

from __future__ import annotations

import argparse
import html
import logging
import os
from urllib.parse import quote

from werkzeug.security import safe_join
from werkzeug.serving import make_server
from werkzeug.utils import redirect, send_file
from werkzeug.wrappers import Request, Response

log = logging.getLogger(__name__)

DEFAULT_PORT = "2113"


def _not_found() -> Response:
    response = Response(
        "404 page not found\n", status=404, content_type="text/plain; charset=utf-8"
    )
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def _listing(directory: str) -> Response:
    with os.scandir(directory) as entries:
        names = sorted(
            entry.name + "/" if entry.is_dir() else entry.name for entry in entries
        )
    lines = [
        "<!doctype html>\n",
        '<meta name="viewport" content="width=device-width">\n',
        "<pre>\n",
        *(f'<a href="{quote(name)}">{html.escape(name)}</a>\n' for name in names),
        "</pre>\n",
    ]
    return Response("".join(lines), content_type="text/html; charset=utf-8")


def _with_query(location: str, request: Request) -> str:
    query = request.query_string.decode("latin-1")
    return f"{location}?{query}" if query else location


def _serve(root: str, request: Request) -> Response:
    path = request.path
    if path.endswith("/index.html"):
        return redirect(_with_query("./", request), 301)

    relative = path.strip("/")
    target = safe_join(root, relative) if relative else root
    if target is None or not os.path.exists(target):
        return _not_found()

    if os.path.isdir(target):
        if not path.endswith("/"):
            return redirect(_with_query(path + "/", request), 301)
        index = os.path.join(target, "index.html")
        if os.path.isfile(index):
            return send_file(index, request.environ)
        return _listing(target)

    return send_file(target, request.environ)


def create_app(directory: str = "."):
    """Return a WSGI app serving the files under directory."""
    root = os.path.abspath(directory)

    @Request.application
    def app(request: Request) -> Response:
        return _serve(root, request)

    return app


def main(argv=None) -> None:
    """Serve the front-end files until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the front-end files.")
    parser.add_argument("--port", default=DEFAULT_PORT)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    app = create_app(args.directory)
    log.info("Frontend server listening on port %s", args.port)
    try:
        httpd = make_server("0.0.0.0", int(args.port), app, threaded=True)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Frontend server failed to start: {exc}") from exc
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        httpd.server_close()