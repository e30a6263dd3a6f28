"""The article server: routing, configuration and lifecycle."""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sqlite3
import threading

from dotenv import load_dotenv
from jinja2 import TemplateError
from werkzeug.serving import make_server
from werkzeug.wrappers import Request, Response

from plumlabs.api import API
from plumlabs.frontend import create_app
from plumlabs.storage import DEFAULT_PATH, open_database

log = logging.getLogger(__name__)

SHUTDOWN_TIMEOUT = 10.0


def load_port(env_file: str = ".env") -> str:
    """Load env_file into the environment and return its PORT setting."""
    if not os.path.isfile(env_file):
        raise FileNotFoundError(f"Error loading .env file: {env_file}")
    load_dotenv(env_file)
    port = os.environ.get("PORT", "")
    if not port:
        raise RuntimeError("PORT not set in .env")
    return port


def _not_found() -> Response:
    response = Response(
        "404 page not found\n", status=404, content_type="text/plain; charset=utf-8"
    )
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


class Server:
    """WSGI application routing API calls and static files."""

    def __init__(self, api: API, port: str | None = None, static_dir: str = "static") -> None:
        self.api = api
        self.port = load_port() if port is None else str(port)
        self.static_dir = static_dir
        self._routes = {}
        self._fallback = None

    def setup_routes(self) -> None:
        """Register the API endpoints and the static file handler."""
        self._routes.update(
            {
                "/api/upload": self.api.upload,
                "/api/article/delete": self.api.delete_article,
                "/api/articles/getall": self.api.get_titles,
                "/api/article/get": self.api.get_article,
            }
        )
        self._fallback = create_app(self.static_dir)

    def wsgi_app(self, environ, start_response):
        """Dispatch a request to its route, or to the static files."""
        request = Request(environ)
        handler = self._routes.get(request.path)
        if handler is not None:
            return handler(request)(environ, start_response)
        if self._fallback is not None:
            return self._fallback(environ, start_response)
        return _not_found()(environ, start_response)

    def __call__(self, environ, start_response):
        return self.wsgi_app(environ, start_response)

    def start_with_graceful_shutdown(self) -> None:
        """Serve until SIGINT or SIGTERM, then shut down cleanly."""
        httpd = make_server("0.0.0.0", int(self.port), self, threaded=True)
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        log.info("Server listening on port %s", self.port)
        thread.start()

        stop = threading.Event()
        signals = (signal.SIGINT, signal.SIGTERM)
        previous = {sig: signal.signal(sig, lambda *_: stop.set()) for sig in signals}
        try:
            while not stop.wait(0.5):
                pass
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)

        log.info("Shutting down server...")
        httpd.shutdown()
        thread.join(SHUTDOWN_TIMEOUT)
        httpd.server_close()
        if thread.is_alive():
            raise RuntimeError("Server forced to shutdown")
        log.info("Server exited gracefully")


def main(argv=None) -> None:
    """Open the database, build the API and serve it."""
    parser = argparse.ArgumentParser(description="Serve the article API.")
    parser.add_argument("--env-file", default=".env")
    parser.add_argument("--database", default=DEFAULT_PATH)
    parser.add_argument("--templates", default="templates")
    parser.add_argument("--static", default="static")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        db = open_database(args.database)
    except sqlite3.Error as exc:
        raise SystemExit(f"Failed to open database: {exc}") from exc
    try:
        api = API(db, args.templates)
    except (OSError, TemplateError) as exc:
        raise SystemExit(f"Failed to parse templates: {exc}") from exc
    try:
        server = Server(api, load_port(args.env_file), args.static)
    except (OSError, RuntimeError) as exc:
        raise SystemExit(str(exc)) from exc

    server.setup_routes()
    log.info("Starting server...")
    try:
        server.start_with_graceful_shutdown()
    except (OSError, ValueError, RuntimeError) as exc:
        raise SystemExit(f"Server failed: {exc}") from exc