"""WSGI middleware for request logging and CORS headers."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

log = logging.getLogger(__name__)

WSGIApp = Callable[..., Iterable[bytes]]

_CORS_HEADERS = (
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS"),
    ("Access-Control-Allow-Headers", "Content-Type, Authorization"),
)


def logging_middleware(app: WSGIApp) -> WSGIApp:
    """Wrap app so that each request's start and duration are logged."""

    def wrapped(environ, start_response):
        method = environ.get("REQUEST_METHOD", "")
        path = environ.get("PATH_INFO", "")
        started = time.perf_counter()
        log.info("Started %s %s", method, path)
        result = app(environ, start_response)
        elapsed_ms = (time.perf_counter() - started) * 1000
        log.info("Completed %s %s in %.3fms", method, path, elapsed_ms)
        return result

    return wrapped


def cors_middleware(app: WSGIApp) -> WSGIApp:
    """Wrap app with permissive CORS headers; OPTIONS is answered directly."""

    def wrapped(environ, start_response):
        if environ.get("REQUEST_METHOD") == "OPTIONS":
            start_response("200 OK", [*_CORS_HEADERS, ("Content-Length", "0")])
            return [b""]

        def start_with_cors(status, headers, exc_info=None):
            present = {name.lower() for name, _ in headers}
            extra = [h for h in _CORS_HEADERS if h[0].lower() not in present]
            return start_response(status, [*headers, *extra], exc_info)

        return app(environ, start_with_cors)

    return wrapped