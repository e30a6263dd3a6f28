"""HTTP handlers for uploading, listing, reading and deleting articles."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError
from jinja2.filters import do_mark_safe
from werkzeug.wrappers import Request, Response

from plumlabs.conversion import ConversionError
from plumlabs.manager import ArticleManager
from plumlabs.storage import ArticleNotFound

log = logging.getLogger(__name__)

_ALLOW_HEADERS = "HX-Request, HX-Target, HX-Current-URL, Content-Type"

_PROCESSING_ERRORS = (ConversionError, ArticleNotFound, sqlite3.Error, OSError)

UPLOAD_OK = "<div id='upload-result' class='success'>Article uploaded successfully</div>"


def _cors(methods: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": _ALLOW_HEADERS,
    }


def _error(message: str, status: int, headers: dict[str, str]) -> Response:
    response = Response(
        message + "\n",
        status=status,
        headers=headers,
        content_type="text/plain; charset=utf-8",
    )
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def _html(body: str, headers: dict[str, str]) -> Response:
    return Response(body, status=200, headers=headers, content_type="text/html")


class API:
    """Request handlers backed by an article manager and HTML templates."""

    def __init__(self, db: sqlite3.Connection, templates_dir: str = "templates") -> None:
        self.db = db
        self.manager = ArticleManager(db)

        directory = Path(templates_dir)
        template_files = sorted(directory.glob("*.html"))
        if not template_files:
            raise FileNotFoundError(f"no templates match {directory / '*.html'}")
        self.templates = Environment(
            loader=FileSystemLoader(str(directory)), autoescape=True
        )
        self.templates.filters["safeHTML"] = do_mark_safe
        for path in template_files:
            self.templates.get_template(path.name)
        log.info("HTML templates loaded successfully.")

    def upload(self, request: Request) -> Response:
        """Accept a Markdown file in the multipart field "file"."""
        headers = _cors("POST, OPTIONS")
        if request.method != "POST":
            return _error("<div class='error'>Method not allowed</div>", 405, headers)
        if request.mimetype != "multipart/form-data":
            return _error(
                "<div class='error'>Failed to parse form: "
                "request Content-Type isn't multipart/form-data</div>",
                400,
                headers,
            )

        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return _error(
                "<div class='error'>Error retrieving file: http: no such file</div>",
                400,
                headers,
            )

        filename = upload.filename.rsplit("/", 1)[-1]
        try:
            self.manager.handle(filename, upload.stream)
        except _PROCESSING_ERRORS as exc:
            return _error(
                f"<div class='error'>Failed to process article: {exc}</div>",
                500,
                headers,
            )

        log.info("Article uploaded successfully")
        return _html(UPLOAD_OK, headers)

    def delete_article(self, request: Request) -> Response:
        """Delete the article named by the "title" form value."""
        headers = _cors("POST, OPTIONS")
        if request.method == "OPTIONS":
            log.info("OPTIONS request received")
            return Response(status=200, headers=headers)
        if request.method != "POST":
            log.info("Method not allowed")
            return _error("Method not allowed", 405, headers)

        if "title" in request.form:
            title = request.form["title"]
        else:
            title = request.args.get("title", "")
        if not title:
            return _error(
                "<div class='error'>Missing title parameter</div>", 400, headers
            )

        try:
            self.manager.delete_article(title)
        except sqlite3.Error as exc:
            log.warning("Deleting article %r failed: %s", title, exc)

        return _html(
            f"<div id='delete-result' class='success'>Article '{title}' "
            "deleted successfully</div>",
            headers,
        )

    def get_article(self, request: Request) -> Response:
        """Render the article named by the "title" query parameter."""
        headers = _cors("GET, OPTIONS")
        title = request.args.get("title", "")
        if not title:
            return _error("Missing title parameter", 400, headers)

        try:
            content = self.manager.read_html_article(title)
        except (ArticleNotFound, sqlite3.Error):
            return _error("Article not found", 404, headers)

        try:
            body = self.templates.get_template("article.html").render(
                HTMLContent=do_mark_safe(content)
            )
        except TemplateError as exc:
            log.error("Error executing article template: %s", exc)
            return _error("Failed to render article", 500, headers)
        return _html(body, headers)

    def get_titles(self, request: Request) -> Response:
        """Render the list of all article titles."""
        headers = _cors("GET, OPTIONS")
        try:
            titles = self.manager.read_all_titles()
        except sqlite3.Error as exc:
            log.error("Error getting titles: %s", exc)
            return _error(
                f"<div class='error'>Failed to get titles: {exc}</div>", 500, headers
            )

        try:
            body = self.templates.get_template("articles.html").render(Titles=titles)
        except TemplateError as exc:
            log.error("Error executing articles template: %s", exc)
            return _error("Failed to render articles list", 500, headers)
        return _html(body, headers)