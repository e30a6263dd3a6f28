"""SQLite storage of articles."""

from __future__ import annotations

import logging
import sqlite3

from plumlabs.article import Article

log = logging.getLogger(__name__)

DEFAULT_PATH = "storage.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS Articles (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    title       TEXT NOT NULL UNIQUE,
    htmlContent TEXT NOT NULL,
    mdContent   TEXT NOT NULL,
    created_at  DATETIME DEFAULT CURRENT_TIMESTAMP,
    last_update DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

_SELECT = "SELECT id, title, mdContent, htmlContent, last_update FROM Articles"


class ArticleNotFound(LookupError):
    """Raised when no article matches a lookup."""


def _from_row(row: tuple) -> Article:
    article_id, title, md, html, last_update = row
    return Article(
        id=article_id,
        title=title,
        md_content=md,
        html_content=html,
        last_update="" if last_update is None else str(last_update),
    )


def open_database(path: str = DEFAULT_PATH) -> sqlite3.Connection:
    """Open the database at path and make sure its schema exists."""
    log.info("Opening database connection")
    conn = sqlite3.connect(path, check_same_thread=False)
    init_schema(conn)
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the Articles table if it is missing."""
    log.info("Init database")
    with conn:
        conn.executescript(_SCHEMA)


def insert_article(conn: sqlite3.Connection, article: Article) -> int:
    """Insert an article and return its new id.

    Raises sqlite3.IntegrityError when the title is already taken.
    """
    log.info("Creating article with title: %s", article.title)
    with conn:
        cursor = conn.execute(
            "INSERT INTO Articles (title, mdContent, htmlContent) VALUES (?, ?, ?)",
            (article.title, article.md_content, article.html_content),
        )
    return cursor.lastrowid


def get_article_by_id(conn: sqlite3.Connection, article_id: int) -> Article:
    """Return the article with the given id."""
    log.info("Getting article with id: %d", article_id)
    row = conn.execute(f"{_SELECT} WHERE id = ?", (article_id,)).fetchone()
    if row is None:
        raise ArticleNotFound(f"no article with id {article_id}")
    return _from_row(row)


def get_article_by_title(conn: sqlite3.Connection, title: str) -> Article:
    """Return the article with the given title."""
    log.info("Getting article with title: %s", title)
    row = conn.execute(f"{_SELECT} WHERE title = ?", (title,)).fetchone()
    if row is None:
        raise ArticleNotFound(f"no article titled {title!r}")
    return _from_row(row)


def get_all_articles(conn: sqlite3.Connection) -> list[Article]:
    """Return every stored article."""
    log.info("Getting all articles")
    return [_from_row(row) for row in conn.execute(_SELECT)]


def update_article(conn: sqlite3.Connection, article: Article) -> None:
    """Overwrite the stored article that has article.id."""
    log.info("Updating article with id: %d", article.id)
    with conn:
        conn.execute(
            "UPDATE Articles SET title = ?, mdContent = ?, htmlContent = ?, "
            "last_update = CURRENT_TIMESTAMP WHERE id = ?",
            (article.title, article.md_content, article.html_content, article.id),
        )


def delete_article(conn: sqlite3.Connection, title: str) -> None:
    """Delete the article with the given title, if any."""
    log.info("Deleting article with title: %s", title)
    with conn:
        conn.execute("DELETE FROM Articles WHERE title = ?", (title,))