"""Article management: uploads, reads, updates and deletions."""

from __future__ import annotations

import logging
import sqlite3
from typing import IO

from plumlabs import storage
from plumlabs.article import Article

log = logging.getLogger(__name__)


def split_name(filename: str) -> tuple[str, str]:
    """Split a filename at its last dot; ("", "") when there is none."""
    log.info("Splitting filename: %s", filename)
    name, dot, extension = filename.rpartition(".")
    if not dot:
        return "", ""
    return name, extension


class ArticleManager:
    """Creates, stores and looks up articles in a database."""

    def __init__(self, db: sqlite3.Connection) -> None:
        log.info("ArticleManager created")
        self.db = db
        self.articles: list[Article] = []

    def handle(self, filename: str, stream: IO) -> None:
        """Create or update the article carried by an uploaded file.

        New articles are only accepted from .md files; other new files are
        ignored. An existing title is updated whatever its extension.
        """
        log.info("file received: %s", filename)
        name, extension = split_name(filename)
        if not self._exists(name):
            log.info("Creating new article")
            if extension == "md":
                self.articles.append(self.create_article(filename, stream))
            else:
                log.info("Wrong extension")
        else:
            log.info("Updating old article")
            self.update_article(name, filename, stream)

        try:
            self.save_articles()
        except sqlite3.Error as exc:
            log.warning("Saving articles failed: %s", exc)

    def save_articles(self) -> None:
        """Store every pending article that is not in the database yet."""
        log.info("Saving articles")
        for article in self.articles:
            try:
                storage.insert_article(self.db, article)
            except sqlite3.IntegrityError:
                if not self._exists(article.title):
                    raise

    def create_article(self, filename: str, stream: IO) -> Article:
        """Build an article from an uploaded file, rendering its HTML."""
        log.info("Creating article from file: %s", filename)
        title, _ = split_name(filename)
        article = Article(title=title)
        article.read_content(stream)
        article.convert_to_html()
        return article

    def read_html_article(self, title: str) -> str:
        """Return the stored HTML of the titled article."""
        return storage.get_article_by_title(self.db, title).html_content

    def read_md_article(self, title: str) -> str:
        """Return the stored Markdown of the titled article."""
        return storage.get_article_by_title(self.db, title).md_content

    def read_all_titles(self) -> list[str]:
        """Return the titles of all stored articles."""
        return [article.title for article in storage.get_all_articles(self.db)]

    def update_article(self, title: str, filename: str, stream: IO) -> None:
        """Replace the stored article called title with the file's content."""
        log.info("Updating article")
        article = self.create_article(filename, stream)
        article.id = storage.get_article_by_title(self.db, title).id
        storage.update_article(self.db, article)

    def delete_article(self, title: str) -> None:
        """Remove the titled article from storage and from the pending list."""
        log.info("Deleting article")
        storage.delete_article(self.db, title)
        self.articles = [a for a in self.articles if a.title != title]

    def _exists(self, title: str) -> bool:
        log.info("Checking if article exists: %s", title)
        try:
            storage.get_article_by_title(self.db, title)
        except storage.ArticleNotFound:
            return False
        return True