"""Articles: Markdown source together with its rendered HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO, AnyStr

from plumlabs.conversion import markdown_to_html

log = logging.getLogger(__name__)


@dataclass
class Article:
    """A stored article with its Markdown and HTML content."""

    id: int = 0
    title: str = ""
    md_content: str = ""
    html_content: str = ""
    last_update: str = ""

    def read_content(self, stream: IO[AnyStr]) -> None:
        """Read the whole stream as the article's Markdown content."""
        log.info("Getting content for article: %s", self.title)
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        self.md_content = data

    def convert_to_html(self) -> None:
        """Render the Markdown content to HTML.

        Raises ConversionError when the content cannot be converted.
        """
        log.info("Converting to HTML")
        self.html_content = markdown_to_html(self.md_content)