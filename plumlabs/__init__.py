"""Markdown article publishing: a Markdown-to-HTML converter, SQLite storage and WSGI servers."""

__version__ = "0.1.0"