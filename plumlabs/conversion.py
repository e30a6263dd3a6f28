"""Conversion of Markdown article text to HTML."""

from __future__ import annotations

from plumlabs.lexer import Lexer
from plumlabs.parser import Parser
from plumlabs.renderer import Renderer
from plumlabs.tokens import TokenType


class ConversionError(ValueError):
    """Raised when Markdown cannot be turned into HTML."""


def markdown_to_html(content: str) -> str:
    """Convert Markdown text to an HTML fragment."""
    if not content:
        raise ConversionError("content is empty")

    root = Parser(Lexer(content)).parse(TokenType.EOF)
    html = Renderer(root).render(root)
    if not html:
        raise ConversionError("render failed")
    return html