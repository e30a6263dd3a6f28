"""Token kinds and tokens produced by the Markdown lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Kinds of lexical tokens recognised in Markdown input."""

    HEADER = "HEADER"
    TEXT = "TEXT"
    LIST_ITEM = "LIST_ITEM"
    LIST_BLOCK = "LIST_BLOCK"
    BLOCK_QUOTE = "BLOCK_QUOTE"
    CODE_BLOCK = "CODE_BLOCK"

    BOLD = "BOLD"
    ITALIC = "ITALIC"
    STRIKETHROUGH = "STRIKETHROUGH"

    AUTO_LINK = "AUTO_LINK"
    IMAGE = "IMAGE"

    NEXT_LINE = "NEXT_LINE"
    SPACE = "SPACE"
    TAB = "TAB"
    EOF = "EOF"
    ILLEGAL = "ILLEGAL"

    # An unmatched '!', '`' or '~' yields a token of no kind at all.
    NONE = ""


@dataclass(frozen=True)
class Token:
    """A single lexical token: its kind and the text it stands for."""

    type: TokenType
    literal: str