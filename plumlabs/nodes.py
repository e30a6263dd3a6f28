"""Syntax tree nodes built by the Markdown parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeType(str, Enum):
    """Kinds of nodes in the Markdown syntax tree."""

    DOCUMENT = "DOCUMENT"
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


@dataclass
class Node:
    """A tree node: its kind, an optional value and its children."""

    type: NodeType
    value: str = ""
    children: list[Node] = field(default_factory=list)