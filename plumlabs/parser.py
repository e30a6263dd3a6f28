"""Parser building a syntax tree from Markdown tokens."""

from __future__ import annotations

from plumlabs.lexer import Lexer
from plumlabs.nodes import Node, NodeType
from plumlabs.tokens import Token, TokenType

# Token kinds that open a node whose children run up to a closing token,
# with the closing token and whether the node keeps the token's literal.
_ENCLOSING: dict[TokenType, tuple[TokenType, bool]] = {
    TokenType.HEADER: (TokenType.NEXT_LINE, False),
    TokenType.BLOCK_QUOTE: (TokenType.NEXT_LINE, False),
    TokenType.BOLD: (TokenType.BOLD, False),
    TokenType.ITALIC: (TokenType.ITALIC, False),
    TokenType.STRIKETHROUGH: (TokenType.STRIKETHROUGH, False),
    TokenType.AUTO_LINK: (TokenType.NEXT_LINE, True),
    TokenType.IMAGE: (TokenType.NEXT_LINE, True),
}

_TEXT_RUN = (TokenType.TEXT, TokenType.SPACE, TokenType.TAB)


class Parser:
    """Recursive-descent parser over a lexer's token stream."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self.current: Token = Token(TokenType.NONE, "")
        self.next_token()

    def next_token(self) -> None:
        """Advance to the next token."""
        self.current = self._lexer.next_token()

    def parse(self, end_token: TokenType) -> Node:
        """Parse until end_token or EOF; the end token is left unconsumed."""
        root = Node(NodeType(end_token.value))
        while self.current.type not in (end_token, TokenType.EOF):
            kind = self.current.type
            if kind is TokenType.TEXT:
                root.children.append(self._parse_text())
            elif kind in _ENCLOSING:
                closing, keeps_literal = _ENCLOSING[kind]
                node = Node(
                    NodeType(kind.value),
                    self.current.literal if keeps_literal else "",
                )
                self.next_token()
                node.children = self.parse(closing).children
                root.children.append(node)
            elif kind is TokenType.LIST_ITEM:
                root.children.append(self._parse_list_block())
                self.next_token()
            elif kind is TokenType.CODE_BLOCK:
                root.children.append(self.parse_code_block())
            elif kind is TokenType.NEXT_LINE:
                root.children.append(Node(NodeType.NEXT_LINE))
                self.next_token()
            else:
                self.next_token()
        return root

    def parse_code_block(self) -> Node:
        """Collect raw token text up to the closing fence or end of input."""
        self.next_token()
        parts = []
        while self.current.type not in (TokenType.CODE_BLOCK, TokenType.EOF):
            parts.append(self.current.literal)
            self.next_token()
        if self.current.type is TokenType.CODE_BLOCK:
            self.next_token()
        return Node(NodeType.CODE_BLOCK, "".join(parts))

    def _parse_text(self) -> Node:
        parts = [self.current.literal]
        self.next_token()
        while self.current.type in _TEXT_RUN:
            parts.append(self.current.literal)
            self.next_token()
        return Node(NodeType.TEXT, "".join(parts))

    def _parse_list_block(self) -> Node:
        block = Node(NodeType.LIST_BLOCK)
        while self.current.type is TokenType.LIST_ITEM:
            item = Node(NodeType.LIST_ITEM)
            self.next_token()
            while self.current.type not in (TokenType.EOF, TokenType.NEXT_LINE):
                if self.current.type is TokenType.TEXT:
                    item.children.append(self._parse_text())
                else:
                    self.next_token()
            block.children.append(item)

            if self.current.type is TokenType.NEXT_LINE:
                self.next_token()
            while self.current.type in (TokenType.SPACE, TokenType.TAB):
                self.next_token()
        return block