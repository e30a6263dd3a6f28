"""Markdown lexer turning text into a stream of tokens."""

from __future__ import annotations

from collections.abc import Iterator

from plumlabs.tokens import Token, TokenType

_END = "\0"
_SYMBOLS = frozenset("!?,.:;")
_LINK_SEPARATOR = " -> "


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch in ", ."


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_symbol(ch: str) -> bool:
    return ch in _SYMBOLS


class Lexer:
    """Reads Markdown text one token at a time."""

    def __init__(self, text: str) -> None:
        self._input = text
        self._position = 0
        self._read_position = 0
        self._ch = _END
        self._read_char()

    def _char_at(self, index: int) -> str:
        return self._input[index] if index < len(self._input) else _END

    def _read_char(self) -> None:
        self._ch = self._char_at(self._read_position)
        self._position = self._read_position
        self._read_position += 1

    def _peek(self, offset: int = 0) -> str:
        return self._char_at(self._read_position + offset)

    def _read_text(self) -> str:
        start = self._position
        while _is_letter(self._ch) or _is_digit(self._ch) or _is_symbol(self._ch):
            self._read_char()
        return self._input[start:self._position]

    def _read_link_text(self) -> str:
        self._read_char()
        start = self._position
        while self._ch not in ("]", _END):
            self._read_char()
        text = self._input[start:self._position]
        self._read_char()
        return text

    def _read_link_url(self) -> str:
        if self._ch != "(":
            return ""
        self._read_char()
        start = self._position
        while self._ch != ")" and self._position < len(self._input):
            self._read_char()
        url = self._input[start:self._position]
        self._read_char()
        return url

    def _read_link(self, kind: TokenType) -> Token:
        text = self._read_link_text()
        url = self._read_link_url()
        return Token(kind, text + _LINK_SEPARATOR + url)

    def _triple(self, ch: str) -> bool:
        return self._peek() == ch and self._peek(1) == ch

    def next_token(self) -> Token:
        """Return the next token; EOF repeats once the input is exhausted."""
        ch = self._ch
        if ch == "#":
            token = Token(TokenType.HEADER, ch)
        elif ch in ("*", "_"):
            if self._peek() == "*":
                self._read_char()
                token = Token(TokenType.BOLD, self._ch)
            else:
                token = Token(TokenType.ITALIC, ch)
        elif ch == "-":
            token = Token(TokenType.LIST_ITEM, ch)
        elif ch == ">":
            token = Token(TokenType.BLOCK_QUOTE, ch)
        elif ch in ("`", "~"):
            if self._triple(ch):
                self._read_char()
                self._read_char()
                kind = TokenType.CODE_BLOCK if ch == "`" else TokenType.STRIKETHROUGH
                token = Token(kind, self._ch)
            else:
                token = Token(TokenType.NONE, "")
        elif ch == "[":
            token = self._read_link(TokenType.AUTO_LINK)
        elif ch == "!":
            if self._peek() == "[":
                self._read_char()
                token = self._read_link(TokenType.IMAGE)
            else:
                token = Token(TokenType.NONE, "")
        elif ch == " ":
            token = Token(TokenType.SPACE, ch)
        elif ch == "\n":
            token = Token(TokenType.NEXT_LINE, ch)
        elif ch == "\t":
            token = Token(TokenType.TAB, ch)
        elif ch == _END:
            token = Token(TokenType.EOF, "")
        elif _is_letter(ch):
            return Token(TokenType.TEXT, self._read_text())
        else:
            token = Token(TokenType.ILLEGAL, ch)
        self._read_char()
        return token

    def tokens(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with a single EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return