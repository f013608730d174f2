"""micro lexical analyzer."""

from __future__ import annotations

from typing import Iterator

from micro.dialect import DEFAULT_DIALECT, Dialect, get_dialect
from micro.tokens import BOOLEANS, Token, TokenType


_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"


class Lexer:
    """Pulls position-tagged tokens from source text, one per call.

    The lexer keeps a read cursor into ``source`` and never copies or
    mutates it; callers must not swap the text out while scanning.
    ``position`` counts characters consumed and ``byte_position`` counts the
    UTF-8 bytes they occupy. Once input is exhausted every call returns the
    same EOF token.
    """

    def __init__(self, source: str, dialect: str | Dialect = DEFAULT_DIALECT) -> None:
        self.source = source
        self.dialect = get_dialect(dialect)
        self._position = 0
        self._byte_position = 0
        self._max_digits = len(str(self.dialect.max_integer))

    @property
    def position(self) -> int:
        return self._position

    @property
    def byte_position(self) -> int:
        return self._byte_position

    @property
    def remaining(self) -> str:
        return self.source[self._position :]

    def next_token(self) -> Token:
        """Skip whitespace and classify the next token."""
        self.skip_whitespace()

        start = self._position
        ch = self.read_char()
        if ch is None:
            return Token(TokenType.EOF, start)

        if ch in self.dialect.symbols:
            return self._lex_symbol(ch, start)
        if self.dialect.is_identifier_start(ch):
            return self._lex_word(ch, start)
        if ch in _DIGITS:
            return self._lex_integer(ch, start)
        return Token(TokenType.ILLEGAL, start, ch)

    def tokenize(self) -> list[Token]:
        """Scan the rest of the input, returning tokens through EOF."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.token_type is TokenType.EOF:
                return

    def read_char(self) -> str | None:
        """Consume one character, or return None at end of input."""
        if self._position >= len(self.source):
            return None
        ch = self.source[self._position]
        self._position += 1
        self._byte_position += _utf8_width(ch)
        return ch

    def skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE:
            self.read_char()

    def _lex_symbol(self, ch: str, start: int) -> Token:
        pair = ch + self._peek()
        token_type = self.dialect.operators.get(pair)
        if token_type is not None:
            self.read_char()
            return Token(token_type, start, pair)
        return Token(self.dialect.symbols[ch], start, ch)

    def _lex_word(self, first: str, start: int) -> Token:
        chars = [first]
        while self.dialect.is_identifier_part(self._peek()):
            chars.append(self.read_char())
        word = "".join(chars)

        keyword = self.dialect.keywords.get(word)
        if keyword is not None:
            return Token(keyword, start, word)
        if self.dialect.booleans and word in BOOLEANS:
            return Token(TokenType.BOOLEAN, start, word, BOOLEANS[word])
        return Token(TokenType.IDENTIFIER, start, word, word)

    def _lex_integer(self, first: str, start: int) -> Token:
        chars = [first]
        while self._peek() in _DIGITS:
            chars.append(self.read_char())
        digits = "".join(chars)

        significant = digits.lstrip("0")
        if len(significant) > self._max_digits:
            return Token(TokenType.ILLEGAL, start, digits)
        value = int(significant or "0")
        if value > self.dialect.max_integer:
            return Token(TokenType.ILLEGAL, start, digits)
        return Token(TokenType.INTEGER, start, digits, value)

    def _peek(self) -> str:
        if self._position >= len(self.source):
            return "\0"
        return self.source[self._position]


def tokenize(source: str, dialect: str | Dialect = DEFAULT_DIALECT) -> list[Token]:
    """Tokenize full source and return the token stream."""
    return Lexer(source, dialect).tokenize()


def _utf8_width(ch: str) -> int:
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4
