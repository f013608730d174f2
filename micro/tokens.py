"""Token definitions for micro lexical analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    """Closed set of token kinds produced by the lexer."""

    ILLEGAL = auto()
    EOF = auto()

    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    COLON = auto()  # :
    DOT = auto()  # .
    LT = auto()  # <
    GT = auto()  # >
    BANG = auto()  # !
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    LE = auto()  # <=
    GE = auto()  # >=
    EQ = auto()  # ==
    NE = auto()  # !=

    INTEGER = auto()
    BOOLEAN = auto()
    IDENTIFIER = auto()

    LET = auto()
    IN = auto()
    WHERE = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[TokenType, str] = {
    TokenType.ILLEGAL: "Illegal",
    TokenType.EOF: "EndOfFile",
    TokenType.ASSIGN: "Assign",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.ASTERISK: "Asterisk",
    TokenType.SLASH: "Slash",
    TokenType.COLON: "Colon",
    TokenType.DOT: "Dot",
    TokenType.LT: "LT",
    TokenType.GT: "GT",
    TokenType.BANG: "Bang",
    TokenType.LPAREN: "LParen",
    TokenType.RPAREN: "RParen",
    TokenType.LBRACE: "LBrace",
    TokenType.RBRACE: "RBrace",
    TokenType.LE: "LE",
    TokenType.GE: "GE",
    TokenType.EQ: "EQ",
    TokenType.NE: "NE",
    TokenType.INTEGER: "Integer",
    TokenType.BOOLEAN: "Boolean",
    TokenType.IDENTIFIER: "Identifier",
    TokenType.LET: "Let",
    TokenType.IN: "In",
    TokenType.WHERE: "Where",
    TokenType.IF: "If",
    TokenType.THEN: "Then",
    TokenType.ELSE: "Else",
}


SYMBOLS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "!": TokenType.BANG,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


OPERATORS: dict[str, TokenType] = {
    "<=": TokenType.LE,
    ">=": TokenType.GE,
    "==": TokenType.EQ,
    "!=": TokenType.NE,
}


KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "in": TokenType.IN,
    "where": TokenType.WHERE,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
}


BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}


SENTINELS = frozenset({TokenType.ILLEGAL, TokenType.EOF})
RESERVED = frozenset(KEYWORDS.values())


@dataclass(frozen=True)
class Token:
    """A single lexical token anchored at the offset of its first character."""

    token_type: TokenType
    position: int
    text: str = ""
    value: int | bool | str | None = None

    @property
    def end(self) -> int:
        return self.position + len(self.text)

    @property
    def is_sentinel(self) -> bool:
        return self.token_type in SENTINELS

    @property
    def is_keyword(self) -> bool:
        return self.token_type in RESERVED

    def to_dict(self) -> dict[str, Any]:
        """Serialize the token to a JSON-compatible mapping."""
        payload: dict[str, Any] = {
            "type": self.token_type.name,
            "position": self.position,
            "text": self.text,
        }
        if self.value is not None:
            payload["value"] = self.value
        return payload

    def __str__(self) -> str:
        label = self.token_type.label
        if self.value is None:
            return f"{label}({self.position})"
        return f"{label}({self.position}, {self.value!r})"
