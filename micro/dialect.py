"""Grammar dialects accepted by the micro lexer.

A dialect fixes which symbols, two-character operators and reserved words
the scanner recognizes, and how wide integer literals may be. The lexer
itself is table driven, so every grammar variant is a data change here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from micro.errors import DialectError
from micro.tokens import BOOLEANS, KEYWORDS, OPERATORS, SYMBOLS, TokenType


@dataclass(frozen=True, eq=False)
class Dialect:
    """Immutable scanner configuration for one grammar variant."""

    name: str
    symbols: Mapping[str, TokenType]
    operators: Mapping[str, TokenType] = field(default_factory=dict)
    keywords: Mapping[str, TokenType] = field(default_factory=dict)
    booleans: bool = False
    underscore_identifiers: bool = False
    integer_bits: int = 64

    def __post_init__(self) -> None:
        for spelling in self.symbols:
            if len(spelling) != 1:
                raise DialectError("DIA002", f"Symbol {spelling!r} must be a single character.")
        for spelling in self.operators:
            if len(spelling) != 2:
                raise DialectError("DIA003", f"Operator {spelling!r} must be two characters.")
            if spelling[0] not in self.symbols:
                raise DialectError(
                    "DIA004",
                    f"Operator {spelling!r} does not start with a known symbol.",
                    hint="Two-character operators extend a single-character symbol.",
                )
        if self.integer_bits < 2:
            raise DialectError("DIA005", f"Integer width {self.integer_bits} is too small.")
        overlap = set(self.keywords) & set(BOOLEANS)
        if self.booleans and overlap:
            raise DialectError("DIA007", f"Keywords {sorted(overlap)} shadow boolean literals.")
        object.__setattr__(self, "symbols", dict(self.symbols))
        object.__setattr__(self, "operators", dict(self.operators))
        object.__setattr__(self, "keywords", dict(self.keywords))

    @property
    def max_integer(self) -> int:
        return (1 << (self.integer_bits - 1)) - 1

    @property
    def min_integer(self) -> int:
        return -(1 << (self.integer_bits - 1))

    def is_identifier_start(self, ch: str) -> bool:
        return ch.isalpha() or (self.underscore_identifiers and ch == "_")

    def is_identifier_part(self, ch: str) -> bool:
        return self.is_identifier_start(ch)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "symbols": sorted(self.symbols),
            "operators": sorted(self.operators),
            "keywords": sorted(self.keywords),
            "booleans": self.booleans,
            "underscore_identifiers": self.underscore_identifiers,
            "integer_bits": self.integer_bits,
        }


CLASSIC = Dialect(
    name="classic",
    symbols={spelling: SYMBOLS[spelling] for spelling in "=+-*/:.<>"},
    keywords={spelling: KEYWORDS[spelling] for spelling in ("let", "in", "where")},
)

FULL = Dialect(
    name="full",
    symbols=SYMBOLS,
    operators=OPERATORS,
    keywords=KEYWORDS,
    booleans=True,
    underscore_identifiers=True,
)

DEFAULT_DIALECT = FULL.name

_REGISTRY: dict[str, Dialect] = {
    CLASSIC.name: CLASSIC,
    FULL.name: FULL,
}


def available_dialects() -> list[str]:
    """Return registered dialect names in stable order."""
    return sorted(_REGISTRY)


def register_dialect(dialect: Dialect, *, replace: bool = False) -> None:
    """Make a dialect resolvable by name."""
    if dialect.name in _REGISTRY and not replace:
        raise DialectError("DIA006", f"Dialect '{dialect.name}' is already registered.")
    _REGISTRY[dialect.name] = dialect


def get_dialect(name: str | Dialect) -> Dialect:
    """Resolve a dialect by name, passing Dialect instances through."""
    if isinstance(name, Dialect):
        return name
    dialect = _REGISTRY.get(name)
    if dialect is None:
        raise DialectError(
            "DIA001",
            f"Unknown dialect '{name}'.",
            hint=f"Choose one of: {', '.join(available_dialects())}.",
        )
    return dialect
