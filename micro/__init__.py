"""micro expression language scanner."""

from __future__ import annotations

from micro.dialect import CLASSIC, FULL, Dialect, available_dialects, get_dialect
from micro.errors import Diagnostic, LexError, MicroError
from micro.lexer import Lexer, tokenize
from micro.main import ScanArtifacts, scan_line, scan_source
from micro.tokens import Token, TokenType


__all__ = [
    "CLASSIC",
    "FULL",
    "Diagnostic",
    "Dialect",
    "LexError",
    "Lexer",
    "MicroError",
    "ScanArtifacts",
    "Token",
    "TokenType",
    "available_dialects",
    "get_dialect",
    "scan_line",
    "scan_source",
    "tokenize",
]
