"""Top-level scanning orchestration for micro."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from micro.dialect import DEFAULT_DIALECT, Dialect, get_dialect
from micro.errors import Diagnostic, LexError, diagnose
from micro.lexer import Lexer
from micro.tokens import Token, TokenType


@dataclass
class ScanArtifacts:
    """Token stream plus the diagnostics raised while producing it."""

    source: str
    filename: str
    dialect: Dialect
    tokens: list[Token]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def illegal(self) -> list[Token]:
        return [token for token in self.tokens if token.token_type is TokenType.ILLEGAL]

    @property
    def reached_eof(self) -> bool:
        return bool(self.tokens) and self.tokens[-1].token_type is TokenType.EOF


def scan_source(
    source: str,
    *,
    dialect: str | Dialect = DEFAULT_DIALECT,
    filename: str = "<input>",
    stop_on_illegal: bool = False,
    strict: bool = False,
) -> ScanArtifacts:
    """Scan source into tokens and collect a diagnostic per illegal token.

    With ``stop_on_illegal`` the stream ends at the first illegal token,
    which is how a single-line driver treats it. With ``strict`` the first
    illegal token raises ``LexError`` instead.
    """
    resolved = get_dialect(dialect)
    lexer = Lexer(source, resolved)
    tokens: list[Token] = []
    diagnostics: list[Diagnostic] = []

    for token in lexer:
        tokens.append(token)
        if token.token_type is not TokenType.ILLEGAL:
            continue
        diag = diagnose(token, source, filename, resolved.integer_bits)
        if strict:
            raise LexError(code=diag.code, message=diag.message, span=diag.span, hint=diag.hint)
        diagnostics.append(diag)
        if stop_on_illegal:
            break

    return ScanArtifacts(
        source=source,
        filename=filename,
        dialect=resolved,
        tokens=tokens,
        diagnostics=diagnostics,
    )


def scan_line(line: str, *, dialect: str | Dialect = DEFAULT_DIALECT, filename: str = "<stdin>") -> ScanArtifacts:
    """Scan one line of input up to the first illegal token or EOF."""
    return scan_source(line, dialect=dialect, filename=filename, stop_on_illegal=True)


def scan_file(
    path: str | Path,
    *,
    dialect: str | Dialect = DEFAULT_DIALECT,
    stop_on_illegal: bool = False,
    strict: bool = False,
) -> ScanArtifacts:
    """Read a UTF-8 file and scan its contents."""
    target = Path(path)
    source = target.read_text(encoding="utf-8")
    return scan_source(
        source,
        dialect=dialect,
        filename=str(target),
        stop_on_illegal=stop_on_illegal,
        strict=strict,
    )
