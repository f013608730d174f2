"""Scanner diagnostics and the exceptions that carry them."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from micro.source_map import SourceSpan, span_for
from micro.tokens import Token, TokenType


UNEXPECTED_CHARACTER = "LEX001"
INTEGER_OUT_OF_RANGE = "LEX002"


@dataclass(frozen=True)
class Diagnostic:
    """One coded problem report, optionally anchored to a source span."""

    code: str
    message: str
    span: SourceSpan | None = None
    hint: str = ""

    @property
    def location(self) -> str:
        if self.span is None:
            return ""
        return f"{self.span.file}:{self.span.line}:{self.span.column}"

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        if self.span is None:
            del payload["span"]
        return payload


class MicroError(Exception):
    """Exception wrapping a Diagnostic; code, span and hint read through to it."""

    def __init__(self, code: str, message: str, span: SourceSpan | None = None, hint: str = "") -> None:
        super().__init__(message)
        self.diagnostic = Diagnostic(code=code, message=message, span=span, hint=hint)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def span(self) -> SourceSpan | None:
        return self.diagnostic.span

    @property
    def hint(self) -> str:
        return self.diagnostic.hint

    def to_diagnostic(self) -> Diagnostic:
        return self.diagnostic

    def __str__(self) -> str:
        where = f" ({self.diagnostic.location})" if self.span is not None else ""
        return f"[{self.code}] {self.message}{where}"


class LexError(MicroError):
    """Strict scan hit an illegal token."""


class DialectError(MicroError):
    pass


class CLIError(MicroError):
    pass


def diagnose(token: Token, source: str, filename: str = "<input>", integer_bits: int = 64) -> Diagnostic:
    """Describe an illegal token as a diagnostic."""
    if token.token_type is not TokenType.ILLEGAL:
        raise ValueError(f"Only illegal tokens can be diagnosed, got {token.token_type.name}.")

    span = span_for(source, token, filename)
    if token.text.isascii() and token.text.isdigit():
        return Diagnostic(
            code=INTEGER_OUT_OF_RANGE,
            message=f"Integer literal {token.text} does not fit in {integer_bits} bits.",
            span=span,
            hint=f"Integer literals may not exceed {(1 << (integer_bits - 1)) - 1}.",
        )
    return Diagnostic(
        code=UNEXPECTED_CHARACTER,
        message=f"Unexpected character {token.text!r}.",
        span=span,
        hint="Remove the character or replace it with a supported symbol.",
    )


def format_diagnostic(diag: Diagnostic) -> str:
    """Render ``CODE file:line:col: message Hint: ...`` on one line."""
    parts = [diag.code + (f" {diag.location}" if diag.location else "") + ":", diag.message]
    if diag.hint:
        parts.append(f"Hint: {diag.hint}")
    return " ".join(parts)
