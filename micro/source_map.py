"""Source location helpers for mapping token offsets back into text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from micro.tokens import Token


@dataclass(frozen=True)
class SourceSpan:
    """Represents a source range in 1-based line/column coordinates."""

    file: str
    line: int
    column: int
    end_line: int
    end_column: int
    offset: int = 0
    byte_offset: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize the span to a JSON-compatible mapping."""
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "offset": self.offset,
            "byte_offset": self.byte_offset,
        }


def line_column(source: str, position: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a character offset."""
    position = _clamp(source, position)
    line = source.count("\n", 0, position) + 1
    line_start = source.rfind("\n", 0, position) + 1
    return line, position - line_start + 1


def byte_offset(source: str, position: int) -> int:
    """Convert a character offset into a UTF-8 byte offset."""
    return len(source[: _clamp(source, position)].encode("utf-8"))


def span_for(source: str, token: Token, filename: str = "<input>") -> SourceSpan:
    """Build the source span covered by a token."""
    line, column = line_column(source, token.position)
    end_line, end_column = line_column(source, token.end)
    return SourceSpan(
        file=filename,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
        offset=token.position,
        byte_offset=byte_offset(source, token.position),
    )


def _clamp(source: str, position: int) -> int:
    if position < 0:
        raise ValueError(f"Negative source offset {position}.")
    return min(position, len(source))
