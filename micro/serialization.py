"""Serialization helpers for token streams and scan results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from micro.main import ScanArtifacts
from micro.tokens import Token


def tokens_to_json(tokens: list[Token], indent: int | None = 2) -> str:
    """Serialize a token stream to JSON text."""
    return json.dumps([token.to_dict() for token in tokens], indent=indent)


def artifacts_to_dict(artifacts: ScanArtifacts) -> dict[str, Any]:
    """Serialize a scan result including diagnostics."""
    return {
        "file": artifacts.filename,
        "dialect": artifacts.dialect.name,
        "ok": artifacts.ok,
        "tokens": [token.to_dict() for token in artifacts.tokens],
        "diagnostics": [diag.to_dict() for diag in artifacts.diagnostics],
    }


def write_tokens(artifacts: ScanArtifacts, path: str | Path) -> None:
    """Write the serialized scan result to path."""
    target = Path(path)
    payload = artifacts_to_dict(artifacts)
    target.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
