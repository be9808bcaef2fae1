"""Token listings for the CLI and for debugging."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from loxscan.errors import LexError
from loxscan.tokens import Token


def format_token(token: Token) -> str:
    """Render one token as ``line:col KIND lexeme [literal]``."""
    where = f"{token.line}:{token.column}"
    if not token.has_literal:
        return f"{where:<8} {token.kind.name:<14} {token.lexeme}".rstrip()
    return f"{where:<8} {token.kind.name:<14} {token.lexeme} {token.literal!r}"


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for token in tokens:
        file.write(format_token(token) + "\n")


def token_to_dict(token: Token) -> dict[str, Any]:
    return {
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
        "column": token.column,
    }


def error_to_dict(error: LexError) -> dict[str, Any]:
    return {
        "kind": error.kind.name,
        "message": error.message,
        "line": error.line,
        "column": error.column,
        "text": error.text,
    }


def to_json(tokens: list[Token], errors: list[LexError]) -> str:
    """Encode a scan result as a JSON document."""
    payload = {
        "tokens": [token_to_dict(t) for t in tokens],
        "errors": [error_to_dict(e) for e in errors],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
