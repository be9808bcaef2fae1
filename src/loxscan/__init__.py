"""Lexical scanner for the Lox scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.errors import LexError
    from loxscan.tokens import Token

__version__ = "0.1.0"


def scan(source: str) -> tuple[list[Token], list[LexError]]:
    """Scan Lox source text into (tokens, diagnostics)."""
    from loxscan.scanner import Scanner

    return Scanner(source).scan()
