"""Reserved-word table, built once at import and never mutated."""

from __future__ import annotations

from types import MappingProxyType

from loxscan.tokens import TokenKind

KEYWORDS = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "fun": TokenKind.FUN,
        "for": TokenKind.FOR,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)


def lookup_keyword(spelling: str) -> TokenKind | None:
    """Return the keyword kind for an exact spelling, or None."""
    return KEYWORDS.get(spelling)
