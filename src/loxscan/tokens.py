"""Token kinds, token data structure, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Single-character
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two characters
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals (carry a payload)
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


LITERAL_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER})

LiteralValue = str | float


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    ``literal`` is set only for IDENTIFIER and STRING (text) and NUMBER
    (float). ``line`` and ``column`` locate the token's first codepoint,
    both 1-based.
    """

    kind: TokenKind
    lexeme: str
    literal: LiteralValue | None
    line: int
    column: int = 1

    @property
    def has_literal(self) -> bool:
        return self.literal is not None

    def __str__(self) -> str:
        if not self.has_literal:
            return f"{self.kind.name} {self.lexeme}".rstrip()
        return f"{self.kind.name} {self.lexeme} {self.literal!r}"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_alpha(ch: str) -> bool:
    """Return True if ch can start an identifier."""
    return ch.isalpha() or ch == "_"


def is_alnum(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return is_alpha(ch) or is_digit(ch)
