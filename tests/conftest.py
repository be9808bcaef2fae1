"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxscan.errors import LexError
from loxscan.scanner import scan
from loxscan.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens, _ = scan(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


@pytest.fixture
def lex_errors():
    """Return a helper that scans source and returns only the diagnostics."""

    def _lex_errors(source: str) -> list[LexError]:
        _, errors = scan(source)
        return errors

    return _lex_errors


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_literals(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token literals match the expected list."""
    actual = [t.literal for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
