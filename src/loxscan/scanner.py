"""Lox scanner: converts source text into a flat token sequence."""

from __future__ import annotations

from collections.abc import Iterator

from loxscan.cursor import Cursor
from loxscan.errors import LexError, LexErrorKind
from loxscan.keywords import lookup_keyword
from loxscan.tokens import LiteralValue, Token, TokenKind, is_alnum, is_alpha, is_digit

_SINGLE = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# first char -> (kind alone, kind when followed by '=')
_WITH_EQUAL = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
}


class Scanner:
    """Tokenize Lox source text in a single forward pass.

    Errors never abort the scan; they are appended to ``errors`` and the
    scan resumes at the next unconsumed codepoint. An instance may be
    consumed once, either through ``scan()`` or ``iter_tokens()``.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._cursor = Cursor(source)
        self._started = False
        self.errors: list[LexError] = []

        # Start of the token being scanned
        self._start = 0
        self._start_line = 1
        self._start_col = 1
        self._start_line_start = 0

    def scan(self) -> tuple[list[Token], list[LexError]]:
        """Scan the full source and return (tokens, errors)."""
        tokens = list(self.iter_tokens())
        return tokens, self.errors

    def iter_tokens(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with exactly one EOF token."""
        if self._started:
            raise RuntimeError("Scanner instances cannot be reused; create a new Scanner")
        self._started = True
        return self._generate()

    def _generate(self) -> Iterator[Token]:
        cur = self._cursor
        while True:
            self._skip_whitespace()
            if cur.at_end():
                break
            token = self._next_token()
            if token is not None:
                yield token

        yield Token(TokenKind.EOF, "", None, cur.line, cur.column)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _make(self, kind: TokenKind, literal: LiteralValue | None = None) -> Token:
        lexeme = self._cursor.slice_from(self._start)
        return Token(kind, lexeme, literal, self._start_line, self._start_col)

    def _error(self, kind: LexErrorKind, message: str, text: str) -> None:
        self.errors.append(
            LexError(
                kind,
                message,
                self._start_line,
                self._start_col,
                text,
                self._source,
                line_start=self._start_line_start,
            )
        )

    def _skip_whitespace(self) -> None:
        cur = self._cursor
        while cur.peek().isspace():
            cur.read()

    def _skip_rest_of_line(self) -> None:
        cur = self._cursor
        while not cur.at_end():
            if cur.read() == "\n":
                break

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _next_token(self) -> Token | None:
        cur = self._cursor
        self._start = cur.pos
        self._start_line = cur.line
        self._start_col = cur.column
        self._start_line_start = cur.line_start

        ch = cur.read()

        if ch in _SINGLE:
            return self._make(_SINGLE[ch])

        if ch in _WITH_EQUAL:
            alone, paired = _WITH_EQUAL[ch]
            return self._make(paired if cur.try_consume("=") else alone)

        if ch == "/":
            if cur.try_consume("/"):
                self._skip_rest_of_line()
                return None
            return self._make(TokenKind.SLASH)

        if ch == '"':
            return self._string()

        if is_digit(ch):
            return self._number()

        if is_alpha(ch):
            return self._identifier()

        self._error(
            LexErrorKind.UNRECOGNIZED_CHARACTER, f"unexpected character {ch!r}", ch
        )
        return None

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> Token | None:
        """Opening quote already consumed; newlines are allowed inside."""
        cur = self._cursor
        chars = []
        while not cur.at_end():
            ch = cur.read()
            if ch == '"':
                return self._make(TokenKind.STRING, "".join(chars))
            chars.append(ch)

        self._error(
            LexErrorKind.UNTERMINATED_STRING,
            "unterminated string",
            cur.slice_from(self._start),
        )
        return None

    def _number(self) -> Token | None:
        """First digit already consumed. Accepts digits [ '.' digits ]."""
        cur = self._cursor
        while is_digit(cur.peek()):
            cur.read()
        if cur.try_consume("."):
            while is_digit(cur.peek()):
                cur.read()

        text = cur.slice_from(self._start)
        try:
            value = float(text)
        except ValueError:
            # float() accepts every digits[.digits] form
            self._error(
                LexErrorKind.INVALID_NUMBER_LITERAL, f"invalid number literal {text!r}", text
            )
            return None
        return self._make(TokenKind.NUMBER, value)

    def _identifier(self) -> Token:
        cur = self._cursor
        while is_alnum(cur.peek()):
            cur.read()

        text = cur.slice_from(self._start)
        kind = lookup_keyword(text)
        if kind is not None:
            return self._make(kind)
        return self._make(TokenKind.IDENTIFIER, text)


def scan(source: str) -> tuple[list[Token], list[LexError]]:
    """Convenience function: scan source text and return (tokens, errors)."""
    return Scanner(source).scan()
