"""Lexical diagnostics with formatted source context."""

from __future__ import annotations

from enum import Enum, auto


class LexErrorKind(Enum):
    UNTERMINATED_STRING = auto()
    UNRECOGNIZED_CHARACTER = auto()
    INVALID_NUMBER_LITERAL = auto()


class LexError(Exception):
    """A recoverable lexing error.

    The scanner collects these instead of raising them; callers decide
    whether a non-empty diagnostics list should stop the pipeline.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        message: str,
        line: int,
        column: int,
        text: str,
        source: str,
        line_start: int | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.line = line
        self.column = column
        self.text = text
        self.source = source
        self.line_start = line_start
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexError):
            return NotImplemented
        return (self.kind, self.line, self.column, self.text) == (
            other.kind,
            other.line,
            other.column,
            other.text,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.line, self.column, self.text))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"LexError({self.kind.name}, line={self.line}, column={self.column}, text={self.text!r})"

    def source_line(self) -> str:
        """Return the text of the error's line, without its terminator."""
        if self.line_start is None:
            lines = self.source.split("\n")
            line_idx = self.line - 1
            text = lines[line_idx] if 0 <= line_idx < len(lines) else ""
        else:
            end = self.source.find("\n", self.line_start)
            if end == -1:
                end = len(self.source)
            text = self.source[self.line_start : end]
        return text.rstrip("\r")

    def format(self, filename: str = "<input>") -> str:
        source_line = self.source_line()
        col = self.column

        # Underline the offending text, clipped to the end of its line
        first_line = self.text.split("\n", 1)[0]
        underline_len = max(1, min(len(first_line), len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
