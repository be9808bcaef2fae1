"""Forward-only cursor over source text with line and column tracking."""

from __future__ import annotations


class Cursor:
    """Read codepoints from immutable source text, one at a time.

    Positions index codepoints, not encoded bytes, so every ``read()``
    consumes exactly one whole codepoint. End of input is signalled by
    the empty string.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self.line = 1
        self.column = 1
        self.line_start = 0
        self.last = ""

    @property
    def pos(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def read(self) -> str:
        ch = self.peek()
        if ch == "":
            return ch
        self._pos += 1
        self.last = ch
        if ch == "\n":
            self.line += 1
            self.column = 1
            self.line_start = self._pos
        else:
            self.column += 1
        return ch

    def try_consume(self, expected: str) -> bool:
        """Consume the next codepoint only if it equals ``expected``."""
        if self.peek() == expected and expected != "":
            self.read()
            return True
        return False

    def slice_from(self, start: int) -> str:
        """Return the source text consumed since position ``start``."""
        return self._source[start : self._pos]
