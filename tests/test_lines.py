"""Test line and column tracking."""

from loxscan.scanner import scan
from loxscan.tokens import TokenKind


class TestLineNumbers:
    def test_one_plus_two_on_three_lines(self):
        tokens, _ = scan("1\n+\n2")
        assert [t.kind for t in tokens] == [
            TokenKind.NUMBER,
            TokenKind.PLUS,
            TokenKind.NUMBER,
            TokenKind.EOF,
        ]
        assert [t.line for t in tokens[:3]] == [1, 2, 3]

    def test_first_line_is_one(self):
        tokens, _ = scan("x")
        assert tokens[0].line == 1

    def test_empty_eof_on_line_one(self):
        tokens, _ = scan("")
        assert tokens[0].line == 1

    def test_eof_after_trailing_newline(self):
        tokens, _ = scan("x\n")
        assert tokens[-1].line == 2

    def test_blank_lines(self):
        tokens, _ = scan("\n\n\nx")
        assert tokens[0].line == 4

    def test_crlf(self):
        tokens, _ = scan("a\r\nb")
        assert [t.line for t in tokens] == [1, 2, 2]

    def test_lines_non_decreasing(self):
        source = 'var a = "x\ny";\n// c\nprint a + 1.5;\n\n{ }'
        tokens, _ = scan(source)
        lines = [t.line for t in tokens]
        assert lines == sorted(lines)


class TestColumns:
    def test_columns(self):
        tokens, _ = scan("ab  cd")
        assert tokens[0].column == 1
        assert tokens[1].column == 5

    def test_column_resets_after_newline(self):
        tokens, _ = scan("abc\n  d")
        assert tokens[1].line == 2
        assert tokens[1].column == 3

    def test_two_char_operator_column(self):
        tokens, _ = scan("x >= y")
        assert tokens[1].column == 3
        assert tokens[2].column == 6
