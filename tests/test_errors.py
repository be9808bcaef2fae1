"""Test diagnostics: kinds, recovery, positions, and formatting."""

from loxscan.errors import LexError, LexErrorKind
from loxscan.scanner import scan
from loxscan.tokens import TokenKind

from .conftest import assert_kinds


class TestUnrecognizedCharacter:
    def test_single(self):
        tokens, errors = scan("@")
        assert_kinds(tokens, [TokenKind.EOF])
        assert len(errors) == 1
        assert errors[0].kind == LexErrorKind.UNRECOGNIZED_CHARACTER
        assert errors[0].text == "@"

    def test_recovery_continues(self):
        tokens, errors = scan("1 @ 2")
        assert_kinds(tokens, [TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.EOF])
        assert len(errors) == 1

    def test_one_diagnostic_per_codepoint(self, lex_errors):
        errors = lex_errors("#$%")
        assert [e.text for e in errors] == ["#", "$", "%"]
        assert [e.column for e in errors] == [1, 2, 3]

    def test_position(self, lex_errors):
        errors = lex_errors("x\n  ?")
        assert errors[0].line == 2
        assert errors[0].column == 3

    def test_non_letter_symbol(self, lex_errors):
        errors = lex_errors("€")
        assert errors[0].text == "€"

    def test_nul(self, lex_errors):
        errors = lex_errors("a\0b")
        assert errors[0].kind == LexErrorKind.UNRECOGNIZED_CHARACTER

    def test_message(self, lex_errors):
        assert lex_errors("@")[0].message == "unexpected character '@'"


class TestMixedErrors:
    def test_order_preserved(self, lex_errors):
        errors = lex_errors('@ "open')
        assert [e.kind for e in errors] == [
            LexErrorKind.UNRECOGNIZED_CHARACTER,
            LexErrorKind.UNTERMINATED_STRING,
        ]

    def test_clean_input_has_no_errors(self, lex_errors):
        assert lex_errors("fun f(a, b) { return a <= b; }") == []


class TestLexErrorValue:
    def test_is_exception(self):
        err = LexError(LexErrorKind.UNRECOGNIZED_CHARACTER, "bad", 1, 1, "@", "@")
        assert isinstance(err, Exception)

    def test_equality_ignores_source(self):
        a = LexError(LexErrorKind.UNRECOGNIZED_CHARACTER, "bad", 1, 1, "@", "@")
        b = LexError(LexErrorKind.UNRECOGNIZED_CHARACTER, "bad", 1, 1, "@", "@ x")
        assert a == b
        assert hash(a) == hash(b)

    def test_repr(self):
        err = LexError(LexErrorKind.UNTERMINATED_STRING, "m", 2, 3, '"x', '"x')
        assert repr(err) == "LexError(UNTERMINATED_STRING, line=2, column=3, text='\"x')"


class TestErrorFormatting:
    def test_format_contains_line(self, lex_errors):
        formatted = lex_errors("var x = @;")[0].format()
        assert "var x = @;" in formatted

    def test_format_contains_error_prefix(self, lex_errors):
        assert lex_errors("@")[0].format().startswith("error: unexpected character")

    def test_format_caret_under_column(self, lex_errors):
        formatted = lex_errors("ab @")[0].format()
        last = formatted.splitlines()[-1]
        assert last.endswith("   ^")

    def test_format_contains_position(self, lex_errors):
        assert "1:1" in lex_errors("@")[0].format()

    def test_format_with_custom_filename(self, lex_errors):
        formatted = lex_errors("@")[0].format("test.lox")
        assert "--> test.lox:1:1" in formatted

    def test_multiline_error_position(self, lex_errors):
        formatted = lex_errors("a\nb\n@")[0].format()
        assert "3:1" in formatted

    def test_unterminated_underlines_to_end_of_line(self, lex_errors):
        formatted = lex_errors('x = "abc\nmore')[0].format()
        assert formatted.splitlines()[-1].endswith("^^^^")

    def test_str_is_formatted(self, lex_errors):
        err = lex_errors("@")[0]
        assert str(err) == err.format()


class TestDiagnosticCost:
    def test_scan_does_not_format(self, monkeypatch):
        calls = []
        original = LexError.format

        def counting_format(self, filename="<input>"):
            calls.append(self.line)
            return original(self, filename)

        monkeypatch.setattr(LexError, "format", counting_format)
        _, errors = scan("@\n" * 500)
        assert len(errors) == 500
        assert calls == []

    def test_many_errors_keep_their_lines(self):
        _, errors = scan("@\n" * 20000)
        assert len(errors) == 20000
        last = errors[-1]
        assert last.line == 20000
        assert last.source_line() == "@"
        assert "20000:1" in last.format()


class TestSourceLine:
    def test_from_line_start(self, lex_errors):
        err = lex_errors("ok\nab @ cd\nzz")[0]
        assert err.line_start == 3
        assert err.source_line() == "ab @ cd"

    def test_crlf_stripped(self, lex_errors):
        assert lex_errors("x @\r\ny")[0].source_line() == "x @"

    def test_last_line_without_newline(self, lex_errors):
        assert lex_errors("a\n@")[0].source_line() == "@"

    def test_without_line_start(self):
        err = LexError(LexErrorKind.UNRECOGNIZED_CHARACTER, "bad", 2, 1, "@", "a\n@ b\nc")
        assert err.source_line() == "@ b"

    def test_line_out_of_range(self):
        err = LexError(LexErrorKind.UNRECOGNIZED_CHARACTER, "bad", 9, 1, "@", "a")
        assert err.source_line() == ""

    def test_args_hold_message(self, lex_errors):
        assert lex_errors("@")[0].args == ("unexpected character '@'",)
