import io

import pytest

from lox.lox_errors import Diagnostic, ErrorReporter, ParseError
from lox.lox_tokens import Token, TokenType


def test_report_formats_and_sets_flag() -> None:
    stream = io.StringIO()
    reporter = ErrorReporter(stream=stream)
    assert not reporter.had_error

    diagnostic = reporter.report(7, " at 'x'", "Something broke.")

    assert diagnostic == Diagnostic(7, " at 'x'", "Something broke.")
    assert stream.getvalue() == "[line 7] Error at 'x': Something broke.\n"
    assert reporter.had_error
    assert reporter.diagnostics == [diagnostic]


def test_error_at_token_uses_lexeme(reporter: ErrorReporter) -> None:
    reporter.error(Token(TokenType.RIGHT_PAREN, ")", None, 3), "Expect expression.")
    assert str(reporter.diagnostics[0]) == "[line 3] Error at ')': Expect expression."


def test_error_at_eof_says_at_end(reporter: ErrorReporter) -> None:
    reporter.error(Token(TokenType.EOF, "", None, 9), "Expect ';' after value.")
    assert str(reporter.diagnostics[0]) == "[line 9] Error at end: Expect ';' after value."


def test_line_error_has_no_location(reporter: ErrorReporter) -> None:
    reporter.line_error(2, "Unexpected character.")
    assert reporter.diagnostics[0].where == ""


def test_reset_clears_state(reporter: ErrorReporter) -> None:
    reporter.line_error(1, "a")
    reporter.line_error(2, "b")
    assert len(reporter.diagnostics) == 2
    reporter.reset()
    assert not reporter.had_error
    assert reporter.diagnostics == []


def test_default_stream_is_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    ErrorReporter().line_error(4, "Unterminated string.")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[line 4] Error: Unterminated string.\n"


def test_parse_error_carries_token() -> None:
    tok = Token(TokenType.STAR, "*", None, 1)
    err = ParseError(tok, "Expect expression.")
    assert err.token is tok
    assert err.message == "Expect expression."
    assert str(err) == "Expect expression."
