"""
Diagnostics for the Lox front end.

Classes:
    Diagnostic: One recorded error, formatted as ``[line <n>] Error<where>: <message>``.
    ErrorReporter: Sink that records and prints diagnostics for one compilation
        unit and remembers whether any error occurred.
    ParseError: Raised inside the parser to abandon the statement being parsed.

An ``ErrorReporter`` is owned by a single driver run. The scanner and the parser
both receive it, so everything reported while compiling one file (or one REPL
line) lands in the same place. The REPL calls ``reset()`` between lines.

Example:
    >>> reporter = ErrorReporter()
    >>> reporter.line_error(3, "Unexpected character.")
    [line 3] Error: Unexpected character.
    >>> reporter.had_error
    True
"""

import sys
from dataclasses import dataclass
from typing import TextIO

from lox.lox_tokens import Token, TokenType


@dataclass(frozen=True)
class Diagnostic:
    line: int
    where: str
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ErrorReporter:
    """Collects diagnostics for one compilation unit.

    Attributes:
        stream (TextIO | None): Where formatted diagnostics are written. When
            None, ``sys.stderr`` is looked up at report time.
        diagnostics (list[Diagnostic]): Everything reported since the last reset.
        had_error (bool): True once at least one diagnostic has been reported.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self.diagnostics: list[Diagnostic] = []
        self.had_error: bool = False

    def report(self, line: int, where: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(line, where, message)
        self.diagnostics.append(diagnostic)
        print(diagnostic, file=self.stream or sys.stderr)
        self.had_error = True
        return diagnostic

    def line_error(self, line: int, message: str) -> Diagnostic:
        """Report an error that has no token to point at (scanner errors)."""
        return self.report(line, "", message)

    def error(self, token: Token, message: str) -> Diagnostic:
        """Report an error at ``token``, naming its lexeme or the end of input."""
        if token.type == TokenType.EOF:
            return self.report(token.line, " at end", message)
        return self.report(token.line, f" at '{token.lexeme}'", message)

    def reset(self) -> None:
        self.diagnostics.clear()
        self.had_error = False


class ParseError(Exception):
    """Abandons the statement currently being parsed.

    Only ``Parser.parse`` catches it, so it never unwinds past a statement
    boundary. By the time it is raised the error has already been reported.

    Attributes:
        token (Token): The token the parser was looking at.
        message (str): The human-readable expectation message.
    """

    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


__all__ = ["Diagnostic", "ErrorReporter", "ParseError"]
