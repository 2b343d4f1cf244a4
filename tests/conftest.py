import io

import pytest

from lox import lox_scanner
from lox.lox_ast import Stmt
from lox.lox_errors import ErrorReporter
from lox.lox_parser import Parser
from lox.lox_tokens import Token


@pytest.fixture  # type: ignore[misc]
def reporter() -> ErrorReporter:
    return ErrorReporter(stream=io.StringIO())


@pytest.fixture  # type: ignore[misc]
def scan(reporter: ErrorReporter):  # type: ignore[no-untyped-def]
    def _scan(source: str) -> list[Token]:
        return lox_scanner.scan(source, reporter)

    return _scan


@pytest.fixture  # type: ignore[misc]
def parse(reporter: ErrorReporter):  # type: ignore[no-untyped-def]
    def _parse(source: str) -> list[Stmt]:
        tokens = lox_scanner.scan(source, reporter)
        return Parser(tokens, reporter).parse()

    return _parse
