"""
Interactive prompt for the Lox front end.

Each line typed at the ``> `` prompt is an independent compilation unit: it is
scanned and parsed on its own, its tree is printed, and the error state is
cleared before the next prompt. A line without a trailing ``;`` that does not
start with a statement keyword is parsed as a bare expression, so ``1 + 2``
works as well as ``1 + 2;``.

Leave with ``exit``, ``quit``, Ctrl-D or Ctrl-C.
"""

import json

from lox.emitters.sexpr_emitter import SExprEmitter
from lox.lox_cli import render
from lox.lox_errors import ErrorReporter
from lox.lox_parser import Parser
from lox.lox_scanner import scan
from lox.lox_tokens import STATEMENT_KEYWORDS, Token, TokenType


def is_bare_expression(tokens: list[Token]) -> bool:
    """True if the line looks like an expression typed without a terminator."""
    content = [tok for tok in tokens if tok.type != TokenType.EOF]
    if not content:
        return False
    return (
        content[-1].type != TokenType.SEMICOLON
        and content[0].type not in STATEMENT_KEYWORDS
    )


def run_line(line: str, reporter: ErrorReporter, fmt: str = "sexpr") -> None:
    tokens = scan(line, reporter)
    parser = Parser(tokens, reporter)
    if is_bare_expression(tokens):
        expr = parser.parse_expression()
        if expr is not None and not reporter.had_error:
            if fmt == "json":
                print(json.dumps(expr.to_dict(), indent=2))
            else:
                print(SExprEmitter().emit_node(expr))
        return

    statements = parser.parse()
    if statements and not reporter.had_error:
        print(render(statements, fmt))


def start_repl(fmt: str = "sexpr") -> None:
    print("Lox REPL. Type 'exit' or 'quit' to leave.")
    reporter = ErrorReporter()

    while True:
        try:
            line = input("> ")
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Lox REPL.")
            return

        src = line.strip()
        if src in ("exit", "quit"):
            print("Exiting Lox REPL.")
            return
        if not src:
            continue

        run_line(src, reporter, fmt)
        reporter.reset()

