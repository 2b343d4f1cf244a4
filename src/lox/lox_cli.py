"""
Lox CLI Entrypoint.

This module provides the command-line interface for the Lox front end. It
scans and parses a script (or an inline string) and prints the resulting tree.

Features:
    - Read source from a script file or an inline string.
    - Scan and parse it, reporting every syntax error found in one pass.
    - Print the tree as s-expressions or JSON.
    - Launch an interactive REPL when no source is given.

Exit codes:
    0   success
    64  usage error (more than one script, or -s without source)
    65  the source contained lexical or syntax errors

Example usage:
    lox hello.lox
    lox -s "print 1 + 2;"
    lox hello.lox --format json
    lox --verbose

Functions:
    run_source(source: str, reporter: ErrorReporter, fmt: str = "sexpr") -> list[Stmt]:
        Scans, parses and prints one compilation unit.

    run_file(path: str, fmt: str = "sexpr") -> int:
        Runs a script file and returns the process exit code.

    main(argv: list[str] | None = None) -> None:
        Parses CLI arguments and invokes the appropriate action.
"""

import argparse
import json
import logging
import sys

from lox.emitters.sexpr_emitter import SExprEmitter
from lox.lox_ast import Stmt
from lox.lox_errors import ErrorReporter
from lox.lox_parser import Parser
from lox.lox_scanner import scan

logger = logging.getLogger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65

FORMATS = ("sexpr", "json")


def render(statements: list[Stmt], fmt: str = "sexpr") -> str:
    """Render parsed statements in the requested output format."""
    if fmt == "json":
        return json.dumps([stmt.to_dict() for stmt in statements], indent=2)
    if fmt == "sexpr":
        return SExprEmitter().emit(statements)
    raise ValueError(f"Unknown output format: {fmt!r}")


def run_source(
    source: str, reporter: ErrorReporter, fmt: str = "sexpr"
) -> list[Stmt]:
    """
    Run the Lox front end on one compilation unit: scan, parse and print.

    Args:
        source (str): Lox source code.
        reporter (ErrorReporter): Receives every lexical and syntax error.
        fmt (str): Output format for the tree, "sexpr" or "json".

    Returns:
        list[Stmt]: The statements that parsed cleanly.

    Side Effects:
        - Prints the tree to stdout when no error was reported.
        - Prints diagnostics to the reporter's stream.
    """
    tokens = scan(source, reporter)
    logger.debug("scanned %d tokens", len(tokens))

    statements = Parser(tokens, reporter).parse()
    logger.debug(
        "parsed %d statements with %d diagnostics",
        len(statements),
        len(reporter.diagnostics),
    )

    if reporter.had_error:
        return statements

    output = render(statements, fmt)
    if output:
        print(output)
    return statements


def run_file(path: str, fmt: str = "sexpr") -> int:
    """Run a script file and return the exit code for it."""
    with open(path, encoding="utf-8") as f:
        source = f.read()

    reporter = ErrorReporter()
    run_source(source, reporter, fmt)
    return EX_DATAERR if reporter.had_error else EX_OK


def run_string(source: str, fmt: str = "sexpr") -> int:
    reporter = ErrorReporter()
    run_source(source, reporter, fmt)
    return EX_DATAERR if reporter.had_error else EX_OK


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the Lox CLI.

    Supported flags:
        - `-s`, `--string`: Interpret the positional argument as source code.
        - `-f`, `--format`: Tree output format ('sexpr' or 'json'), default 'sexpr'.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Enable debug logging.

    Exits the process with the code of the run.
    """
    parser = argparse.ArgumentParser(prog="lox")
    parser.add_argument("script", nargs="?", help="Script path or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret script as source code"
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="sexpr",
        help="Tree output format (default: sexpr)",
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args, extra = parser.parse_known_args(argv)
    if extra or (args.string and args.script is None):
        print("Usage: lox [script]")
        sys.exit(EX_USAGE)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.repl or args.script is None:
        from lox.lox_repl import start_repl

        start_repl(fmt=args.format)
        sys.exit(EX_OK)

    if args.string:
        sys.exit(run_string(args.script, args.format))
    sys.exit(run_file(args.script, args.format))


if __name__ == "__main__":
    main()
