"""
Lox Language Parser

Parses a Lox token list into a list of statement nodes.

This module implements a recursive-descent parser. Each grammar rule is one
method and each method calls the rule of the next-higher precedence for its
operands, so call order alone encodes operator binding strength:

    program     → statement* EOF
    statement   → "print" expression ";" | expression ";"
    expression  → equality
    equality    → comparison (("!=" | "==") comparison)*
    comparison  → term ((">" | ">=" | "<" | "<=") term)*
    term        → factor (("+" | "-") factor)*
    factor      → unary (("/" | "*") unary)*
    unary       → ("!" | "-") unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Every ``(...)*`` rule is a loop that folds the tree built so far into a new
``Binary`` node, which makes all binary operators left-associative.

Parser Behavior
---------------
- A syntax error is reported to the ``ErrorReporter`` once and then raised as
  ``ParseError``. Only ``parse()`` catches it, one statement at a time.
- After an error the parser is in panic mode: ``synchronize()`` skips tokens up
  to the next statement boundary and parsing resumes there, so one pass reports
  as many independent errors as possible.
- Nesting deeper than ``MAX_DEPTH`` is a syntax error like any other, so
  pathological input cannot exhaust the Python stack.
- The cursor never moves past the EOF token, and every loop iteration of
  ``parse()`` consumes at least one token, so parsing always terminates.

Entry Points
------------
- ``parse()``: Parse a full program into a list of statements.
- ``parse_expression()``: Parse a single bare expression (REPL mode).

Returns
-------
list[Stmt]
    The statements that parsed cleanly, in source order. Statements that failed
    are dropped; their diagnostics are on the reporter.
"""

from __future__ import annotations

import logging

from lox.lox_ast import Binary, Expr, Expression, Grouping, Literal, Print, Stmt, Unary
from lox.lox_errors import ErrorReporter, ParseError
from lox.lox_tokens import STATEMENT_KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

# Deepest nesting of groupings and unary operators accepted in one expression.
MAX_DEPTH = 64


class Parser:
    """
    Lox Parser Class

    Attributes
    ----------
    tokens : list[Token]
        The token list to parse. Must end with exactly one EOF token.
    reporter : ErrorReporter
        Receives every syntax error exactly once.
    current : int
        Index of the next unconsumed token.
    panicking : bool
        True between catching a ``ParseError`` and finishing ``synchronize()``.
    depth : int
        Current nesting of expressions and unary operators.

    Raises
    ------
    ValueError
        If the token list is empty or does not end with an EOF token.
    """

    def __init__(self, tokens: list[Token], reporter: ErrorReporter) -> None:
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens: list[Token] = tokens
        self.reporter = reporter
        self.current: int = 0
        self.panicking: bool = False
        self.depth: int = 0

    # Entry points

    def parse(self) -> list[Stmt]:
        """Parse every statement up to EOF, recovering after each syntax error."""
        statements: list[Stmt] = []
        while not self.is_at_end():
            start = self.current
            try:
                statements.append(self.statement())
            except ParseError as e:
                self.panicking = True
                logger.debug(
                    "panic at token %d (%r): %s", self.current, e.token, e.message
                )
                self.synchronize(start)
        return statements

    def parse_expression(self) -> Expr | None:
        """Parse a single expression that must span the whole token list.

        Returns None if the input is not one well-formed expression; the error
        has been reported.
        """
        try:
            expr = self.expression()
            if not self.is_at_end():
                raise self.error(self.peek(), "Expect end of expression.")
            return expr
        except ParseError:
            return None

    # Statements

    def statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return self.print_statement()
        return self.expression_statement()

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    # Expressions, lowest precedence first

    def expression(self) -> Expr:
        self.nest()
        try:
            return self.equality()
        finally:
            self.depth -= 1

    def equality(self) -> Expr:
        expr = self.comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(expr, operator, right)
        return expr

    def comparison(self) -> Expr:
        expr = self.term()
        while self.match(
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        ):
            operator = self.previous()
            right = self.term()
            expr = Binary(expr, operator, right)
        return expr

    def term(self) -> Expr:
        expr = self.factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(expr, operator, right)
        return expr

    def factor(self) -> Expr:
        expr = self.unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            self.nest()
            try:
                right = self.unary()
            finally:
                self.depth -= 1
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)

        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)

        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self.error(self.peek(), "Expect expression.")

    # Cursor primitives

    def match(self, *types: TokenType) -> bool:
        for type_ in types:
            if self.check(type_):
                self.advance()
                return True
        return False

    def consume(self, type_: TokenType, message: str) -> Token:
        if self.check(type_):
            return self.advance()
        raise self.error(self.peek(), message)

    def check(self, type_: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == type_

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    # Error handling

    def error(self, token: Token, message: str) -> ParseError:
        """Report ``message`` at ``token`` and return the error to raise."""
        self.reporter.error(token, message)
        return ParseError(token, message)

    def nest(self) -> None:
        """Enter one more level of nesting, failing past ``MAX_DEPTH``."""
        if self.depth >= MAX_DEPTH:
            raise self.error(self.peek(), "Expression nested too deeply.")
        self.depth += 1

    def synchronize(self, start: int) -> None:
        """Discard tokens until the next statement boundary and leave panic mode.

        ``start`` is where the failed statement began. The offending token is
        skipped unless the statement already consumed tokens and the offending
        token itself starts a statement; then it is left for the next statement
        so that e.g. ``print 1 print 2;`` still yields ``print 2``.

        Stops after a ``;`` or in front of a statement keyword or EOF. The
        boundary keyword is never consumed.
        """
        if self.current == start or self.peek().type not in STATEMENT_KEYWORDS:
            self.advance()

        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                break
            if self.peek().type in STATEMENT_KEYWORDS:
                break
            self.advance()

        logger.debug("resynchronized at token %d (%r)", self.current, self.peek())
        self.panicking = False


__all__ = ["MAX_DEPTH", "Parser"]
