"""
Renders Lox AST nodes as parenthesized prefix expressions.

This module defines the `SExprEmitter` class, used by the CLI and the REPL to
show what the parser built. Operators come first and every composite node is
wrapped in parentheses, so precedence and grouping are visible at a glance:

    1 + 2 * 3;        →  (; (+ 1 (* 2 3)))
    print -(4 - 1);   →  (print (- (group (- 4 1))))

Literal rendering:
    - numbers drop a trailing ``.0`` (``3.0`` → ``3``)
    - ``None`` → ``nil``, ``True``/``False`` → ``true``/``false``
    - strings render as their raw text
"""

from typing import Any

from lox.lox_ast import (
    AstVisitor,
    Binary,
    Expr,
    Expression,
    Grouping,
    Literal,
    Node,
    Print,
    Stmt,
    Unary,
)


def format_value(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


class SExprEmitter(AstVisitor):
    """Emits one s-expression per node.

    Methods:
        emit(statements): Returns one line per statement.
        emit_node(node): Returns the s-expression for a single node.
    """

    def emit(self, statements: list[Stmt]) -> str:
        return "\n".join(self.emit_node(stmt) for stmt in statements)

    def emit_node(self, node: Node) -> str:
        return str(self.visit(node))

    def parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.emit_node(expr) for expr in exprs]
        return f"({' '.join(parts)})"

    def visit_literal(self, node: Literal) -> str:
        return format_value(node.value)

    def visit_grouping(self, node: Grouping) -> str:
        return self.parenthesize("group", node.expression)

    def visit_unary(self, node: Unary) -> str:
        return self.parenthesize(node.operator.lexeme, node.right)

    def visit_binary(self, node: Binary) -> str:
        return self.parenthesize(node.operator.lexeme, node.left, node.right)

    def visit_expression_stmt(self, node: Expression) -> str:
        return self.parenthesize(";", node.expression)

    def visit_print(self, node: Print) -> str:
        return self.parenthesize("print", node.expression)
