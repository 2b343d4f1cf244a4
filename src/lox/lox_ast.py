"""
Abstract syntax tree for the Lox language.

Expression nodes:
    Literal(value): A resolved constant (bool, None, float or str).
    Grouping(expression): An explicitly parenthesized sub-expression.
    Unary(operator, right): A prefix operator ("!" or "-") and its operand.
    Binary(left, operator, right): An infix operator and both operands.

Statement nodes:
    Expression(expression): An expression evaluated for its side effect.
    Print(expression): An expression evaluated and displayed.

Every node is a frozen dataclass with a fixed ``kind`` tag. ``Expr`` and ``Stmt``
are closed unions of the variants above. Traversal goes through ``AstVisitor``,
which dispatches on ``kind`` to a ``visit_<kind>`` method, so a backend never has
to work out which node it is holding.

Usage:
    The parser builds these nodes; the s-expression emitter and the JSON dump in
    the CLI read them. ``to_dict()`` gives a plain nested dictionary suitable for
    ``json.dumps``.

Example:
    >>> one = Literal(1.0)
    >>> Binary(one, Token(TokenType.PLUS, "+", None, 1), one).kind
    'binary'
"""

from dataclasses import dataclass
from typing import Any, ClassVar, TypedDict, Union

from lox.lox_tokens import Token


class TokenDict(TypedDict):
    type: str
    lexeme: str
    line: int


class AstDict(TypedDict, total=False):
    """Serialized form of a node.

    Fields:
        kind (str): The node's tag (e.g. "binary", "print").
        value (Any): Literal value, for "literal" nodes.
        operator (TokenDict): Operator token, for "unary" and "binary" nodes.
        left, right, expression (AstDict): Child nodes, depending on the kind.
    """

    kind: str
    value: Any
    operator: TokenDict
    left: "AstDict"
    right: "AstDict"
    expression: "AstDict"


def _token_dict(token: Token) -> TokenDict:
    return {"type": token.type.name, "lexeme": token.lexeme, "line": token.line}


@dataclass(frozen=True)
class Literal:
    kind: ClassVar[str] = "literal"

    value: Any

    def to_dict(self) -> AstDict:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True)
class Grouping:
    kind: ClassVar[str] = "grouping"

    expression: "Expr"

    def to_dict(self) -> AstDict:
        return {"kind": self.kind, "expression": self.expression.to_dict()}


@dataclass(frozen=True)
class Unary:
    kind: ClassVar[str] = "unary"

    operator: Token
    right: "Expr"

    def to_dict(self) -> AstDict:
        return {
            "kind": self.kind,
            "operator": _token_dict(self.operator),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Binary:
    kind: ClassVar[str] = "binary"

    left: "Expr"
    operator: Token
    right: "Expr"

    def to_dict(self) -> AstDict:
        return {
            "kind": self.kind,
            "left": self.left.to_dict(),
            "operator": _token_dict(self.operator),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Expression:
    kind: ClassVar[str] = "expression_stmt"

    expression: "Expr"

    def to_dict(self) -> AstDict:
        return {"kind": self.kind, "expression": self.expression.to_dict()}


@dataclass(frozen=True)
class Print:
    kind: ClassVar[str] = "print"

    expression: "Expr"

    def to_dict(self) -> AstDict:
        return {"kind": self.kind, "expression": self.expression.to_dict()}


Expr = Union[Literal, Grouping, Unary, Binary]
Stmt = Union[Expression, Print]
Node = Union[Expr, Stmt]

EXPR_KINDS: frozenset[str] = frozenset(
    cls.kind for cls in (Literal, Grouping, Unary, Binary)
)
STMT_KINDS: frozenset[str] = frozenset(cls.kind for cls in (Expression, Print))


class AstVisitor:
    """Base class for tree walkers.

    Subclasses define one ``visit_<kind>`` method per node kind they handle
    (``visit_literal``, ``visit_grouping``, ``visit_unary``, ``visit_binary``,
    ``visit_expression_stmt``, ``visit_print``).

    Raises:
        NotImplementedError: If the visitor has no method for a node's kind.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, f"visit_{node.kind}", None)
        if method is None:
            raise NotImplementedError(
                f"{type(self).__name__} has no visitor for node kind '{node.kind}'"
            )
        return method(node)


__all__ = [
    "AstDict",
    "AstVisitor",
    "Binary",
    "EXPR_KINDS",
    "Expr",
    "Expression",
    "Grouping",
    "Literal",
    "Node",
    "Print",
    "STMT_KINDS",
    "Stmt",
    "Unary",
]
