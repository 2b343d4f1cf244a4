import dataclasses
import json
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lox.lox_ast import (
    EXPR_KINDS,
    STMT_KINDS,
    AstVisitor,
    Binary,
    Expression,
    Grouping,
    Literal,
    Print,
    Unary,
)
from lox.lox_tokens import Token, TokenType

MINUS = Token(TokenType.MINUS, "-", None, 2)
STAR = Token(TokenType.STAR, "*", None, 2)


def test_node_kinds() -> None:
    assert EXPR_KINDS == {"literal", "grouping", "unary", "binary"}
    assert STMT_KINDS == {"expression_stmt", "print"}
    assert Binary(Literal(1.0), STAR, Literal(2.0)).kind == "binary"
    assert Print(Literal(None)).kind == "print"


def test_nodes_are_immutable() -> None:
    node = Unary(MINUS, Literal(1.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.right = Literal(2.0)  # type: ignore[misc]


def test_structural_equality() -> None:
    a = Binary(Grouping(Literal(1.0)), STAR, Unary(MINUS, Literal(2.0)))
    b = Binary(Grouping(Literal(1.0)), STAR, Unary(MINUS, Literal(2.0)))
    assert a == b
    assert a != Binary(Grouping(Literal(1.0)), STAR, Unary(MINUS, Literal(3.0)))


def test_to_dict_binary() -> None:
    node = Binary(Literal(1.0), STAR, Grouping(Literal("x")))
    assert node.to_dict() == {
        "kind": "binary",
        "left": {"kind": "literal", "value": 1.0},
        "operator": {"type": "STAR", "lexeme": "*", "line": 2},
        "right": {"kind": "grouping", "expression": {"kind": "literal", "value": "x"}},
    }


def test_to_dict_statements_are_json_serializable() -> None:
    stmts = [Print(Unary(MINUS, Literal(3.0))), Expression(Literal(None))]
    dumped = json.loads(json.dumps([s.to_dict() for s in stmts]))
    assert dumped[0]["kind"] == "print"
    assert dumped[0]["expression"]["operator"]["lexeme"] == "-"
    assert dumped[1] == {
        "kind": "expression_stmt",
        "expression": {"kind": "literal", "value": None},
    }


class KindCollector(AstVisitor):
    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_literal(self, node: Literal) -> None:
        self.seen.append("literal")

    def visit_unary(self, node: Unary) -> None:
        self.seen.append("unary")
        self.visit(node.right)

    def visit_print(self, node: Print) -> None:
        self.seen.append("print")
        self.visit(node.expression)


def test_visitor_dispatches_on_kind() -> None:
    collector = KindCollector()
    collector.visit(Print(Unary(MINUS, Literal(1.0))))
    assert collector.seen == ["print", "unary", "literal"]


def test_visitor_missing_handler_raises() -> None:
    with pytest.raises(NotImplementedError, match="grouping"):
        KindCollector().visit(Grouping(Literal(1.0)))


@given(st.one_of(st.none(), st.booleans(), st.floats(allow_nan=False), st.text()))
def test_literal_to_dict_keeps_value(value: Any) -> None:
    assert Literal(value).to_dict() == {"kind": "literal", "value": value}
