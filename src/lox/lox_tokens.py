"""
Token definitions for the Lox language.

Classes:
    TokenType: Closed enumeration of every lexical category the scanner produces.
    Token: Immutable value for one lexical unit (type, lexeme, literal, line).

Constants:
    KEYWORDS: Reserved word → TokenType mapping used by the scanner.
    STATEMENT_KEYWORDS: Token types that begin a statement. The parser stops
        panic-mode recovery in front of any of these.

Example:
    >>> Token(TokenType.NUMBER, "42", 42.0, 1)
    Token(NUMBER, '42', 42.0, line=1)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

STATEMENT_KEYWORDS: frozenset[TokenType] = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type (TokenType): The token's lexical category.
        lexeme (str): The raw source text of the token ("" for EOF).
        literal (Any): The resolved value for NUMBER (float) and STRING (str)
            tokens, None for everything else.
        line (int): The 1-based source line the token starts on.
    """

    type: TokenType
    lexeme: str
    literal: Any = None
    line: int = 1

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"


__all__ = ["KEYWORDS", "STATEMENT_KEYWORDS", "Token", "TokenType"]
