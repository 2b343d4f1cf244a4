"""
Lexical analyzer for the Lox language.

This module converts raw source text into the token list the parser reads:

Classes:
    CharacterStream: Cursor over the source with line tracking.
    Scanner: Converts a source string into a list of Token objects.

Features:
    - Skips whitespace and ``//`` line comments
    - Recognizes one and two character operators (``!=``, ``==``, ``<=``, ``>=``)
    - Recognizes:
        * Identifiers and keywords
        * Numbers (integer and fractional, stored as float)
        * Strings (double quoted, may span lines, no escapes)
        * Punctuation

Lexical errors never raise. They are reported to the ``ErrorReporter`` and
scanning continues, so one pass surfaces every bad character.

Example:
    >>> Scanner("print 1;", ErrorReporter()).scan_tokens()
    [Token(PRINT, 'print', None, line=1), Token(NUMBER, '1', 1.0, line=1), ...]
"""

from typing import Any

from lox.lox_errors import ErrorReporter
from lox.lox_tokens import KEYWORDS, Token, TokenType

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first char -> (type without "=", type with "=")
EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


class CharacterStream:
    """
    A utility for reading characters from a string source with line tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1):
        self.source = source
        self.position = position
        self.line = line

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character ``offset`` ahead without consuming it, or "" out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def match(self, expected: str) -> bool:
        """Consumes the next character only if it equals ``expected``."""
        if self.peek() != expected:
            return False
        self.next()
        return True

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Scanner:
    """Lexical analyzer for Lox source text.

    Attributes:
        stream (CharacterStream): The source being scanned.
        reporter (ErrorReporter): Receives lexical errors.
        tokens (list[Token]): Tokens produced so far.
    """

    def __init__(self, source: str, reporter: ErrorReporter) -> None:
        self.source = source
        self.stream = CharacterStream(source)
        self.reporter = reporter
        self.tokens: list[Token] = []
        self._start = 0
        self._start_line = 1

    def scan_tokens(self) -> list[Token]:
        """Scans the whole source and returns its tokens, ending with one EOF token."""
        while not self.stream.end_of_file():
            self._start = self.stream.position
            self._start_line = self.stream.line
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.stream.line))
        return self.tokens

    def scan_token(self) -> None:
        ch = self.stream.next()

        if ch in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[ch])
        elif ch in EQUAL_SUFFIX_TOKENS:
            plain, with_equal = EQUAL_SUFFIX_TOKENS[ch]
            self.add_token(with_equal if self.stream.match("=") else plain)
        elif ch == "/":
            if self.stream.match("/"):
                self.skip_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif ch in " \r\t\n":
            pass
        elif ch == '"':
            self.string()
        elif _is_digit(ch):
            self.number()
        elif _is_alpha(ch):
            self.identifier()
        else:
            self.reporter.line_error(self.stream.line, "Unexpected character.")

    def skip_comment(self) -> None:
        """Advances through the stream until the end of a comment line."""
        while not self.stream.end_of_file() and self.stream.peek() != "\n":
            self.stream.next()

    def string(self) -> None:
        while not self.stream.end_of_file() and self.stream.peek() != '"':
            self.stream.next()

        if self.stream.end_of_file():
            self.reporter.line_error(self.stream.line, "Unterminated string.")
            return

        # closing quote
        self.stream.next()
        value = self.source[self._start + 1 : self.stream.position - 1]
        self.add_token(TokenType.STRING, value)

    def number(self) -> None:
        while _is_digit(self.stream.peek()):
            self.stream.next()

        # A trailing "." is a DOT token, not part of the number
        if self.stream.peek() == "." and _is_digit(self.stream.peek(1)):
            self.stream.next()
            while _is_digit(self.stream.peek()):
                self.stream.next()

        self.add_token(TokenType.NUMBER, float(self.current_lexeme()))

    def identifier(self) -> None:
        while _is_alpha(self.stream.peek()) or _is_digit(self.stream.peek()):
            self.stream.next()

        text = self.current_lexeme()
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def current_lexeme(self) -> str:
        return self.source[self._start : self.stream.position]

    def add_token(self, type_: TokenType, literal: Any = None) -> None:
        self.tokens.append(
            Token(type_, self.current_lexeme(), literal, self._start_line)
        )


def scan(source: str, reporter: ErrorReporter) -> list[Token]:
    """Convenience wrapper: scan ``source`` and return its tokens."""
    return Scanner(source, reporter).scan_tokens()


__all__ = ["CharacterStream", "Scanner", "scan"]
