"""
Lexer for the nginx-like configuration syntax.

Supports:
- Identifiers (block and directive names, bare words like "console")
- Quoted strings with backslash escapes
- Numbers and durations (10, 2.5, 500ms, 10s, 5m, 1h)
- Booleans (on, off, true, false)
- Braces and semicolons
- "#" line comments and "/* */" block comments
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Token types of the config syntax."""

    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    DURATION = auto()  # value in seconds
    BOOLEAN = auto()
    LBRACE = auto()
    RBRACE = auto()
    SEMICOLON = auto()
    EOF = auto()


@dataclass
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: str | int | float | bool
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class LexerError(Exception):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"Line {line}, column {column}: {message}")


BOOLEANS = {"on": True, "off": False, "true": True, "false": False}

# Duration units in seconds
DURATION_UNITS = {"ms": 0.001, "s": 1, "m": 60, "h": 3600, "d": 86400}

ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}

PUNCTUATION = {"{": TokenType.LBRACE, "}": TokenType.RBRACE, ";": TokenType.SEMICOLON}


class Lexer:
    """
    Tokenizer for the config syntax.

    Example:
        agent {
            interval 10s;
        }
    """

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        return self.source[pos] if pos < len(self.source) else ""

    def _advance(self) -> str:
        char = self._peek()
        if not char:
            return ""
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _skip_blank(self) -> None:
        """Skip whitespace and comments."""
        while True:
            char = self._peek()
            if char and char.isspace():
                self._advance()
            elif char == "#":
                while self._peek() and self._peek() != "\n":
                    self._advance()
            elif char == "/" and self._peek(1) == "*":
                line, column = self.line, self.column
                self._advance()
                self._advance()
                while not (self._peek() == "*" and self._peek(1) == "/"):
                    if not self._advance():
                        raise LexerError("Unterminated block comment", line, column)
                self._advance()
                self._advance()
            else:
                return

    def _read_string(self, line: int, column: int) -> Token:
        quote = self._advance()
        chars = []
        while True:
            char = self._advance()
            if not char or char == "\n":
                raise LexerError("Unterminated string literal", line, column)
            if char == quote:
                break
            if char == "\\":
                escaped = self._advance()
                if not escaped:
                    raise LexerError("Unterminated string literal", line, column)
                chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(char)
        return Token(TokenType.STRING, "".join(chars), line, column)

    def _read_number(self, line: int, column: int) -> Token:
        start = self.pos
        while self._peek().isdigit() or self._peek() == ".":
            self._advance()
        number = self.source[start:self.pos]
        unit_start = self.pos
        while self._peek().isalpha():
            self._advance()
        unit = self.source[unit_start:self.pos].lower()

        try:
            value: int | float = float(number) if "." in number else int(number)
        except ValueError:
            raise LexerError(f"Invalid number: {number}", line, column) from None

        if not unit:
            return Token(TokenType.NUMBER, value, line, column)
        if unit not in DURATION_UNITS:
            raise LexerError(f"Unknown duration unit: {unit}", line, column)
        return Token(TokenType.DURATION, value * DURATION_UNITS[unit], line, column)

    def _read_word(self, line: int, column: int) -> Token:
        start = self.pos
        while self._peek() and (self._peek().isalnum() or self._peek() in "_-./"):
            self._advance()
        word = self.source[start:self.pos]
        if word.lower() in BOOLEANS:
            return Token(TokenType.BOOLEAN, BOOLEANS[word.lower()], line, column)
        return Token(TokenType.IDENTIFIER, word, line, column)

    def next_token(self) -> Token:
        """Get the next token from the source."""
        self._skip_blank()
        line, column = self.line, self.column
        char = self._peek()

        if not char:
            return Token(TokenType.EOF, "", line, column)
        if char in PUNCTUATION:
            self._advance()
            return Token(PUNCTUATION[char], char, line, column)
        if char in "\"'":
            return self._read_string(line, column)
        if char.isdigit():
            return self._read_number(line, column)
        if char.isalpha() or char == "_":
            return self._read_word(line, column)

        raise LexerError(f"Unexpected character: {char!r}", line, column)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return


def tokenize(source: str, filename: str = "<string>") -> list[Token]:
    """Tokenize a source string."""
    return list(Lexer(source, filename))
