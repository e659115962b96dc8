"""
Recursive descent parser for the config syntax.

Grammar:
    document  := (block | directive)*
    block     := IDENTIFIER [value] '{' (block | directive)* '}'
    directive := IDENTIFIER value* ';'
    value     := STRING | NUMBER | DURATION | BOOLEAN | IDENTIFIER
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .lexer import Lexer, Token, TokenType

VALUE_TOKENS = (
    TokenType.STRING,
    TokenType.NUMBER,
    TokenType.DURATION,
    TokenType.BOOLEAN,
    TokenType.IDENTIFIER,
)


class ParseError(Exception):
    """Exception raised for parser errors."""

    def __init__(self, message: str, token: Token | None = None):
        self.token = token
        if token:
            super().__init__(f"Line {token.line}, column {token.column}: {message}")
        else:
            super().__init__(message)


@dataclass
class Directive:
    """
    A directive with a name and values.

    Examples:
        interval 10s;     -> Directive("interval", [10])
        type console;     -> Directive("type", ["console"])
    """

    name: str
    values: list[Any] = field(default_factory=list)
    line: int = 0

    @property
    def value(self) -> Any:
        """First value, or None."""
        return self.values[0] if self.values else None


@dataclass
class Block:
    """A block with a type, optional name and nested content."""

    type: str
    name: str | None = None
    directives: list[Directive] = field(default_factory=list)
    blocks: list["Block"] = field(default_factory=list)
    line: int = 0

    def get_directive(self, name: str) -> Directive | None:
        """Get the last directive with the given name (later ones win)."""
        for d in reversed(self.directives):
            if d.name == name:
                return d
        return None

    def get_value(self, name: str, default: Any = None) -> Any:
        directive = self.get_directive(name)
        if directive is None or directive.value is None:
            return default
        return directive.value

    def get_block(self, type_name: str) -> "Block | None":
        for b in self.blocks:
            if b.type == type_name:
                return b
        return None


@dataclass
class ConfigDocument:
    """Root of a parsed config; behaves as an unnamed block."""

    root: Block = field(default_factory=lambda: Block(type="<root>"))
    filename: str = "<string>"

    def get_block(self, type_name: str) -> Block | None:
        return self.root.get_block(type_name)

    @property
    def blocks(self) -> list[Block]:
        return self.root.blocks

    @property
    def directives(self) -> list[Directive]:
        return self.root.directives


class ConfigParser:
    """Parser producing a ConfigDocument from source text."""

    def __init__(self, source: str, filename: str = "<string>"):
        self.lexer = Lexer(source, filename)
        self.filename = filename
        self.current = self.lexer.next_token()

    def _advance(self) -> Token:
        token = self.current
        self.current = self.lexer.next_token()
        return token

    def _expect(self, token_type: TokenType, message: str) -> Token:
        if self.current.type != token_type:
            raise ParseError(message, self.current)
        return self._advance()

    def parse(self) -> ConfigDocument:
        """Parse the whole document."""
        doc = ConfigDocument(filename=self.filename)
        self._parse_body(doc.root, closing=TokenType.EOF)
        return doc

    def _parse_body(self, block: Block, closing: TokenType) -> None:
        while self.current.type != closing:
            if self.current.type != TokenType.IDENTIFIER:
                where = f"'{block.type}' block" if closing == TokenType.RBRACE else "document"
                raise ParseError(
                    f"Expected directive or block in {where}, got {self.current.type.name}",
                    self.current,
                )
            item = self._parse_item()
            if isinstance(item, Block):
                block.blocks.append(item)
            else:
                block.directives.append(item)

    def _parse_item(self) -> Block | Directive:
        name_token = self._advance()
        name = str(name_token.value)

        values: list[Any] = []
        while self.current.type in VALUE_TOKENS:
            values.append(self._advance().value)

        if self.current.type == TokenType.SEMICOLON:
            self._advance()
            return Directive(name=name, values=values, line=name_token.line)

        if self.current.type == TokenType.LBRACE:
            if len(values) > 1:
                raise ParseError(f"Block '{name}' takes at most one name", self.current)
            self._advance()
            block = Block(
                type=name,
                name=str(values[0]) if values else None,
                line=name_token.line,
            )
            self._parse_body(block, closing=TokenType.RBRACE)
            self._expect(TokenType.RBRACE, f"Expected '}}' to close '{name}' block")
            return block

        if self.current.type == TokenType.EOF:
            raise ParseError(f"Unexpected end of input after '{name}'", self.current)
        raise ParseError(f"Expected '{{' or ';' after '{name}'", self.current)


def parse_config(source: str, filename: str = "<string>") -> ConfigDocument:
    """Parse configuration source text."""
    return ConfigParser(source, filename).parse()


def parse_config_file(path: str | Path) -> ConfigDocument:
    """Parse a configuration file."""
    path = Path(path)
    return parse_config(path.read_text(encoding="utf-8"), str(path))
