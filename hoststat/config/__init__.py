"""
Configuration parsing with nginx-like syntax.
"""

from .lexer import Lexer, LexerError, Token, TokenType
from .loader import ConfigError, ConfigLoader
from .parser import ConfigParser, ParseError
from .schema import Config, SinkType

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "ConfigParser",
    "ParseError",
    "Config",
    "ConfigError",
    "ConfigLoader",
    "SinkType",
]
