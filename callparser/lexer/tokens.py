"""
Token definitions for the call-text lexer.

This module contains the TokenType enum, Token dataclass, and the
constant mappings for keywords and delimiters.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the call-text lexer."""

    # Keywords
    TRUE = auto()
    FALSE = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COMMA = auto()

    # Literals
    NUMBER = auto()
    HEX_NUMBER = auto()
    STRING_LITERAL = auto()
    IDENTIFIER = auto()

    # Special
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    line: int
    column: int


# Keyword to TokenType mapping (matched case-insensitively)
KEYWORDS = {
    'true': TokenType.TRUE,
    'false': TokenType.FALSE,
}

# Single-character delimiters
SINGLE_CHAR_OPS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ',': TokenType.COMMA,
}
