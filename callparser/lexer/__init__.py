"""
Lexer module for the call parser.

This module provides tokenization of contract-call text.
"""

from .tokens import TokenType, Token, KEYWORDS, SINGLE_CHAR_OPS
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'SINGLE_CHAR_OPS',
    'Lexer',
]
