"""
Parser module for the call parser.

This module provides AST node definitions, the parser implementation,
and the walker that turns a parsed call into structural events.
"""

from .ast_nodes import (
    ASTNode,
    LiteralKind,
    ScalarLiteral,
    ArrayLiteral,
    Argument,
    CallExpression,
)
from .parser import Parser, LITERAL_TOKENS
from .listener import CallListener, CallWalker

__all__ = [
    'ASTNode',
    'LiteralKind',
    'ScalarLiteral',
    'ArrayLiteral',
    'Argument',
    'CallExpression',
    'Parser',
    'LITERAL_TOKENS',
    'CallListener',
    'CallWalker',
]
