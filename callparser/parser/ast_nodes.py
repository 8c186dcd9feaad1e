"""
AST node definitions for contract-call parsing.

This module contains the dataclasses representing nodes in the tree
produced by the call-text parser.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class LiteralKind(Enum):
    """Lexical kind of a scalar literal, before any ABI type is applied."""
    INT = 'int'
    HEX = 'hex'
    BOOL = 'bool'
    STRING = 'string'


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    pass


# =============================================================================
# VALUE NODES
# =============================================================================

@dataclass
class ScalarLiteral(ASTNode):
    """A single literal argument (e.g., 100, 0xabcd, true, "text")."""
    kind: LiteralKind = LiteralKind.INT
    text: str = ''
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass
class ArrayLiteral(ASTNode):
    """A bracketed list of arguments (e.g., [1, 2, 3])."""
    elements: List['Argument'] = field(default_factory=list)
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass
class Argument(ASTNode):
    """One argument slot: top-level or an element inside an array."""
    value: Union[ScalarLiteral, ArrayLiteral, None] = None


# =============================================================================
# TOP-LEVEL NODE
# =============================================================================

@dataclass
class CallExpression(ASTNode):
    """Root node: a method name applied to an argument list."""
    function_name: str = ''
    arguments: List[Argument] = field(default_factory=list)
