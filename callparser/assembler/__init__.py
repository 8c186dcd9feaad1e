"""
Assembler module for the call parser.

This module provides the array construction stack and the listener that
assembles typed arguments from structural call events.
"""

from .array_stack import ArrayFrame, ArrayStack
from .listener import ArgumentAssembler, ParsedCall, LITERAL_TARGETS

__all__ = [
    'ArrayFrame',
    'ArrayStack',
    'ArgumentAssembler',
    'ParsedCall',
    'LITERAL_TARGETS',
]
