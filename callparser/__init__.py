"""
Contract Call Parser

This package turns human-typed contract calls such as
``transfer(0x5FfC014343cd971B7eb70732021E26C35B744cc4,100)`` into typed,
correctly nested argument lists matching a contract's ABI.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Call AST, Parser, and the CallWalker/CallListener event stream
- type_system/: ABI parameter types, introspection, ContractInterface
- coercion/: Typed values (Address, Hash, TypedArray) and literal coercion
- assembler/: ArrayStack and the ArgumentAssembler listener
- call_parser.py: parse_call(), the one-call entry point
- cli.py: Command-line front end

Usage:
    from callparser import ContractInterface, parse_call

    contract = ContractInterface.from_signatures(['transfer(address,uint256)'])
    parsed = parse_call(contract, 'transfer(0x5FfC014343cd971B7eb70732021E26C35B744cc4,100)')
    parsed.arguments  # [Address(...), 100]
"""

from .errors import (
    ErrorKind,
    CallParseError,
    UnknownMethodError,
    TooManyArgumentsError,
    MissingArgumentsError,
    UnknownScalarTypeError,
    FormatError,
    RangeError,
    ArrayShapeError,
    ArrayLengthError,
    AbiTypeError,
    CallSyntaxError,
    InternalError,
    TypeMismatchError,
    UnhandledTypeError,
)
from .type_system import ContractInterface, MethodDescriptor, ParameterType, parse_type
from .coercion import Address, Hash, TypedArray
from .assembler import ArgumentAssembler, ParsedCall
from .call_parser import parse_call, parse_call_text

__all__ = [
    'ErrorKind',
    'CallParseError',
    'UnknownMethodError',
    'TooManyArgumentsError',
    'MissingArgumentsError',
    'UnknownScalarTypeError',
    'FormatError',
    'RangeError',
    'ArrayShapeError',
    'ArrayLengthError',
    'AbiTypeError',
    'CallSyntaxError',
    'InternalError',
    'TypeMismatchError',
    'UnhandledTypeError',
    'ContractInterface',
    'MethodDescriptor',
    'ParameterType',
    'parse_type',
    'Address',
    'Hash',
    'TypedArray',
    'ArgumentAssembler',
    'ParsedCall',
    'parse_call',
    'parse_call_text',
]
