"""
Type system module for the call parser.

This module provides ABI parameter types, the introspection helpers used
to choose dispatch, and the contract interface registry.
"""

from .abi_types import (
    ScalarKind,
    ScalarType,
    ParameterType,
    INTEGER_KINDS,
    HEX_KINDS,
    base_type,
    array_depth,
    array_length,
    parse_scalar,
    parse_type,
)
from .registry import CONSTRUCTOR_NAME, MethodDescriptor, ContractInterface

__all__ = [
    'ScalarKind',
    'ScalarType',
    'ParameterType',
    'INTEGER_KINDS',
    'HEX_KINDS',
    'base_type',
    'array_depth',
    'array_length',
    'parse_scalar',
    'parse_type',
    'CONSTRUCTOR_NAME',
    'MethodDescriptor',
    'ContractInterface',
]
