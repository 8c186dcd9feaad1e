"""
Coercion module for the call parser.

This module provides the typed argument values and the functions that
convert literal text into them.
"""

from .values import (
    Address,
    Hash,
    TypedArray,
    SCALAR_PYTHON_TYPES,
    scalar_python_type,
    is_scalar_instance,
    to_json_value,
)
from .literals import (
    COERCERS,
    coerce,
    int_bounds,
    unescape,
    str_to_int,
    str_to_uint,
    str_to_bool,
    str_to_str,
    str_to_address,
    str_to_hash,
    str_to_bytes,
)

__all__ = [
    'Address',
    'Hash',
    'TypedArray',
    'SCALAR_PYTHON_TYPES',
    'scalar_python_type',
    'is_scalar_instance',
    'to_json_value',
    'COERCERS',
    'coerce',
    'int_bounds',
    'unescape',
    'str_to_int',
    'str_to_uint',
    'str_to_bool',
    'str_to_str',
    'str_to_address',
    'str_to_hash',
    'str_to_bytes',
]
