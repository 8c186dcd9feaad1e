"""
Typed argument values.

Scalars use plain Python types where one exists (int, bool, str, bytes);
addresses and hashes get small immutable wrappers so they are never
confused with arbitrary byte strings. Arrays are TypedArray instances,
a list that knows its scalar type and nesting level and rejects elements
of any other concrete type.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable

from ..errors import FormatError, TypeMismatchError, UnhandledTypeError
from ..type_system import ScalarKind, ScalarType
from ..type_system.abi_types import ADDRESS_LENGTH, HASH_LENGTH

_HEX_RE = re.compile(r'[0-9a-fA-F]*')


def decode_hex(text: str, what: str) -> bytes:
    if not text.startswith(('0x', '0X')):
        raise FormatError(f'{what} must start with 0x: {text}')
    digits = text[2:]
    if len(digits) % 2 != 0:
        raise FormatError(f'{what} has an odd number of hex digits: {text}')
    if not _HEX_RE.fullmatch(digits):
        raise FormatError(f'{what} is not valid hex: {text}')
    return bytes.fromhex(digits)


@dataclass(frozen=True)
class Address:
    """A 20-byte account or contract address."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != ADDRESS_LENGTH:
            raise FormatError(f'address must be {ADDRESS_LENGTH} bytes, got {len(self.raw)}')

    @classmethod
    def from_hex(cls, text: str) -> 'Address':
        return cls(decode_hex(text, 'address'))

    def hex(self) -> str:
        return '0x' + self.raw.hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class Hash:
    """A 32-byte hash."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != HASH_LENGTH:
            raise FormatError(f'hash must be {HASH_LENGTH} bytes, got {len(self.raw)}')

    @classmethod
    def from_hex(cls, text: str) -> 'Hash':
        return cls(decode_hex(text, 'hash'))

    def hex(self) -> str:
        return '0x' + self.raw.hex()

    def __str__(self) -> str:
        return self.hex()


# Concrete Python type of a coerced scalar for each kind
SCALAR_PYTHON_TYPES = {
    ScalarKind.INT: int,
    ScalarKind.UINT: int,
    ScalarKind.BOOL: bool,
    ScalarKind.STRING: str,
    ScalarKind.ADDRESS: Address,
    ScalarKind.HASH: Hash,
    ScalarKind.BYTES: bytes,
    ScalarKind.FIXED_BYTES: bytes,
}


def scalar_python_type(scalar: ScalarType) -> type:
    """Concrete Python type for values of a scalar type."""
    py_type = SCALAR_PYTHON_TYPES.get(scalar.kind)
    if py_type is None:
        raise UnhandledTypeError(f'unhandled array type {scalar.name}')
    return py_type


def is_scalar_instance(value: Any, scalar: ScalarType) -> bool:
    """True if value has exactly the concrete type used for the scalar."""
    py_type = scalar_python_type(scalar)
    # bool subclasses int; integers and booleans must never mix
    return type(value) is py_type


class TypedArray(list):
    """
    A list of one concrete element type.

    At level 1 the elements are scalars of ``scalar``; at level N > 1 the
    elements are TypedArrays of the same scalar at level N - 1.
    """

    def __init__(self, scalar: ScalarType, level: int = 1, items: Iterable[Any] = ()):
        if level < 1:
            raise UnhandledTypeError(f'unhandled nesting level {level}')
        # Fails for scalars that have no container representation
        scalar_python_type(scalar)
        super().__init__()
        self.scalar = scalar
        self.level = level
        for item in items:
            self.append(item)

    @property
    def element_type_name(self) -> str:
        return self.scalar.name + '[]' * (self.level - 1)

    @property
    def type_name(self) -> str:
        return self.scalar.name + '[]' * self.level

    def accepts(self, value: Any) -> bool:
        if self.level == 1:
            return is_scalar_instance(value, self.scalar)
        return (isinstance(value, TypedArray)
                and value.scalar == self.scalar
                and value.level == self.level - 1)

    def append(self, value: Any) -> None:
        if not self.accepts(value):
            found = value.type_name if isinstance(value, TypedArray) else type(value).__name__
            raise TypeMismatchError(
                f'cannot add {found} to array of {self.element_type_name}'
            )
        super().append(value)

    def extend(self, values: Iterable[Any]) -> None:
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f'TypedArray({self.type_name}, {list.__repr__(self)})'


def to_json_value(value: Any) -> Any:
    """Convert a parsed argument into a JSON-serialisable value."""
    if isinstance(value, list):
        return [to_json_value(v) for v in value]
    if isinstance(value, (Address, Hash)):
        return value.hex()
    if isinstance(value, bytes):
        return '0x' + value.hex()
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        # Keep integers exact for JSON consumers limited to doubles
        if abs(value) > 2 ** 53:
            return str(value)
        return value
    return value
