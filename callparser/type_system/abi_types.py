"""
ABI parameter types and the introspection helpers built on them.

A ParameterType is a scalar type wrapped in zero or more array levels.
Dimensions are stored innermost first, so ``uint8[][3]`` (a fixed list of
three dynamic uint8 lists) has dimensions ``(None, 3)``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..errors import AbiTypeError


class ScalarKind(Enum):
    """The non-array element kinds a parameter can have."""
    INT = 'int'
    UINT = 'uint'
    BOOL = 'bool'
    STRING = 'string'
    ADDRESS = 'address'
    HASH = 'hash'
    BYTES = 'bytes'
    FIXED_BYTES = 'fixed_bytes'
    TUPLE = 'tuple'


INTEGER_KINDS = (ScalarKind.INT, ScalarKind.UINT)
HEX_KINDS = (ScalarKind.ADDRESS, ScalarKind.HASH, ScalarKind.BYTES, ScalarKind.FIXED_BYTES)

ADDRESS_LENGTH = 20
HASH_LENGTH = 32

_INT_RE = re.compile(r'(u?)int([0-9]*)')
_FIXED_BYTES_RE = re.compile(r'bytes([0-9]+)')
_DIMENSION_RE = re.compile(r'\[([0-9]*)\]')


@dataclass(frozen=True)
class ScalarType:
    """A scalar kind plus its size (bits for integers, bytes otherwise)."""
    kind: ScalarKind
    size: int = 0

    @property
    def name(self) -> str:
        """Canonical ABI spelling of the scalar type."""
        if self.kind in INTEGER_KINDS:
            return f'{self.kind.value}{self.size}'
        if self.kind == ScalarKind.FIXED_BYTES:
            return f'bytes{self.size}'
        return self.kind.value

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ParameterType:
    """A declared input type: scalar plus array dimensions (innermost first)."""
    scalar: ScalarType
    dimensions: Tuple[Optional[int], ...] = ()
    name: str = ''

    @property
    def type_string(self) -> str:
        suffix = ''.join(f'[{size}]' if size is not None else '[]' for size in self.dimensions)
        return f'{self.scalar.name}{suffix}'

    def __str__(self) -> str:
        return self.type_string


# =============================================================================
# INTROSPECTION
# =============================================================================

def base_type(param: ParameterType) -> ScalarType:
    """Strip every array level and return the scalar element type."""
    return param.scalar


def array_depth(param: ParameterType) -> int:
    """Number of array levels wrapping the scalar (0 for a plain scalar)."""
    return len(param.dimensions)


def array_length(param: ParameterType, level: int) -> Optional[int]:
    """
    Declared fixed length at a nesting level, or None for a dynamic array.

    Level 1 is the innermost array, level array_depth(param) the outermost.
    """
    if level < 1 or level > len(param.dimensions):
        return None
    return param.dimensions[level - 1]


# =============================================================================
# TYPE STRING PARSING
# =============================================================================

def parse_scalar(text: str) -> ScalarType:
    """Parse a scalar ABI type name such as ``uint256`` or ``bytes32``."""
    if text == 'bool':
        return ScalarType(ScalarKind.BOOL)
    if text == 'string':
        return ScalarType(ScalarKind.STRING)
    if text == 'address':
        return ScalarType(ScalarKind.ADDRESS, ADDRESS_LENGTH)
    if text == 'hash':
        return ScalarType(ScalarKind.HASH, HASH_LENGTH)
    if text == 'bytes':
        return ScalarType(ScalarKind.BYTES)
    if text == 'tuple' or text.startswith('('):
        return ScalarType(ScalarKind.TUPLE)

    m_int = _INT_RE.fullmatch(text)
    if m_int:
        bits = int(m_int.group(2) or '256')
        if bits < 8 or bits > 256 or bits % 8 != 0:
            raise AbiTypeError(f'invalid integer width in type {text}')
        kind = ScalarKind.UINT if m_int.group(1) else ScalarKind.INT
        return ScalarType(kind, bits)

    m_bytes = _FIXED_BYTES_RE.fullmatch(text)
    if m_bytes:
        size = int(m_bytes.group(1))
        if size < 1 or size > 32:
            raise AbiTypeError(f'invalid fixed bytes size in type {text}')
        return ScalarType(ScalarKind.FIXED_BYTES, size)

    raise AbiTypeError(f'unsupported ABI type {text}')


def parse_type(text: str, name: str = '') -> ParameterType:
    """Parse a full ABI type string, including any array suffixes."""
    raw = (text or '').strip()
    if not raw:
        raise AbiTypeError('type cannot be empty')

    bracket = raw.find('[')
    if raw.startswith('('):
        # Inline tuple: skip past the matching parenthesis before array suffixes
        depth = 0
        for idx, ch in enumerate(raw):
            if ch == '(':
                depth += 1
            elif ch == ')':
                depth -= 1
                if depth == 0:
                    bracket = raw.find('[', idx)
                    break
    scalar_text = raw if bracket < 0 else raw[:bracket]
    suffix = '' if bracket < 0 else raw[bracket:]

    dimensions = []
    pos = 0
    while pos < len(suffix):
        m_dim = _DIMENSION_RE.match(suffix, pos)
        if not m_dim:
            raise AbiTypeError(f'malformed array suffix in type {raw}')
        size = m_dim.group(1)
        if size and int(size) == 0:
            raise AbiTypeError(f'zero-length fixed array in type {raw}')
        dimensions.append(int(size) if size else None)
        pos = m_dim.end()

    return ParameterType(parse_scalar(scalar_text), tuple(dimensions), name)
