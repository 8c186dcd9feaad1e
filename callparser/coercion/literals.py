"""
Literal coercion.

One function per scalar kind, each turning the literal text of a call
argument into a typed value for the declared scalar type. All of them are
pure and raise a CallParseError subclass on bad input.
"""

import re
from typing import Any, Callable, Dict

from ..errors import FormatError, RangeError, UnknownScalarTypeError
from ..type_system import ScalarKind, ScalarType
from .values import Address, Hash, decode_hex

_DECIMAL_RE = re.compile(r'[0-9]+')

_SIMPLE_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '0': '\0',
    '\\': '\\',
    '"': '"',
    "'": "'",
}


def int_bounds(scalar: ScalarType) -> tuple:
    """Inclusive (min, max) for an integer scalar type."""
    bits = scalar.size
    if scalar.kind == ScalarKind.UINT:
        return 0, (1 << bits) - 1
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _parse_decimal(scalar: ScalarType, text: str) -> int:
    raw = text.strip()
    negative = raw.startswith('-')
    digits = raw[1:] if negative else raw
    if not _DECIMAL_RE.fullmatch(digits):
        raise FormatError(f'invalid {scalar.name} value {text}')
    digits = digits.lstrip('0') or '0'
    # Overlong literals never reach int(), which caps string conversion length
    low, high = int_bounds(scalar)
    if len(digits) > len(str(max(-low, high))):
        raise RangeError(f'value {text} out of range for {scalar.name}')
    value = int(digits)
    return -value if negative else value


def _check_range(scalar: ScalarType, value: int, text: str) -> int:
    low, high = int_bounds(scalar)
    if value < low or value > high:
        raise RangeError(f'value {text} out of range for {scalar.name}')
    return value


def str_to_int(scalar: ScalarType, text: str) -> int:
    """Parse a signed decimal integer of the declared width."""
    if scalar.kind != ScalarKind.INT:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for signed integer')
    return _check_range(scalar, _parse_decimal(scalar, text), text)


def str_to_uint(scalar: ScalarType, text: str) -> int:
    """Parse an unsigned decimal integer of the declared width."""
    if scalar.kind != ScalarKind.UINT:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for unsigned integer')
    return _check_range(scalar, _parse_decimal(scalar, text), text)


def str_to_bool(scalar: ScalarType, text: str) -> bool:
    if scalar.kind != ScalarKind.BOOL:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for boolean')
    lowered = text.strip().lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    raise FormatError(f'invalid boolean value {text}')


def unescape(body: str) -> str:
    """Decode backslash escapes in the body of a string literal."""
    out = []
    pos = 0
    while pos < len(body):
        ch = body[pos]
        if ch != '\\' or pos + 1 >= len(body):
            out.append(ch)
            pos += 1
            continue
        code = body[pos + 1]
        if code in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[code])
            pos += 2
            continue
        width = 2 if code == 'x' else 4 if code == 'u' else 0
        digits = body[pos + 2:pos + 2 + width]
        if width and len(digits) == width and all(c in '0123456789abcdefABCDEF' for c in digits):
            out.append(chr(int(digits, 16)))
            pos += 2 + width
            continue
        # Unknown escape: keep it as written
        out.append(ch)
        pos += 1
    return ''.join(out)


def str_to_str(scalar: ScalarType, text: str) -> str:
    """Strip the quotes from a string literal and decode its escapes."""
    if scalar.kind != ScalarKind.STRING:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for string')
    body = text
    if len(body) >= 2 and body[0] in '"\'' and body[-1] == body[0]:
        body = body[1:-1]
    return unescape(body)


def str_to_address(scalar: ScalarType, text: str) -> Address:
    if scalar.kind != ScalarKind.ADDRESS:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for address')
    raw = decode_hex(text.strip(), 'address')
    if len(raw) != scalar.size:
        raise FormatError(f'address {text} must be {scalar.size} bytes, got {len(raw)}')
    return Address(raw)


def str_to_hash(scalar: ScalarType, text: str) -> Hash:
    if scalar.kind != ScalarKind.HASH:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for hash')
    raw = decode_hex(text.strip(), 'hash')
    if len(raw) != scalar.size:
        raise FormatError(f'hash {text} must be {scalar.size} bytes, got {len(raw)}')
    return Hash(raw)


def str_to_bytes(scalar: ScalarType, text: str) -> bytes:
    """Decode hex into bytes; fixed-size kinds must match the declared size."""
    if scalar.kind not in (ScalarKind.BYTES, ScalarKind.FIXED_BYTES):
        raise UnknownScalarTypeError(f'unexpected type {scalar.name} for bytes')
    raw = decode_hex(text.strip(), scalar.name)
    if scalar.kind == ScalarKind.FIXED_BYTES and len(raw) != scalar.size:
        raise FormatError(f'{scalar.name} value {text} must be {scalar.size} bytes, got {len(raw)}')
    return raw


COERCERS: Dict[ScalarKind, Callable[[ScalarType, str], Any]] = {
    ScalarKind.INT: str_to_int,
    ScalarKind.UINT: str_to_uint,
    ScalarKind.BOOL: str_to_bool,
    ScalarKind.STRING: str_to_str,
    ScalarKind.ADDRESS: str_to_address,
    ScalarKind.HASH: str_to_hash,
    ScalarKind.BYTES: str_to_bytes,
    ScalarKind.FIXED_BYTES: str_to_bytes,
}


def coerce(scalar: ScalarType, text: str) -> Any:
    """Coerce literal text to the declared scalar type."""
    coercer = COERCERS.get(scalar.kind)
    if coercer is None:
        raise UnknownScalarTypeError(f'unexpected type {scalar.name}')
    return coercer(scalar, text)
