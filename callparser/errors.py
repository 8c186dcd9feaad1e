"""
Error taxonomy for contract-call parsing.

Every failure the parser can report is a CallParseError carrying an
ErrorKind. Input errors are surfaced verbatim to the caller; internal
errors (TypeMismatchError, UnhandledTypeError) indicate a defect in the
parser itself rather than in the call text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Stable codes for every error the parser can report."""
    UNKNOWN_METHOD = 'unknown-method'
    TOO_MANY_ARGUMENTS = 'too-many-arguments'
    MISSING_ARGUMENTS = 'missing-arguments'
    UNKNOWN_SCALAR_TYPE = 'unknown-scalar-type'
    FORMAT = 'format'
    RANGE = 'range'
    ARRAY_SHAPE = 'array-shape'
    ARRAY_LENGTH = 'array-length'
    SYNTAX = 'syntax'
    ABI_TYPE = 'abi-type'
    TYPE_MISMATCH = 'type-mismatch'
    UNHANDLED_TYPE = 'unhandled-type'


class CallParseError(Exception):
    """Base class for all call parsing errors."""

    kind: ErrorKind = ErrorKind.FORMAT
    internal = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownMethodError(CallParseError):
    kind = ErrorKind.UNKNOWN_METHOD


class TooManyArgumentsError(CallParseError):
    kind = ErrorKind.TOO_MANY_ARGUMENTS


class MissingArgumentsError(CallParseError):
    kind = ErrorKind.MISSING_ARGUMENTS


class UnknownScalarTypeError(CallParseError):
    """A literal was supplied for a parameter of an incompatible type."""
    kind = ErrorKind.UNKNOWN_SCALAR_TYPE


class FormatError(CallParseError):
    """Malformed literal (bad hex, wrong address length, not a boolean...)."""
    kind = ErrorKind.FORMAT


class RangeError(CallParseError):
    """Integer literal outside the declared width."""
    kind = ErrorKind.RANGE


class ArrayShapeError(CallParseError):
    """Array nesting in the call text disagrees with the declared type."""
    kind = ErrorKind.ARRAY_SHAPE


class ArrayLengthError(CallParseError):
    """Fixed-length array given the wrong number of elements."""
    kind = ErrorKind.ARRAY_LENGTH


class AbiTypeError(CallParseError):
    """An ABI type string could not be understood."""
    kind = ErrorKind.ABI_TYPE


class CallSyntaxError(CallParseError):
    """The call text does not match the call-expression grammar."""
    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None:
            message = f'{message} at line {line}, column {column}'
        super().__init__(message)
        self.line = line
        self.column = column


class InternalError(CallParseError):
    """Base class for errors that indicate a parser defect."""
    internal = True


class TypeMismatchError(InternalError):
    kind = ErrorKind.TYPE_MISMATCH


class UnhandledTypeError(InternalError):
    kind = ErrorKind.UNHANDLED_TYPE
