"""
Argument assembler.

ArgumentAssembler listens to the structural events of one parsed call and
builds the typed argument list for the resolved method. The first error
is kept and every later event becomes a no-op, so the walk always runs to
completion and the error is reported once, by result().
"""

import functools
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..coercion import coerce
from ..diagnostics import CallDiagnostics
from ..errors import (
    ArrayShapeError,
    CallParseError,
    MissingArgumentsError,
    TooManyArgumentsError,
    UnknownMethodError,
    UnknownScalarTypeError,
)
from ..parser import CallListener, LiteralKind
from ..type_system import (
    ContractInterface,
    MethodDescriptor,
    ParameterType,
    HEX_KINDS,
    INTEGER_KINDS,
    ScalarKind,
    array_depth,
    base_type,
)
from .array_stack import ArrayStack

# Declared scalar kinds each literal kind may be coerced into
LITERAL_TARGETS = {
    LiteralKind.INT: INTEGER_KINDS,
    LiteralKind.HEX: HEX_KINDS,
    LiteralKind.BOOL: (ScalarKind.BOOL,),
    LiteralKind.STRING: (ScalarKind.STRING,),
}


@dataclass
class ParsedCall:
    """A resolved method and its typed arguments, in declaration order."""
    method: MethodDescriptor
    arguments: List[Any] = field(default_factory=list)

    @property
    def signature(self) -> str:
        return self.method.signature


def _guarded(handler):
    """Skip the handler once an error is recorded; record the first error raised."""

    @functools.wraps(handler)
    def wrapper(self, *args):
        if self.error is not None:
            return
        try:
            handler(self, *args)
        except CallParseError as e:
            self.error = e

    return wrapper


class ArgumentAssembler(CallListener):
    """
    Builds the argument list for one call from its structural events.

    Usage:
        assembler = ArgumentAssembler(contract)
        CallWalker().walk(assembler, call_expression)
        parsed = assembler.result()
    """

    def __init__(self, contract: ContractInterface, diagnostics: Optional[CallDiagnostics] = None):
        self.contract = contract
        self.diagnostics = diagnostics
        self.method: Optional[MethodDescriptor] = None
        self.arg_index = 0
        self.stack = ArrayStack()
        self.args: List[Any] = []
        self.error: Optional[CallParseError] = None

    def current_parameter(self) -> ParameterType:
        return self.method.inputs[self.arg_index]

    # =========================================================================
    # EVENT HANDLERS
    # =========================================================================

    @_guarded
    def on_function_name(self, name: str) -> None:
        self.method = self.contract.lookup(name)
        if self.diagnostics is not None:
            self.diagnostics.info_method_resolved(self.method.signature)

    @_guarded
    def on_argument_start(self) -> None:
        # Array elements are arguments too; only top-level ones count
        if self.stack.is_open:
            return
        expected = len(self.method.inputs)
        if self.arg_index >= expected:
            raise TooManyArgumentsError(
                f'too many arguments for {self.method.signature} (expected {expected})'
            )
        self.stack.reset()

    @_guarded
    def on_argument_end(self) -> None:
        if self.stack.is_open:
            return
        self.stack.reset()
        self.arg_index += 1

    @_guarded
    def on_scalar_literal(self, kind: LiteralKind, text: str) -> None:
        param = self.current_parameter()
        scalar = base_type(param)
        if scalar.kind not in LITERAL_TARGETS[kind]:
            raise UnknownScalarTypeError(
                f'unexpected type {scalar.name} for {kind.value} literal {text}'
            )
        value = coerce(scalar, text)

        if self.stack.is_open:
            self.stack.push_scalar(value)
            return
        if array_depth(param) > 0:
            raise ArrayShapeError(
                f'argument {self.arg_index} of {self.method.signature} '
                f'expects {param.type_string}, got a scalar'
            )
        self.args.append(value)

    @_guarded
    def on_array_start(self) -> None:
        param = self.current_parameter()
        depth = array_depth(param)
        if depth == 0:
            raise ArrayShapeError(
                f'argument {self.arg_index} of {self.method.signature} '
                f'expects {param.type_string}, got an array'
            )
        self.stack.open_level(base_type(param), depth, param.dimensions)

    @_guarded
    def on_array_end(self) -> None:
        finished = self.stack.close_level()
        if finished is not None:
            self.args.append(finished)

    # =========================================================================
    # RESULT
    # =========================================================================

    def result(self) -> ParsedCall:
        """Return the parsed call, or raise the first error encountered."""
        if self.error is not None:
            raise self.error
        if self.method is None:
            raise UnknownMethodError('no method name given')
        expected = len(self.method.inputs)
        if self.arg_index < expected:
            raise MissingArgumentsError(
                f'not enough arguments for {self.method.signature} '
                f'(expected {expected}, got {self.arg_index})'
            )
        return ParsedCall(self.method, list(self.args))
