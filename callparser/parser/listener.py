"""
Structural event interface and tree walker.

CallWalker traverses a CallExpression strictly left to right and reports
each construct to a CallListener, in the order it appears in the source:

    on_function_name
    for each argument:
        on_argument_start
        on_scalar_literal            (scalar argument)
        on_array_start ... on_array_end   (array argument; elements are
                                           themselves argument events)
        on_argument_end
"""

from .ast_nodes import Argument, ArrayLiteral, CallExpression, LiteralKind, ScalarLiteral


class CallListener:
    """Receives structural events from CallWalker. All handlers default to no-ops."""

    def on_function_name(self, name: str) -> None:
        pass

    def on_argument_start(self) -> None:
        pass

    def on_argument_end(self) -> None:
        pass

    def on_scalar_literal(self, kind: LiteralKind, text: str) -> None:
        pass

    def on_array_start(self) -> None:
        pass

    def on_array_end(self) -> None:
        pass


class CallWalker:
    """Depth-first walker that emits CallListener events for a CallExpression."""

    def walk(self, listener: CallListener, call: CallExpression) -> None:
        listener.on_function_name(call.function_name)
        for arg in call.arguments:
            self.walk_argument(listener, arg)

    def walk_argument(self, listener: CallListener, arg: Argument) -> None:
        listener.on_argument_start()
        value = arg.value
        if isinstance(value, ArrayLiteral):
            listener.on_array_start()
            for element in value.elements:
                self.walk_argument(listener, element)
            listener.on_array_end()
        elif isinstance(value, ScalarLiteral):
            listener.on_scalar_literal(value.kind, value.text)
        listener.on_argument_end()
