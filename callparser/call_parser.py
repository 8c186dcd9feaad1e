"""
Top-level entry point: call text in, typed arguments out.
"""

from typing import Optional

from .assembler import ArgumentAssembler, ParsedCall
from .diagnostics import CallDiagnostics
from .lexer import Lexer
from .parser import CallExpression, CallWalker, Parser
from .type_system import ContractInterface


def parse_call_text(text: str) -> CallExpression:
    """Tokenize and parse call text into a CallExpression (no ABI needed)."""
    tokens = Lexer(text).tokenize()
    return Parser(tokens).parse()


def parse_call(
    contract: ContractInterface,
    text: str,
    diagnostics: Optional[CallDiagnostics] = None,
) -> ParsedCall:
    """
    Parse call text such as ``transfer(0x5FfC...,100)`` against a contract.

    Args:
        contract: Interface whose methods the call may name
        text: The call text typed by the user
        diagnostics: Optional collector for informational notes

    Returns:
        The resolved method and its typed arguments

    Raises:
        CallParseError: the first problem found in the text
    """
    call = parse_call_text(text)
    assembler = ArgumentAssembler(contract, diagnostics)
    CallWalker().walk(assembler, call)
    return assembler.result()
