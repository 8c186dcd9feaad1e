"""
Contract interface registry.

The ContractInterface holds the callable methods of one contract, keyed by
exact name, as discovered from a JSON ABI or from plain signature strings.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..diagnostics import CallDiagnostics
from ..errors import AbiTypeError, UnknownMethodError
from .abi_types import ParameterType, ScalarKind, parse_type

CONSTRUCTOR_NAME = 'constructor'

_SIGNATURE_RE = re.compile(r'([A-Za-z_][A-Za-z0-9_]*)\((.*)\)')


def _split_types(raw: str) -> List[str]:
    """Split a comma-separated type list, respecting tuple parentheses."""
    text = raw.strip()
    if not text:
        return []
    out: List[str] = []
    depth = 0
    start = 0
    for idx, ch in enumerate(text):
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth -= 1
            if depth < 0:
                raise AbiTypeError('unbalanced parentheses in type list')
        elif ch == ',' and depth == 0:
            out.append(text[start:idx].strip())
            start = idx + 1
    if depth != 0:
        raise AbiTypeError('unbalanced parentheses in type list')
    out.append(text[start:].strip())
    if any(not item for item in out):
        raise AbiTypeError('empty type entry in list')
    return out


@dataclass(frozen=True)
class MethodDescriptor:
    """A callable method: its name and ordered input types."""
    name: str
    inputs: Tuple[ParameterType, ...] = ()
    state_mutability: str = 'nonpayable'

    @property
    def signature(self) -> str:
        return f'{self.name}({",".join(p.type_string for p in self.inputs)})'

    @property
    def is_constructor(self) -> bool:
        return self.name == CONSTRUCTOR_NAME

    @classmethod
    def from_signature(cls, signature: str) -> 'MethodDescriptor':
        """Build a descriptor from text such as ``transfer(address,uint256)``."""
        m = _SIGNATURE_RE.fullmatch(signature.strip())
        if not m:
            raise AbiTypeError(f'signature must look like name(type1,type2,...): {signature}')
        inputs = tuple(parse_type(t) for t in _split_types(m.group(2)))
        return cls(name=m.group(1), inputs=inputs)

    @classmethod
    def from_abi_entry(cls, entry: Dict[str, Any], name: Optional[str] = None) -> 'MethodDescriptor':
        """Build a descriptor from one ``function``/``constructor`` ABI entry."""
        inputs = []
        for param in entry.get('inputs') or []:
            inputs.append(parse_type(param.get('type', ''), param.get('name', '')))
        mutability = entry.get('stateMutability')
        if not mutability:
            # Pre-0.5 ABIs only carry the constant/payable flags
            if entry.get('constant'):
                mutability = 'view'
            elif entry.get('payable'):
                mutability = 'payable'
            else:
                mutability = 'nonpayable'
        if name is None:
            name = CONSTRUCTOR_NAME if entry.get('type') == 'constructor' else entry.get('name', '')
        return cls(name=name, inputs=tuple(inputs), state_mutability=mutability)


class ContractInterface:
    """
    Registry of the callable methods of one contract.

    Overloaded functions are registered under their plain name for the
    first declaration and ``name0``, ``name1``, ... for later ones.
    """

    def __init__(self, diagnostics: Optional[CallDiagnostics] = None):
        self.methods: Dict[str, MethodDescriptor] = {}
        self.constructor = MethodDescriptor(CONSTRUCTOR_NAME)
        self.diagnostics = diagnostics or CallDiagnostics()

    def add_method(self, method: MethodDescriptor) -> str:
        """Register a method, renaming it if the name is taken. Returns the registered name."""
        name = method.name
        if name in self.methods:
            idx = 0
            while f'{method.name}{idx}' in self.methods:
                idx += 1
            name = f'{method.name}{idx}'
            self.diagnostics.warn_overload_renamed(method.name, name)
            method = MethodDescriptor(name, method.inputs, method.state_mutability)
        self.methods[name] = method
        for param in method.inputs:
            if param.scalar.kind == ScalarKind.TUPLE:
                self.diagnostics.warn_unsupported_parameter(name, param.type_string)
        return name

    def lookup(self, name: str) -> MethodDescriptor:
        """Resolve a method by exact name; ``constructor`` names the constructor."""
        if name == CONSTRUCTOR_NAME:
            return self.constructor
        method = self.methods.get(name)
        if method is None:
            raise UnknownMethodError(f'unknown method name {name}')
        return method

    def __contains__(self, name: str) -> bool:
        return name == CONSTRUCTOR_NAME or name in self.methods

    # =========================================================================
    # DISCOVERY
    # =========================================================================

    def discover_from_abi(self, abi: Iterable[Dict[str, Any]]) -> None:
        """Register every function and the constructor of a decoded JSON ABI."""
        for entry in abi:
            if not isinstance(entry, dict):
                raise AbiTypeError(f'ABI entry must be a JSON object, got {entry!r}')
            entry_type = entry.get('type', 'function')
            if entry_type == 'function':
                self.add_method(MethodDescriptor.from_abi_entry(entry))
            elif entry_type == 'constructor':
                self.constructor = MethodDescriptor.from_abi_entry(entry, CONSTRUCTOR_NAME)
            else:
                self.diagnostics.warn_abi_entry_skipped(entry_type, entry.get('name', ''))

    @classmethod
    def from_abi(cls, abi: Iterable[Dict[str, Any]],
                 diagnostics: Optional[CallDiagnostics] = None) -> 'ContractInterface':
        contract = cls(diagnostics)
        contract.discover_from_abi(abi)
        return contract

    @classmethod
    def from_abi_json(cls, text: str,
                      diagnostics: Optional[CallDiagnostics] = None) -> 'ContractInterface':
        """Load from ABI JSON text; a compiler artifact with an ``abi`` key also works."""
        data = json.loads(text)
        if isinstance(data, dict):
            data = data.get('abi', [])
        if not isinstance(data, list):
            raise AbiTypeError('ABI JSON must be a list of entries')
        return cls.from_abi(data, diagnostics)

    @classmethod
    def from_abi_file(cls, filepath: str,
                      diagnostics: Optional[CallDiagnostics] = None) -> 'ContractInterface':
        with open(filepath, 'r', encoding='utf-8') as f:
            text = f.read()
        return cls.from_abi_json(text, diagnostics)

    @classmethod
    def from_signatures(cls, signatures: Iterable[str],
                        diagnostics: Optional[CallDiagnostics] = None) -> 'ContractInterface':
        """Build an interface from signature strings; a ``constructor(...)`` one sets the constructor."""
        contract = cls(diagnostics)
        for signature in signatures:
            method = MethodDescriptor.from_signature(signature)
            if method.is_constructor:
                contract.constructor = method
            else:
                contract.add_method(method)
        return contract
