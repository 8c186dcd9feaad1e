"""
Diagnostic/warning system for the call parser.

Collects warnings and informational notes produced while loading a
contract interface and resolving a call, so that a command-line front end
can explain what the parser did with a given ABI.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List


class DiagnosticSeverity(Enum):
    """Severity levels for parser diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    construct: str = ''  # e.g., 'overload', 'abi-entry', 'method'

    def __str__(self) -> str:
        return f'[{self.severity.value}] {self.message} ({self.code})'


class CallDiagnostics:
    """
    Collects diagnostics while an ABI is loaded and a call is parsed.

    Usage:
        diag = CallDiagnostics()
        contract = ContractInterface.from_abi_file('erc20.json', diagnostics=diag)
        parse_call(contract, 'transfer(0x..., 1)', diagnostics=diag)
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_overload_renamed(self, name: str, renamed: str) -> None:
        """Warn that an overloaded method is only reachable under a new name."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Overloaded method "{name}" is available as "{renamed}".',
            construct='overload',
        ))

    def warn_abi_entry_skipped(self, entry_type: str, name: str = '') -> None:
        """Warn that an ABI entry was ignored because it cannot be called."""
        label = f'{entry_type} "{name}"' if name else entry_type
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'ABI entry {label} was skipped (not callable).',
            construct='abi-entry',
        ))

    def warn_unsupported_parameter(self, method: str, type_string: str) -> None:
        """Warn that a method takes a parameter type literals cannot express."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message=f'Method "{method}" takes unsupported parameter type {type_string}.',
            construct='parameter',
        ))

    def info_method_resolved(self, signature: str) -> None:
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'Resolved method {signature}',
            construct='method',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nParser warnings ({len(warnings)}):', file=file)
            for w in warnings:
                print(f'  {w}', file=file)

        if infos and self._verbose:
            print(f'\nParser info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

