"""
Command-line front end: parse a contract call against an ABI and print
the typed arguments.
"""

import argparse
import json
import sys
from typing import List, Optional

from .call_parser import parse_call
from .coercion import TypedArray, to_json_value
from .diagnostics import CallDiagnostics
from .errors import CallParseError
from .type_system import ContractInterface


def _describe(value) -> str:
    if isinstance(value, TypedArray):
        return f'{value.type_name} {json.dumps(to_json_value(value))}'
    return json.dumps(to_json_value(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Parse a contract call such as "transfer(0x...,100)" into typed ABI arguments.',
        allow_abbrev=False,
    )
    parser.add_argument('call', help='Call text, e.g. \'setValues([1,2,3])\'')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--abi', metavar='FILE',
                        help='JSON ABI file (or compiler artifact with an "abi" key)')
    source.add_argument('--signature', action='append', metavar='SIG',
                        help='Method signature, e.g. "transfer(address,uint256)"; may repeat')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print diagnostics, including informational notes')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    diagnostics = CallDiagnostics(verbose=args.verbose)

    try:
        if args.abi:
            contract = ContractInterface.from_abi_file(args.abi, diagnostics)
        else:
            contract = ContractInterface.from_signatures(args.signature, diagnostics)
        parsed = parse_call(contract, args.call, diagnostics)
    except CallParseError as e:
        label = 'internal error' if e.internal else 'error'
        print(f'{label} ({e.kind.value}): {e}', file=sys.stderr)
        return 2 if e.internal else 1
    except (OSError, ValueError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    finally:
        if args.verbose:
            diagnostics.print_summary()

    if args.json:
        print(json.dumps({
            'method': parsed.method.name,
            'signature': parsed.signature,
            'arguments': [to_json_value(v) for v in parsed.arguments],
        }, indent=2))
    else:
        print(parsed.signature)
        for param, value in zip(parsed.method.inputs, parsed.arguments):
            label = f'{param.name} ' if param.name else ''
            print(f'  {label}{param.type_string}: {_describe(value)}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
