#!/usr/bin/env python3
"""
hexlit CLI: decode and check hex literals

Quick start
  python -m hexlit.cli decode "0xDEAD_BEEF"
  python -m hexlit.cli decode --file key.hex --length 32 --json
  python -m hexlit.cli check "01 02 03"
  python -m hexlit.cli dialects

Notes
- Separators (space _ | - " newline) and a leading 0x are ignored.
- Errors go to stderr; the exit code says what failed (see hexlit.errors).
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from .decoder import decode_hex, layout
from .dialect import DIALECTS, Dialect, get_dialect
from .errors import EXIT_OK, HexLiteralError, UsageError
from .preprocess import Layout
from .hexutil import file_or_hex


def _format_hex(data: bytes, sep: Optional[str], upper: bool) -> str:
    if sep and (len(sep) != 1 or not sep.isascii()):
        raise UsageError('--sep must be a single ASCII character')
    out = data.hex(sep) if sep else data.hex()
    return out.upper() if upper else out


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, 'rt') as f:
            return f.read().strip()
    raise UsageError('Provide a hex literal or --file')


def _dialect(args: argparse.Namespace) -> Dialect:
    return get_dialect(args.dialect)


def cmd_decode(args: argparse.Namespace) -> int:
    data = file_or_hex('input', args.text, args.file, length=args.length, dialect=_dialect(args))
    text = _format_hex(data, args.sep, args.upper)
    if args.json:
        import json
        print(json.dumps({'hex': text, 'length': len(data)}))
    else:
        print(text)
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    dialect = _dialect(args)
    text = _read_text(args)
    lay: Optional[Layout] = None
    reason: Optional[str] = None
    exit_code = EXIT_OK
    try:
        lay = layout(text, dialect)
        decode_hex(text, dialect)
    except HexLiteralError as e:
        reason = str(e)
        exit_code = e.exit_code
    ok = reason is None
    if args.json:
        import json
        print(json.dumps({
            'ok': ok,
            'dialect': dialect.name,
            'length': lay.length if ok and lay is not None else None,
            'digit_count': lay.digit_count if lay is not None else None,
            'skip_count': lay.skip_count if lay is not None else None,
            'prefix_count': lay.prefix_count if lay is not None else None,
            'reason': reason,
        }))
    else:
        print('[OK] literal decodes' if ok else '[FAIL] literal does not decode')
        print('dialect       =', dialect.name)
        if lay is not None:
            print('digit_count   =', lay.digit_count)
            print('skip_count    =', lay.skip_count)
            print('prefix_count  =', lay.prefix_count)
        if ok and lay is not None:
            print('length        =', lay.length)
        else:
            print('reason        =', reason)
    return exit_code


def cmd_dialects(args: argparse.Namespace) -> int:
    rows: List[Dict[str, Any]] = []
    for name in sorted(DIALECTS):
        d = DIALECTS[name]
        rows.append({
            'name': d.name,
            'separators': ''.join(sorted(chr(c) for c in d.separators)),
            'prefix': d.prefix.value,
        })
    if args.json:
        import json
        print(json.dumps(rows))
    else:
        for r in rows:
            print(f"{r['name']}: separators={r['separators']!r} prefix={r['prefix']}")
    return EXIT_OK


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('text', nargs='?', help='hex literal (quote it if it contains spaces)')
    p.add_argument('--file', help='read the hex literal from a file')
    p.add_argument('--dialect', default='standard', choices=sorted(DIALECTS),
                   help='separator set and 0x rule (default: standard)')


def build_parser() -> argparse.ArgumentParser:
    epilog = (
        "Examples:\n"
        "  hexlit decode 0xDEADBEEF              -> deadbeef\n"
        "  hexlit decode '01_02|03-04' --sep :   -> 01:02:03:04\n"
        "  hexlit check abc                      -> odd digit count, exit 11\n"
    )
    ap = argparse.ArgumentParser(prog='hexlit', description="hexlit CLI (decode and check hex literals)",
                                 epilog=epilog, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument('--debug', action='store_true', help='re-raise errors with a traceback')
    sub = ap.add_subparsers(dest='cmd', required=True)

    ap_d = sub.add_parser('decode', help='decode a hex literal and print canonical hex')
    _add_input_args(ap_d)
    ap_d.add_argument('--length', type=int, help='require exactly this many bytes')
    ap_d.add_argument('--sep', help='single character to put between output bytes')
    ap_d.add_argument('--upper', action='store_true', help='print uppercase hex')
    ap_d.add_argument('--json', action='store_true', help='print JSON output')
    ap_d.set_defaults(func=cmd_decode)

    ap_c = sub.add_parser('check', help='report digit/skip counts and whether a literal decodes')
    _add_input_args(ap_c)
    ap_c.add_argument('--json', action='store_true', help='print JSON output')
    ap_c.set_defaults(func=cmd_check)

    ap_l = sub.add_parser('dialects', help='list built-in dialects')
    ap_l.add_argument('--json', action='store_true', help='print JSON output')
    ap_l.set_defaults(func=cmd_dialects)
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        code = args.func(args)
    except HexLiteralError as e:
        if args.debug:
            raise
        print(f'ERROR: {e}', file=sys.stderr)
        sys.exit(e.exit_code)
    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
