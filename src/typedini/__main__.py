# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/19 22:10:30
# @Author : Kariko Lin

"""`python -m typedini example.ini Section1 var1 --type int`

Or `--dump` to have a look at what the parser actually got.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import yaml

from .ini import IniParser, IniParserError, ValueKind


def _build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='typedini',
        description='Read a typed value from an INI file.')
    ap.add_argument('file', help='INI file to read')
    ap.add_argument('section', nargs='?')
    ap.add_argument('key', nargs='?')
    ap.add_argument(
        '-t', '--type', dest='kind', default=ValueKind.STR.value,
        choices=[i.value for i in ValueKind],
        help='how to interpret the value (default: %(default)s)')
    ap.add_argument('--encoding', default=None, help='file encoding')
    ap.add_argument(
        '--dump', action='store_true',
        help='print every section as YAML instead')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = _build_argparser()
    args = ap.parse_args(argv)
    if not args.dump and (args.section is None or args.key is None):
        ap.error('section and key are required unless --dump is given')

    logging.basicConfig(format='[%(asctime)s] %(levelname)s: %(message)s')
    logging.getLogger().setLevel(
        logging.DEBUG if args.verbose else logging.WARNING)

    try:
        doc = IniParser(args.file, args.encoding).read()
        if args.dump:
            yaml.safe_dump(
                {name: sect.to_dict() for name, sect in doc.items()},
                sys.stdout, allow_unicode=True, sort_keys=False)
            return 0
        value = doc.get_value(args.section, args.key, args.kind)
    except IniParserError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    print(f'{args.section}, {args.key}: {value}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
