"""
Command line entry point: convert a YAML file to JSON on stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .builder import ALIAS_POLICIES, ALIAS_REJECT, load_file
from .errors import BuildError, InputFileError
from .serializer import DEFAULT_INDENT, render_json
from .stack_tracker import MAX_DEPTH

logger = logging.getLogger(__name__)

PROG = 'yaxn'


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Convert a YAML document to JSON (all scalars become strings)',
    )
    parser.add_argument(
        'input_file',
        help='Path to the YAML file to convert',
    )

    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        '--indent',
        type=int,
        default=DEFAULT_INDENT,
        help=f'Indentation of the JSON output (default: {DEFAULT_INDENT})',
    )
    layout.add_argument(
        '--compact',
        action='store_true',
        help='Write the JSON output on a single line',
    )

    parser.add_argument(
        '--max-depth',
        type=_positive_int,
        default=MAX_DEPTH,
        help=f'Maximum container nesting depth (default: {MAX_DEPTH})',
    )
    parser.add_argument(
        '--aliases',
        choices=ALIAS_POLICIES,
        default=ALIAS_REJECT,
        help='Reject aliases or replace them with null (default: reject)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log the event trace and builder transitions to stderr',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # --help exits 0, usage errors exit 1
        return 0 if exc.code == 0 else 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr,
    )

    logger.debug("Converting %s", args.input_file)
    try:
        value = load_file(
            args.input_file,
            max_depth=args.max_depth,
            aliases=args.aliases,
            trace=args.verbose,
        )
    except InputFileError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
    except BuildError as e:
        print(f"{PROG}: Failed to parse: {e}", file=sys.stderr)
        return 1

    indent = None if args.compact else args.indent
    print(render_json(value, indent=indent))
    return 0


if __name__ == '__main__':
    sys.exit(main())
