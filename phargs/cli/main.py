"""Main CLI entry point for phargs."""

import argparse
import sys
from typing import Optional

from .commands import run_commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the phargs CLI."""
    parser = argparse.ArgumentParser(
        prog='phargs',
        description='Multiple command runner in one line',
        epilog='Example: phargs -w a,b -- cp {}.txt [{}.bak] dest/'
    )

    parser.add_argument(
        '-w', '--wlist',
        type=str,
        metavar='VALUES',
        help='Comma separated values substituted for {}'
    )
    parser.add_argument(
        '-n', '--dry-run',
        action='store_true',
        default=None,
        help='Print the commands instead of running them'
    )
    parser.add_argument(
        '--config',
        type=str,
        metavar='FILE',
        help='Path to YAML file with default settings'
    )
    parser.add_argument(
        '--sibling',
        action='store_true',
        default=None,
        help='Run the program from the directory of this executable if it exists there'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set log level (default: info)'
    )
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='Program followed by argument templates'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return run_commands(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
