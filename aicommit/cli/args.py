"""CLI Argument Parsing"""

import argparse
import argcomplete

from aicommit import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aicommit',
        description='Generate commits automatically using AI',
        epilog='Run without arguments for an interactive menu.'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', metavar='{commit,config}')

    commit = subparsers.add_parser('commit', help='Generate a commit message and commit')
    commit.add_argument('-b', '--branch', type=str, metavar='BRANCH', help='Branch to compare against when there are no local changes')
    commit.add_argument('-e', '--edit', action='store_true', help='Open the generated message in $EDITOR before committing')
    commit.add_argument('--verbose', action='store_true', help='Show debug info (prompt size, tokens used, timings)')

    subparsers.add_parser('config', help='Configure the OpenAI API key')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
