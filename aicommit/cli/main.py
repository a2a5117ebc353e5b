"""CLI Main Entry Point"""

import sys

from aicommit.output import dim

from aicommit.cli.args import parse_args
from aicommit.cli.commands import run_commit, run_config, run_menu


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        if args.command == 'commit':
            return run_commit(args.branch, edit=args.edit, verbose=args.verbose)
        if args.command == 'config':
            return run_config()
        return run_menu()
    except (KeyboardInterrupt, EOFError):
        print(f"\n{dim('Cancelled.')}")
        return 130


if __name__ == "__main__":
    sys.exit(main())
