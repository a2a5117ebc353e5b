"""Command Line Interface Package"""

from aicommit.cli.main import main

__all__ = ["main"]
