"""Interactive prompts, kept apart from the flow logic so flows can be scripted."""

import getpass
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from aicommit.output import bold, dim, info, print_error

# Returns an error message for invalid input, None when the input is fine
Validator = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Choice:
    """A menu entry: what the user sees and what the prompt returns."""
    label: str
    value: Any


class Prompter(ABC):
    """Asks the user questions. Flows only talk to this interface."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any:
        pass

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        pass

    @abstractmethod
    def secret(self, message: str, validate: Optional[Validator] = None) -> str:
        pass


class TerminalPrompter(Prompter):
    """Prompts on stdin/stdout. Ctrl-C and EOF propagate to the caller."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 secret_fn: Callable[[str], str] = getpass.getpass):
        self._input = input_fn
        self._secret = secret_fn

    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any:
        if not choices:
            raise ValueError("select() needs at least one choice")
        values = [c.value for c in choices]
        default_idx = values.index(default) if default in values else 0

        print(bold(message))
        for i, choice in enumerate(choices, 1):
            marker = info('›') if i - 1 == default_idx else ' '
            print(f"{marker} {info(f'[{i}]')} {choice.label}")

        while True:
            raw = self._input(f"Select [1-{len(choices)}] {dim(f'(Enter for {default_idx + 1})')}: ").strip()
            if not raw:
                return choices[default_idx].value
            try:
                idx = int(raw) - 1
            except ValueError:
                idx = -1
            if 0 <= idx < len(choices):
                return choices[idx].value
            print(f"Enter 1-{len(choices)}")

    def confirm(self, message: str, default: bool = True) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            raw = self._input(f"{message} {dim(hint)} ").strip().lower()
            if not raw:
                return default
            if raw in ('y', 'yes'):
                return True
            if raw in ('n', 'no'):
                return False
            print("Answer y or n")

    def secret(self, message: str, validate: Optional[Validator] = None) -> str:
        while True:
            value = self._secret(f"{message} ")
            problem = validate(value) if validate else None
            if problem is None:
                return value
            print_error(problem)
