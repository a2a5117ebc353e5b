"""LLM Base Classes and Shared Code"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from aicommit import COMMIT_TYPE_NAMES

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

SYSTEM_PROMPT = ("You are an expert at writing commit messages that follow "
                 "Conventional Commits, in English. Be precise and direct.")


def validate_commit_message(content: str) -> tuple[bool, str]:
    """Validate that response looks like a proper commit message."""
    if not content or len(content.strip()) < 10:
        return False, "Response too short"

    pattern = rf'^({TYPES_PATTERN})(\(.+\))?!?:'
    first_line = content.strip().split('\n')[0]

    if not re.match(pattern, first_line):
        return False, f"Missing conventional commit format. Got: {first_line[:50]}"

    return True, ""


def strip_code_fence(text: str) -> str:
    """Trim the response and unwrap it if the whole thing sits in a ``` fence."""
    text = text.strip()
    lines = text.split('\n')
    if len(lines) >= 2 and lines[0].startswith('```') and lines[-1].strip() == '```':
        return '\n'.join(lines[1:-1]).strip()
    return text


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class CredentialError(LLMError):
    """No API key is configured."""
    pass


class GenerationError(LLMError):
    """The service call failed or returned nothing usable."""
    pass


class InvalidCredentialError(GenerationError):
    """The service rejected the API key."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, prompt: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
