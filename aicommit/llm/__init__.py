"""LLM Client Package"""

from aicommit.llm.base import (
    LLMClient,
    LLMResponse,
    LLMError,
    CredentialError,
    GenerationError,
    InvalidCredentialError,
    SYSTEM_PROMPT,
    strip_code_fence,
    validate_commit_message,
)
from aicommit.llm.openai_chat import OpenAIClient
from aicommit.llm.generator import MessageGenerator

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "CredentialError",
    "GenerationError",
    "InvalidCredentialError",
    "OpenAIClient",
    "MessageGenerator",
    "SYSTEM_PROMPT",
    "strip_code_fence",
    "validate_commit_message",
]
