"""Message Generator - diff in, commit message out."""

from typing import Callable, Optional

from aicommit.config import Config
from aicommit.llm.base import (
    LLMClient,
    LLMResponse,
    CredentialError,
    GenerationError,
    strip_code_fence,
)
from aicommit.llm.openai_chat import OpenAIClient
from aicommit.prompts import PromptBuilder, PromptConfig


class MessageGenerator:
    """Turns a diff into a commit message with one LLM round trip.

    The client is only constructed once a credential is known to exist, so a
    missing key never reaches the network.
    """

    def __init__(self, config: Config,
                 client_factory: Callable[..., LLMClient] = OpenAIClient,
                 prompt_config: Optional[PromptConfig] = None):
        self.config = config
        self.client_factory = client_factory
        self.prompt_config = prompt_config or PromptConfig()
        self.last_prompt: Optional[str] = None
        self.last_response: Optional[LLMResponse] = None

    def build_prompt(self, diff: str) -> str:
        return PromptBuilder().build(diff, self.prompt_config)

    def generate(self, diff: str) -> str:
        if not self.config.has_api_key:
            raise CredentialError("OpenAI API key is not configured. Run: aicommit config")

        prompt = self.build_prompt(diff)
        client = self.client_factory(api_key=self.config.api_key)
        response = client.generate(prompt)
        self.last_prompt = prompt
        self.last_response = response

        message = strip_code_fence(response.content or "")
        if not message:
            raise GenerationError("Could not generate a commit message: the model returned no text.")
        return message
