"""OpenAI Chat Completions Client"""

import os

from openai import APIError, AuthenticationError, OpenAI

from aicommit.llm.base import (
    LLMClient,
    LLMResponse,
    GenerationError,
    InvalidCredentialError,
    SYSTEM_PROMPT,
)


class OpenAIClient(LLMClient):
    """Single-shot chat completion client. No retries, no streaming."""

    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_TIMEOUT = 60.0
    MAX_TOKENS = 500
    TEMPERATURE = 0.3

    def __init__(self, api_key: str, model: str | None = None, timeout: float | None = None):
        self.api_key = api_key
        self.model = model or os.environ.get("AICOMMIT_MODEL") or self.DEFAULT_MODEL
        self.timeout = timeout if timeout is not None else self._timeout_from_env()
        self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)

    @classmethod
    def _timeout_from_env(cls) -> float:
        raw = os.environ.get("AICOMMIT_TIMEOUT")
        if not raw:
            return cls.DEFAULT_TIMEOUT
        try:
            value = float(raw)
        except ValueError:
            return cls.DEFAULT_TIMEOUT
        return value if value > 0 else cls.DEFAULT_TIMEOUT

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def generate(self, prompt: str) -> LLMResponse:
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
            )
        except AuthenticationError:
            raise InvalidCredentialError("Invalid or expired OpenAI API key.")
        except APIError as e:
            raise GenerationError(f"Error generating message with AI: {e.message}")

        content = ""
        if completion.choices:
            content = (completion.choices[0].message.content or "").strip()

        usage = getattr(completion, "usage", None)
        return LLMResponse(
            content=content,
            model=getattr(completion, "model", None) or self.model,
            tokens_used=getattr(usage, "total_tokens", 0) or 0,
        )
