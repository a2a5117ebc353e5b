"""Prompt Construction Package"""

from aicommit.prompts.builder import PromptBuilder, PromptConfig, VAGUE_WORDS

__all__ = ["PromptBuilder", "PromptConfig", "VAGUE_WORDS"]
