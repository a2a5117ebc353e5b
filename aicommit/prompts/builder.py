"""Prompt Builder - Construct LLM prompts for commit message generation."""

from dataclasses import dataclass

from aicommit import COMMIT_TYPE_NAMES

VAGUE_WORDS = ("enhance", "improve", "streamline")

_EXAMPLE = """\
feat: add AI fields to Feature block in Hero collection
- Added aiPrompt and aiDescription to Feature block schema
- Updated admin UI to render new fields
- Removed unused AI config file"""


@dataclass
class PromptConfig:
    """Knobs that shape the prompt."""
    max_subject_length: int = 50
    language: str = "English"


class PromptBuilder:
    """Builds the single user prompt sent alongside the system instruction."""

    def build(self, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            self._build_intro_section(),
            self._build_rules_section(config),
            self._build_example_section(),
            self._build_diff_section(diff),
            self._build_final_instructions(),
        ]
        return "\n\n".join(sections)

    def _build_intro_section(self) -> str:
        return ("Analyze the following code changes and write a commit message "
                "following the Conventional Commits specification.")

    def _build_rules_section(self, config: PromptConfig) -> str:
        types = ", ".join(COMMIT_TYPE_NAMES)
        vague = ", ".join(f'"{w}"' for w in VAGUE_WORDS)
        return f"""Rules:
1. Use ONLY {config.language}
2. Format: type(scope): title
   - Body with a list of specific changes, one "- " bullet per change
3. Valid types: {types}
4. Title must be clear and direct (max {config.max_subject_length} characters)
5. Use imperative verbs: "add", "fix", "remove", "change"
6. Do NOT use vague words like {vague}
7. Be specific about what was changed"""

    def _build_example_section(self) -> str:
        return f"Example:\n{_EXAMPLE}"

    def _build_diff_section(self, diff: str) -> str:
        return f"Code changes:\n```diff\n{diff}\n```"

    def _build_final_instructions(self) -> str:
        return "Output only the commit message, without any additional explanation:"
