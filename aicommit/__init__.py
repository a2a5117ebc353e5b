"""
AICommit

AI-generated Conventional Commits messages from git changes.
"""

__version__ = "1.0.0"

# Commit types the model is allowed to use
# Used by: prompts/builder.py, llm/base.py (validation), output (colors)
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'test': 'Adding or updating tests',
    'chore': 'Maintenance tasks, dependencies, tooling',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
