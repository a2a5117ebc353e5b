"""Git Operations Package"""

from aicommit.git.repository import (
    GitRepository,
    GitError,
    BranchNotFoundError,
    NoCommitsError,
    CommitError,
)

__all__ = [
    "GitRepository",
    "GitError",
    "BranchNotFoundError",
    "NoCommitsError",
    "CommitError",
]
