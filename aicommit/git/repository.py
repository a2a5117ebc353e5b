"""Git Repository - Inspect working copy state, compute diffs, create commits."""

import subprocess
from pathlib import Path
from typing import Optional

LOCAL_PREFIX = 'refs/heads/'
REMOTES_PREFIX = 'refs/remotes/'
DEFAULT_REMOTE = 'origin'


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class BranchNotFoundError(GitError):
    """Raised when a comparison branch does not exist."""
    pass


class NoCommitsError(GitError):
    """Raised when a branch comparison is requested before the first commit."""
    pass


class CommitError(GitError):
    """Raised when staging or committing fails."""
    pass


class GitRepository:
    """Wraps the git executable for a single working copy."""

    def __init__(self, path: Optional[Path | str] = None):
        self.path = Path(path) if path is not None else Path.cwd()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.path,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or '').strip()
            raise GitError(f"Git command failed: git {' '.join(args)}\n{detail}".rstrip())
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _probe(self, *args: str) -> bool:
        """Run a git command for its exit status only."""
        try:
            self._run_git(*args)
            return True
        except GitError:
            return False

    # -- repository state ----------------------------------------------------

    def has_repository(self) -> bool:
        return self._probe('rev-parse', '--git-dir')

    def has_pending_changes(self) -> bool:
        """True when anything is modified, staged or untracked."""
        try:
            return bool(self._run_git('status', '--porcelain').strip())
        except GitError:
            return False

    def has_commits(self) -> bool:
        return self._probe('rev-parse', '--verify', '--quiet', 'HEAD')

    def current_branch(self) -> str:
        try:
            return self._run_git('branch', '--show-current').strip()
        except GitError as e:
            raise GitError(f"Could not determine current branch: {e}")

    # -- branches --------------------------------------------------------------

    def _branch_refs(self, name: str) -> list[str]:
        """Candidate full refs for a branch name, local first."""
        return [
            f'{LOCAL_PREFIX}{name}',
            f'{REMOTES_PREFIX}{DEFAULT_REMOTE}/{name}',
            f'{REMOTES_PREFIX}{name}',
        ]

    def resolve_branch(self, name: str) -> Optional[str]:
        """Return the full ref a branch name points at, or None."""
        if not name:
            return None
        for ref in self._branch_refs(name):
            if self._probe('show-ref', '--verify', '--quiet', ref):
                return ref
        return None

    def branch_exists(self, name: str) -> bool:
        return self.resolve_branch(name) is not None

    @staticmethod
    def _short_name(ref: str) -> str:
        origin_prefix = f'{REMOTES_PREFIX}{DEFAULT_REMOTE}/'
        for prefix in (LOCAL_PREFIX, origin_prefix, REMOTES_PREFIX):
            if ref.startswith(prefix):
                return ref[len(prefix):]
        return ref

    def list_comparable_branches(self) -> list[str]:
        """Branches the current position can be compared against.

        Local and remote-tracking branches with the ``origin/`` prefix
        stripped, without duplicates, symbolic HEAD entries or the current
        branch. Empty before the first commit and on any git failure.
        """
        try:
            if not self.has_commits():
                return []
            output = self._run_git(
                'for-each-ref', '--format=%(refname)', 'refs/heads', 'refs/remotes'
            )
            current = self.current_branch()
        except GitError:
            return []

        names: list[str] = []
        for line in output.splitlines():
            ref = line.strip()
            if not ref:
                continue
            name = self._short_name(ref)
            if name == 'HEAD' or name.endswith('/HEAD'):
                continue
            if name == current or name in names:
                continue
            names.append(name)

        return [name for name in names if self.branch_exists(name)]

    # -- diff ------------------------------------------------------------------

    def get_staged_diff(self) -> str:
        return self._run_git('diff', '--cached')

    def get_working_diff(self) -> str:
        return self._run_git('diff')

    def diff(self, target: Optional[str] = None) -> str:
        """Return the changes to describe.

        Staged changes win, then unstaged changes; ``target`` is only used
        when the working tree is clean. ``None`` means local changes only.
        """
        staged = self.get_staged_diff()
        if staged.strip():
            return staged

        working = self.get_working_diff()
        if working.strip():
            return working

        if target is None:
            return ''

        ref = self.resolve_branch(target)
        has_commits = self.has_commits()
        # An unborn HEAD has no branches to find; report the root cause
        if ref is None and has_commits:
            raise BranchNotFoundError(f'Branch "{target}" does not exist. Use a valid branch.')

        if not has_commits:
            raise NoCommitsError("Repository has no commits yet. Make the first commit manually.")

        return self._run_git('diff', f'{ref}...HEAD')

    # -- commit ----------------------------------------------------------------

    def create_commit(self, message: str) -> None:
        """Stage everything (including untracked files) and commit."""
        try:
            self._run_git('add', '-A')
            self._run_git('commit', '-m', message)
        except GitError as e:
            raise CommitError(f"Commit failed: {e}") from e
