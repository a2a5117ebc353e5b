"""CLI Commands - the commit, config and menu flows."""

import time
from typing import Callable, Optional

from aicommit.config import ConfigStore, ConfigError
from aicommit.git import GitRepository, GitError, NoCommitsError
from aicommit.llm import (
    LLMClient,
    LLMError,
    InvalidCredentialError,
    MessageGenerator,
    OpenAIClient,
    validate_commit_message,
)
from aicommit.output import (
    Spinner, bold, dim, info, note, success, warning, colorize_commit_type,
    print_error, print_info, print_rule, print_success, print_warning,
)

from aicommit.cli.prompts import Choice, Prompter, TerminalPrompter
from aicommit.cli.utils import edit_message, validate_api_key

PREFERRED_BRANCH = "main"
LOCAL_ONLY_LABEL = "Local changes only (do not compare with a branch)"


def _display_message(message: str) -> None:
    """Show the commit message between horizontal rules."""
    print(f"\n{success('Generated commit message:')}")
    print_rule()
    print(colorize_commit_type(message))
    print_rule()


def _print_first_commit_hint() -> None:
    print(f"\n{note('Tip: for a new repository, make the first commit manually:')}")
    print(info("   git add -A"))
    print(info('   git commit -m "feat: initial commit"'))


def _print_verbose_stats(generator: MessageGenerator, timings: dict) -> None:
    prompt = generator.last_prompt or ""
    response = generator.last_response
    print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
    if response is not None:
        print(dim(f"  Response: {response.tokens_used} tokens from {response.model}"))
    print(dim("  Timings: " + ", ".join(f"{k}={v:.2f}s" for k, v in timings.items())))


def _resolve_target(repo: GitRepository, prompter: Prompter,
                    current: str, target: Optional[str]) -> Optional[str]:
    """Pick the comparison branch. None means local changes only."""
    if target:
        return target

    branches = [b for b in repo.list_comparable_branches() if b != current]
    if not branches:
        print_warning("No other branches available for comparison.")
        print_info("Checking uncommitted local changes...")
        return None

    default = PREFERRED_BRANCH if PREFERRED_BRANCH in branches else branches[0]
    choices = [Choice(b, b) for b in branches] + [Choice(LOCAL_ONLY_LABEL, None)]
    return prompter.select("Choose the branch to compare against:", choices, default=default)


def _commit_flow(config, repo: GitRepository, prompter: Prompter,
                 client_factory: Callable[..., LLMClient], target: Optional[str],
                 edit: bool, verbose: bool) -> int:
    if not repo.has_repository():
        print_error("Not inside a git repository")
        return 1

    current = repo.current_branch()
    print_info(f"Current branch: {bold(current or '(detached)')}")

    target = _resolve_target(repo, prompter, current, target)
    if target:
        print_info(f"Comparing with: {bold(target)}")
    else:
        print_info("Analyzing local changes")

    timings = {}
    t0 = time.time()
    try:
        with Spinner("Reading changes..."):
            diff = repo.diff(target)
    except GitError as e:
        print_error("Could not read changes:")
        print(warning(f"   {e}"))
        if isinstance(e, NoCommitsError):
            _print_first_commit_hint()
        return 1
    timings['git'] = time.time() - t0

    if not diff.strip():
        print_warning("No changes found.")
        return 0

    print(success(f"Changes found ({len(diff.splitlines())} lines)"))

    generator = MessageGenerator(config, client_factory=client_factory)
    t0 = time.time()
    with Spinner("Generating commit message with AI..."):
        message = generator.generate(diff)
    timings['generate'] = time.time() - t0

    if verbose:
        _print_verbose_stats(generator, timings)

    _display_message(message)
    is_valid, reason = validate_commit_message(message)
    if not is_valid:
        print_warning(reason)

    if edit:
        edited = edit_message(message)
        if edited and edited != message:
            message = edited
            _display_message(message)

    if not prompter.confirm("Commit with this message?", default=True):
        print_warning("Commit cancelled.")
        return 0

    with Spinner("Committing..."):
        repo.create_commit(message)
    print_success("Commit created successfully!")
    return 0


def run_commit(target: Optional[str] = None, *,
               store: Optional[ConfigStore] = None,
               repo: Optional[GitRepository] = None,
               prompter: Optional[Prompter] = None,
               client_factory: Callable[..., LLMClient] = OpenAIClient,
               edit: bool = False,
               verbose: bool = False) -> int:
    """Generate a commit message from the current changes and optionally commit.

    Returns:
        int: Exit code
    """
    config = (store or ConfigStore()).read()
    if not config.has_api_key:
        print_error("OpenAI API key is not configured.")
        print(warning("Run: aicommit config"))
        return 1

    try:
        return _commit_flow(
            config,
            repo or GitRepository(),
            prompter or TerminalPrompter(),
            client_factory,
            target,
            edit,
            verbose,
        )
    except InvalidCredentialError as e:
        print_error(str(e))
        print(warning("Run: aicommit config"))
        return 1
    except (GitError, LLMError) as e:
        print_error(str(e))
        return 1


def run_config(*, store: Optional[ConfigStore] = None,
               prompter: Optional[Prompter] = None) -> int:
    """Store the OpenAI API key, asking before replacing an existing one."""
    store = store or ConfigStore()
    prompter = prompter or TerminalPrompter()

    print(f"\n{bold('OpenAI API key setup')}\n")
    if store.read().has_api_key:
        print_success("API key already configured")
        if not prompter.confirm("Reconfigure the API key?", default=False):
            return 0

    api_key = prompter.secret("Enter your OpenAI API key:", validate=validate_api_key)
    try:
        store.set_api_key(api_key.strip())
    except ConfigError as e:
        print_error(str(e))
        return 1

    print_success(f"API key configured successfully! {dim(f'({store.path})')}")
    return 0


MENU_CHOICES = [
    Choice("Generate and commit", "commit"),
    Choice("Configure API key", "config"),
    Choice("Exit", "exit"),
]


def run_menu(*, store: Optional[ConfigStore] = None,
             prompter: Optional[Prompter] = None, **commit_options) -> int:
    """Interactive entry point used when no subcommand is given."""
    prompter = prompter or TerminalPrompter()
    print(f"\n{bold('AICommit - AI commit message generator')}\n")

    action = prompter.select("What do you want to do?", MENU_CHOICES, default="commit")
    if action == "commit":
        return run_commit(store=store, prompter=prompter, **commit_options)
    if action == "config":
        return run_config(store=store, prompter=prompter)
    print(dim("Bye!"))
    return 0
