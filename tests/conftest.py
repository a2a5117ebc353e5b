"""Shared fixtures: isolated config dir, scripted prompts, fake LLM, git sandboxes."""

import re
import shutil
import subprocess
from pathlib import Path

import pytest

from aicommit.cli.prompts import Prompter
from aicommit.config import ConfigStore, CONFIG_DIR_ENV
from aicommit.llm import LLMClient, LLMResponse

ANSI_RE = re.compile(r'\033\[[0-9;]*m')

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Never touch the real ~/.aicommit during tests."""
    config_dir = tmp_path / "aicommit-home"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    monkeypatch.delenv("AICOMMIT_TIMEOUT", raising=False)
    monkeypatch.delenv("AICOMMIT_MODEL", raising=False)
    return config_dir


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def store(isolated_config):
    return ConfigStore(isolated_config)


@pytest.fixture
def configured_store(store):
    store.set_api_key("sk-test-123")
    return store


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------

class ScriptedPrompter(Prompter):
    """Answers prompts from canned lists and records every question asked."""

    def __init__(self, selects=(), confirms=(), secrets=()):
        self.selects = list(selects)
        self.confirms = list(confirms)
        self.secrets = list(secrets)
        self.asked = []

    def select(self, message, choices, default=None):
        self.asked.append(("select", message, list(choices), default))
        answer = self.selects.pop(0)
        return default if answer is DEFAULT else answer

    def confirm(self, message, default=True):
        self.asked.append(("confirm", message, default))
        answer = self.confirms.pop(0)
        return default if answer is DEFAULT else answer

    def secret(self, message, validate=None):
        while True:
            value = self.secrets.pop(0)
            self.asked.append(("secret", message, value))
            if validate is None or validate(value) is None:
                return value


DEFAULT = object()


# ---------------------------------------------------------------------------
# Fake LLM client
# ---------------------------------------------------------------------------

class FakeClient(LLMClient):
    """Returns a canned response and records the prompts it was given."""

    def __init__(self, api_key, content, calls, error=None):
        self.api_key = api_key
        self._content = content
        self._calls = calls
        self._error = error

    @property
    def name(self) -> str:
        return "Fake"

    def generate(self, prompt):
        self._calls.append({"api_key": self.api_key, "prompt": prompt})
        if self._error is not None:
            raise self._error
        return LLMResponse(content=self._content, model="fake-model", tokens_used=42)


@pytest.fixture
def fake_llm():
    """Factory: fake_llm(content) -> (client_factory, calls)."""
    def _make(content="feat: add thing\n- Added thing", error=None):
        calls = []

        def factory(api_key, **kwargs):
            return FakeClient(api_key, content, calls, error)

        return factory, calls
    return _make


# ---------------------------------------------------------------------------
# Real git sandbox
# ---------------------------------------------------------------------------

class GitSandbox:
    """A throwaway repository driven through the real git executable."""

    def __init__(self, path: Path):
        self.path = path

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args], cwd=self.path, check=True, capture_output=True, text=True
        )
        return result.stdout

    def write(self, name: str, content: str) -> Path:
        target = self.path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        return target

    def commit_file(self, name: str, content: str, message: str) -> None:
        self.write(name, content)
        self.git("add", name)
        self.git("commit", "-q", "-m", message)

    def last_message(self) -> str:
        return self.git("log", "-1", "--format=%B").strip()

    def commit_count(self) -> int:
        try:
            return int(self.git("rev-list", "--count", "HEAD").strip())
        except subprocess.CalledProcessError:
            return 0


@pytest.fixture
def git_sandbox(tmp_path):
    path = tmp_path / "repo"
    path.mkdir()
    sandbox = GitSandbox(path)
    sandbox.git("init", "-q")
    sandbox.git("symbolic-ref", "HEAD", "refs/heads/main")
    sandbox.git("config", "user.email", "dev@example.com")
    sandbox.git("config", "user.name", "Dev")
    sandbox.git("config", "commit.gpgsign", "false")
    return sandbox
