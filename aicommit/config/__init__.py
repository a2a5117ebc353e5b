"""Configuration Store

Persists the OpenAI API key to ``~/.aicommit/config.json``.
"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

CONFIG_DIR_NAME = ".aicommit"
CONFIG_FILENAME = "config.json"
CONFIG_DIR_ENV = "AICOMMIT_CONFIG_DIR"


class ConfigError(Exception):
    """Raised when the configuration file cannot be written."""
    pass


@dataclass
class Config:
    """User configuration. Unknown keys from disk are kept in ``extra``."""
    api_key: Optional[str] = None
    extra: dict = field(default_factory=dict)

    @property
    def has_api_key(self) -> bool:
        return isinstance(self.api_key, str) and bool(self.api_key)

    def to_dict(self) -> dict:
        data = dict(self.extra)
        if self.api_key is not None:
            data["api_key"] = self.api_key
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        extra = {k: v for k, v in data.items() if k != "api_key"}
        api_key = data.get("api_key")
        if api_key is not None and not isinstance(api_key, str):
            print("Config warning: ignoring non-string api_key", file=sys.stderr)
            api_key = None
        return cls(api_key=api_key, extra=extra)


def default_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_DIR_NAME


class ConfigStore:
    """Reads and writes the per-user config file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir is not None else default_config_dir()

    @property
    def path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def read(self) -> Config:
        """Load the config. Never raises: problems degrade to an empty Config."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return Config()
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            print(f"Warning: Could not load {self.path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {self.path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def write(self, config: Config) -> Path:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigError(f"Could not save {self.path}: {e}") from e
        return self.path

    def set_api_key(self, api_key: str) -> Config:
        config = self.read()
        config.api_key = api_key
        self.write(config)
        return config

    def has_api_key(self) -> bool:
        return self.read().has_api_key


def load_config() -> Config:
    return ConfigStore().read()


def save_config(config: Config) -> Path:
    return ConfigStore().write(config)


def get_config_path() -> Path:
    return ConfigStore().path


__all__ = [
    "Config",
    "ConfigError",
    "ConfigStore",
    "default_config_dir",
    "load_config",
    "save_config",
    "get_config_path",
    "CONFIG_DIR_ENV",
]
