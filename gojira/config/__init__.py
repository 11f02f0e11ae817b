"""Configuration Management Package"""

import json
import logging
import os
from dataclasses import dataclass, asdict, field, replace
from pathlib import Path
from typing import Optional

from gojira.errors import ConfigCorrupt, ConfigWriteError
from gojira.llm import PROVIDERS, DEFAULT_PROVIDER

logger = logging.getLogger(__name__)

# Jira issue type IDs differ between instances; these are only the common defaults
DEFAULT_ISSUE_TYPE_IDS = {
    "Epic": "10000",
    "Task": "10001",
    "Bug": "10006",
}


@dataclass
class Config:
    """Persisted user settings."""
    ai_provider: str = DEFAULT_PROVIDER
    ai_model: str = ""
    default_jira: str = ""
    jira_url: str = ""
    jira_token: str = ""
    jira_issue_types: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ISSUE_TYPE_IDS))

    @property
    def jira_configured(self) -> bool:
        return bool(self.jira_url and self.jira_token)

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Return a list of warnings about invalid values. Nothing is changed."""
        warnings = []

        if self.ai_provider and self.ai_provider.lower() not in PROVIDERS:
            warnings.append(
                f"Unknown provider '{self.ai_provider}', '{DEFAULT_PROVIDER}' will be used"
            )

        if not isinstance(self.jira_issue_types, dict):
            warnings.append("jira_issue_types must be an object mapping type name to ID")
        else:
            for name, type_id in self.jira_issue_types.items():
                if not isinstance(type_id, str) or not type_id:
                    warnings.append(f"Invalid Jira issue type ID for '{name}': {type_id!r}")

        return warnings

    def with_overrides(self, provider: Optional[str] = None, model: Optional[str] = None) -> 'Config':
        """Copy with one-off overrides applied. The persisted file is untouched."""
        changes = {}
        if provider:
            changes["ai_provider"] = provider.lower()
        if model:
            changes["ai_model"] = model
        return replace(self, **changes) if changes else replace(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys and v is not None}
        return cls(**filtered)


STRING_FIELDS = ("ai_provider", "ai_model", "default_jira", "jira_url", "jira_token")


def _check_types(data: dict, path: Path) -> None:
    """Reject values of the wrong JSON type. Null means "use the default"."""
    for key in STRING_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigCorrupt(f"Config file {path}: '{key}' must be a string, got {value!r}")

    issue_types = data.get("jira_issue_types")
    if issue_types is None:
        return
    if not isinstance(issue_types, dict) or not all(
        isinstance(name, str) and isinstance(type_id, str) for name, type_id in issue_types.items()
    ):
        raise ConfigCorrupt(
            f"Config file {path}: 'jira_issue_types' must map type names to string IDs"
        )


class ConfigManager:
    """Loads and saves the per-user config file."""

    CONFIG_FILENAME = ".gojira.json"
    PATH_ENV = "GOJIRA_CONFIG"

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path else None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        override = os.environ.get(self.PATH_ENV)
        if override:
            return Path(override).expanduser()
        return Path.home() / self.CONFIG_FILENAME

    def load(self) -> Config:
        path = self.path
        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return Config()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigCorrupt(f"Config file {path} is not valid JSON: {e}") from e
        except OSError as e:
            raise ConfigCorrupt(f"Could not read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigCorrupt(f"Config file {path} must contain a JSON object")
        _check_types(data, path)

        config = Config.from_dict(data)
        for warning in config.validate():
            logger.warning("Config warning: %s", warning)
        return config

    def save(self, config: Config) -> Path:
        path = self.path
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config.to_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            raise ConfigWriteError(f"Could not save config to {path}: {e}") from e
        logger.debug("Saved config to %s", path)
        return path


def load_config() -> Config:
    return ConfigManager().load()


def save_config(config: Config) -> Path:
    return ConfigManager().save(config)


def get_config_path() -> Path:
    return ConfigManager().path


__all__ = [
    "Config",
    "ConfigManager",
    "DEFAULT_ISSUE_TYPE_IDS",
    "load_config",
    "save_config",
    "get_config_path",
]
