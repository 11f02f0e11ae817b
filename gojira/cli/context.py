"""Per-invocation command context."""

import logging
from dataclasses import dataclass, field
from typing import Callable

from gojira.config import Config, ConfigManager
from gojira.git import GitAnalyzer
from gojira.jira import JiraClient
from gojira.llm import CompletionProvider, DEFAULT_PROVIDER, get_provider, get_default_provider
from gojira.output import Spinner

from gojira.cli.utils import PromptAsker, StdinAsker, copy_to_clipboard

logger = logging.getLogger(__name__)


def resolve_provider(name: str | None) -> CompletionProvider:
    """Registry lookup that falls back to the default provider with a warning."""
    provider, found = get_provider(name)
    if found:
        return provider
    if name:
        logger.warning("Unknown provider '%s', falling back to '%s'", name, DEFAULT_PROVIDER)
    return get_default_provider()


@dataclass
class CommandContext:
    """Everything a command handler talks to besides its own options."""
    config: Config
    provider: CompletionProvider
    git: GitAnalyzer = field(default_factory=GitAnalyzer)
    asker: PromptAsker = field(default_factory=StdinAsker)
    clipboard: Callable[[str], tuple[bool, str]] = copy_to_clipboard
    jira_factory: Callable[[Config], JiraClient] = JiraClient.from_config
    config_manager: ConfigManager = field(default_factory=ConfigManager)

    @classmethod
    def build(
        cls,
        provider: str | None = None,
        model: str | None = None,
        manager: ConfigManager | None = None,
    ) -> 'CommandContext':
        """Load config, apply one-off overrides and resolve the provider."""
        manager = manager or ConfigManager()
        config = manager.load().with_overrides(provider=provider, model=model)
        resolved = resolve_provider(config.ai_provider)
        logger.debug("Using provider %s (model=%s)", resolved.name, config.ai_model or resolved.default_model())
        return cls(config=config, provider=resolved, config_manager=manager)

    @property
    def model(self) -> str:
        return self.config.ai_model or self.provider.default_model()

    def jira(self) -> JiraClient:
        return self.jira_factory(self.config)

    def complete(self, prompt: str, message: str = "Generating") -> str:
        logger.debug("Prompt: %d chars (~%d tokens)", len(prompt), len(prompt) // 4)
        with Spinner(f"{message} with {self.provider.name}..."):
            return self.provider.get_completions(prompt, self.model)
