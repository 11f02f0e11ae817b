"""Completion Provider Package"""

from gojira.llm.base import CompletionProvider, REQUEST_TIMEOUT
from gojira.llm.claude import AnthropicProvider
from gojira.llm.gpt import OpenAIProvider

PROVIDERS = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}

DEFAULT_PROVIDER = "openai"


def get_provider(name: str | None) -> tuple[CompletionProvider | None, bool]:
    """Look up a provider by registry name. Returns (provider, found)."""
    provider_class = PROVIDERS.get((name or "").strip().lower())
    if provider_class is None:
        return None, False
    return provider_class(), True


def get_default_provider() -> CompletionProvider:
    return PROVIDERS[DEFAULT_PROVIDER]()


__all__ = [
    "CompletionProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "PROVIDERS",
    "DEFAULT_PROVIDER",
    "REQUEST_TIMEOUT",
    "get_provider",
    "get_default_provider",
]
