"""LLM provider module for changelog-gen.

This module provides a unified interface to the supported LLM providers.
Provider metadata lives in changelog_gen/config.py.
"""

from dotenv import load_dotenv

from changelog_gen.config import DEFAULT_PROVIDER, LLMProvider
from changelog_gen.llm.base import BaseLLMProvider, LLMResult
from changelog_gen.llm.exceptions import LLMError, MissingAPIKeyError

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: LLMProvider | None = None,
    model: str | None = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to DEFAULT_PROVIDER from config.
        model: The model to use. Defaults to the provider's default model.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = provider or DEFAULT_PROVIDER
    model = model or None

    if provider == LLMProvider.ANTHROPIC:
        from changelog_gen.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model)

    elif provider == LLMProvider.OPENAI:
        from changelog_gen.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model)

    elif provider == LLMProvider.GOOGLE:
        from changelog_gen.llm.google_provider import GoogleProvider

        return GoogleProvider(model=model)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "LLMResult",
    "get_provider",
]
