"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

import changelog_gen.config as _config
from changelog_gen.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from changelog_gen.llm.base import BaseLLMProvider, LLMResult, parse_text_response
from changelog_gen.llm.exceptions import LLMError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Anthropic provider.

        Args:
            model: The model to use. Defaults to the configured Claude model.
        """
        self.model = model or DEFAULT_MODELS[LLMProvider.ANTHROPIC]
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key from the environment.

        Raises:
            MissingAPIKeyError: If neither ANTHROPIC_API_KEY nor API_KEY is set.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Anthropic")

    def improve_message(self, message: str) -> LLMResult:
        """Rewrite a commit message using Anthropic Claude.

        Args:
            message: The raw commit message.

        Returns:
            An LLMResult with the improved message.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        client = Anthropic(api_key=self.get_api_key())

        try:
            response = client.messages.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                messages=[{"role": "user", "content": self.build_prompt(message)}],
            )
            raw_response = response.content[0].text
            input_tokens = response.usage.input_tokens
            output_tokens = response.usage.output_tokens
        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}")

        return LLMResult(
            text=parse_text_response(raw_response),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
