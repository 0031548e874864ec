"""OpenAI GPT provider implementation."""

from openai import OpenAI

import changelog_gen.config as _config
from changelog_gen.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from changelog_gen.llm.base import BaseLLMProvider, LLMResult, parse_text_response
from changelog_gen.llm.exceptions import LLMError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the OpenAI provider.

        Args:
            model: The model to use. Defaults to gpt-4o-mini.
        """
        self.model = model or DEFAULT_MODELS[LLMProvider.OPENAI]
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]

    def get_api_key(self) -> str:
        """Get the OpenAI API key from the environment.

        Raises:
            MissingAPIKeyError: If neither OPENAI_API_KEY nor API_KEY is set.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "OpenAI")

    def improve_message(self, message: str) -> LLMResult:
        """Rewrite a commit message using OpenAI GPT.

        Args:
            message: The raw commit message.

        Returns:
            An LLMResult with the improved message.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        client = OpenAI(api_key=self.get_api_key())

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                messages=[{"role": "user", "content": self.build_prompt(message)}],
            )
            raw_response = response.choices[0].message.content
            input_tokens = response.usage.prompt_tokens
            output_tokens = response.usage.completion_tokens
        except Exception as e:
            raise LLMError(f"OpenAI API call failed: {e}")

        return LLMResult(
            text=parse_text_response(raw_response),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
