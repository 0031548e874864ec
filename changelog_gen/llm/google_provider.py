"""Google Gemini provider implementation."""

from google import genai
from google.genai import types

import changelog_gen.config as _config
from changelog_gen.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from changelog_gen.llm.base import BaseLLMProvider, LLMResult, parse_text_response
from changelog_gen.llm.exceptions import LLMError


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Google provider.

        Args:
            model: The model to use. Defaults to gemini-2.0-flash.
        """
        self.model = model or DEFAULT_MODELS[LLMProvider.GOOGLE]
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.GOOGLE]

    def get_api_key(self) -> str:
        """Get the Google API key from the environment.

        Raises:
            MissingAPIKeyError: If neither GOOGLE_API_KEY nor API_KEY is set.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Google")

    def improve_message(self, message: str) -> LLMResult:
        """Rewrite a commit message using Google Gemini.

        Args:
            message: The raw commit message.

        Returns:
            An LLMResult with the improved message.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors, including blocked or empty responses.
        """
        client = genai.Client(api_key=self.get_api_key())
        prompt = self.build_prompt(message)

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=_config.MAX_TOKENS,
                    temperature=_config.TEMPERATURE,
                ),
            )
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        if not response.candidates:
            raise LLMError("Google Gemini returned no candidates in response")

        finish_reason = str(getattr(response.candidates[0], "finish_reason", ""))
        if "SAFETY" in finish_reason:
            raise LLMError(f"Google Gemini blocked response due to safety filters: {finish_reason}")

        raw_response = response.text

        input_tokens = 0
        output_tokens = 0
        usage = getattr(response, "usage_metadata", None)
        if usage:
            input_tokens = getattr(usage, "prompt_token_count", 0) or 0
            output_tokens = getattr(usage, "candidates_token_count", 0) or 0

        # Fallback estimation if no token counts available
        if input_tokens == 0:
            input_tokens = len(prompt) // 4
        if output_tokens == 0:
            output_tokens = len(raw_response or "") // 4

        return LLMResult(
            text=parse_text_response(raw_response),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
