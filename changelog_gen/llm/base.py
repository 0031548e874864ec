"""Base classes and shared utilities for LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from changelog_gen.config import GENERIC_API_KEY_ENV_VAR
from changelog_gen.llm.exceptions import LLMError, MissingAPIKeyError


@dataclass
class LLMResult:
    """Result from an LLM call, including token usage."""

    text: str
    model: str
    input_tokens: int
    output_tokens: int


# Instruction template sent with every commit message (shared across all providers)
IMPROVE_PROMPT_TEMPLATE = """You are helping to create a changelog.

Given this git commit message: "{message}"

Please improve it to be:
1. Clear and user-friendly (for non-technical users)
2. Focused on WHAT changed, not HOW
3. One sentence, under 80 characters
4. Start with a capital letter

Just respond with the improved message, nothing else."""


def parse_text_response(raw_response: str | None) -> str:
    """Extract the improved message from a raw model response.

    Args:
        raw_response: The raw text returned by the model.

    Returns:
        The first non-empty line, stripped of whitespace and wrapping quotes.

    Raises:
        LLMError: If the response is empty.
    """
    text = (raw_response or "").strip()
    if text:
        text = text.splitlines()[0].strip()

    # Models sometimes echo the quoting used in the prompt
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'`":
        text = text[1:-1].strip()

    if not text:
        raise LLMError("LLM returned an empty response")
    return text


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str

    @abstractmethod
    def improve_message(self, message: str) -> LLMResult:
        """Rewrite a commit message for a changelog.

        Args:
            message: The raw commit message.

        Returns:
            An LLMResult with the improved single-sentence message.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from the environment.

        Checks in order:
        1. The provider's environment variable
        2. The generic API_KEY environment variable
        (both may come from a .env file)

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        pass

    def _get_api_key_with_fallback(self, env_var_name: str, provider_name: str) -> str:
        """Helper to get API key with fallback to the generic variable.

        Args:
            env_var_name: Environment variable name to check first.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        for name in (env_var_name, GENERIC_API_KEY_ENV_VAR):
            api_key = os.getenv(name)
            if api_key:
                return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. Generic fallback: export {GENERIC_API_KEY_ENV_VAR}=your_key_here\n"
            f"  3. A .env file in the current directory"
        )

    def build_prompt(self, message: str) -> str:
        """Build the instruction prompt for one commit message.

        Args:
            message: The raw commit message.

        Returns:
            The formatted prompt.
        """
        return IMPROVE_PROMPT_TEMPLATE.format(message=message)
