"""Configuration constants for changelog-gen LLM providers.

Per-project settings live in .changelogrc.yaml (see project_config.py);
this module only holds provider metadata and generation defaults.
"""

from enum import Enum


class LLMProvider(Enum):
    """Supported LLM providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"


# Accepted aliases for the ai.provider config key
PROVIDER_ALIASES = {
    "claude": LLMProvider.ANTHROPIC,
    "gpt": LLMProvider.OPENAI,
    "gemini": LLMProvider.GOOGLE,
}


# ============================================================
# GENERATION DEFAULTS
# ============================================================

DEFAULT_PROVIDER = LLMProvider.ANTHROPIC

# Enhanced messages are a single short sentence
MAX_TOKENS = 100
TEMPERATURE = 0.3

DEFAULT_MODELS = {
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.GOOGLE: "gemini-2.0-flash",
}


# ============================================================
# AVAILABLE MODELS PER PROVIDER
# ============================================================

AVAILABLE_MODELS = {
    LLMProvider.ANTHROPIC: [
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
    LLMProvider.OPENAI: [
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4o",
        "gpt-4o-mini",
    ],
    LLMProvider.GOOGLE: [
        "gemini-2.5-flash",
        "gemini-2.5-flash-lite",
        "gemini-2.0-flash",
    ],
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
}

# Provider-agnostic fallback checked after the provider's own variable
GENERIC_API_KEY_ENV_VAR = "API_KEY"


def resolve_provider(name: str | None) -> LLMProvider:
    """Map an ai.provider config value to an LLMProvider.

    Args:
        name: Provider name or alias (e.g. "anthropic", "claude"). None or
            empty selects the default provider.

    Returns:
        The matching LLMProvider.

    Raises:
        ValueError: If the name is not a known provider or alias.
    """
    if not name:
        return DEFAULT_PROVIDER

    key = name.strip().lower()
    if key in PROVIDER_ALIASES:
        return PROVIDER_ALIASES[key]
    return LLMProvider(key)
