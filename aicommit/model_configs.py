"""Token limit field names per model family.

Newer OpenAI models reject ``max_tokens`` and require
``max_completion_tokens``; everything else takes ``max_tokens``.
"""
from typing import Dict

from pydantic import BaseModel


class ModelTokenConfig(BaseModel):
    max_tokens_field: str = "max_tokens"


_COMPLETION_TOKENS = ModelTokenConfig(max_tokens_field="max_completion_tokens")
_MAX_TOKENS = ModelTokenConfig(max_tokens_field="max_tokens")

COMMON_MODEL_CONFIGS: Dict[str, ModelTokenConfig] = {
    "gpt-5": _COMPLETION_TOKENS,
    "gpt-5-nano": _COMPLETION_TOKENS,
    "gpt-4o": _COMPLETION_TOKENS,
    "gpt-4o-mini": _COMPLETION_TOKENS,
    "gpt-4.1-nano": _COMPLETION_TOKENS,
    "claude-4-sonnet": _MAX_TOKENS,
    "claude-3.5-sonnet-20241022": _MAX_TOKENS,
    "claude-3-sonnet-20240229": _MAX_TOKENS,
    "custom": _MAX_TOKENS,
    "default": _MAX_TOKENS,
}

OPENROUTER_MODEL_PREFIXES: Dict[str, str] = {
    "openai/gpt-5": "gpt-5",
    "openai/gpt-5-nano": "gpt-5-nano",
    "openai/gpt-4o": "gpt-4o",
    "openai/gpt-4o-mini": "gpt-4o-mini",
    "openai/gpt-4.1-nano": "gpt-4.1-nano",
    "anthropic/claude-4-sonnet": "claude-4-sonnet",
    "anthropic/claude-3.5-sonnet": "claude-3.5-sonnet-20241022",
    "anthropic/claude-3-sonnet": "claude-3-sonnet-20240229",
}


def get_model_config(model_name: str, provider: str) -> ModelTokenConfig:
    """Look up the token settings for a model, falling back to name patterns."""
    config_key = model_name
    if provider == "openrouter" and model_name in OPENROUTER_MODEL_PREFIXES:
        config_key = OPENROUTER_MODEL_PREFIXES[model_name]

    if config_key in COMMON_MODEL_CONFIGS:
        return COMMON_MODEL_CONFIGS[config_key]

    lowered = model_name.lower()
    if "gpt-4" in lowered or "gpt-5" in lowered:
        return _COMPLETION_TOKENS

    return COMMON_MODEL_CONFIGS["default"]


def get_token_limit_options(model_name: str, provider: str, max_tokens: int) -> Dict[str, int]:
    """Return the request fragment carrying the token limit."""
    field = get_model_config(model_name, provider).max_tokens_field
    return {field: max_tokens}
