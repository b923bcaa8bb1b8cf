"""Configuration management for ai-commit."""
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .exceptions import ConfigError
from .models import AIProvider, CommitStyle, ProviderConfig, ValidationResult

DEFAULT_CONFIG_FILENAME = ".ai-commit.json"
CONFIG_PATH_ENV = "AI_COMMIT_CONFIG"

ENV_MAPPING = {
    "AI_COMMIT_COMMIT_STYLE": "commit_style",
    "AI_COMMIT_PROVIDER": "ai_provider",
    "AI_COMMIT_MODEL": "model",
    "AI_COMMIT_API_KEY": "api_key",
    "AI_COMMIT_API_URL": "api_url",
    "AI_COMMIT_LOG_FILE": "log_file",
}


def default_config_path() -> Path:
    """Per-user config location, overridable through ``AI_COMMIT_CONFIG``."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_CONFIG_FILENAME


def _sanitize_string(value: str) -> str:
    """Strip control characters and surrounding whitespace."""
    value = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", value)
    return value[:1000].strip()


class Config(BaseModel):
    """Configuration settings for ai-commit.

    Stored as a JSON document with camelCase keys. Values for fields that
    are not passed explicitly can come from ``AI_COMMIT_*`` environment
    variables.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    commit_style: str = Field(
        default=CommitStyle.CONVENTIONAL.value,
        description="Style of commit messages to generate (conventional or freeform)",
    )

    ai_provider: str = Field(
        default=AIProvider.OPENROUTER.value,
        description="Backend used to generate messages (openai, ollama, openrouter or custom)",
    )

    api_key: Optional[str] = Field(default=None, description="Credential for the provider")

    api_url: Optional[str] = Field(default=None, description="Base URL for ollama or custom endpoints")

    model: str = Field(default="openai/gpt-4o-mini", description="Model name passed to the provider")

    max_tokens: int = Field(default=150, description="Token limit for the generated message (1-4000)")

    include_context: bool = Field(default=True, description="Include repository name and branch in prompts")

    auto_commit: bool = Field(default=False, description="Commit without asking for confirmation")

    log_file: Optional[str] = Field(default=None, description="Append a log of created commits to this file")

    def __init__(self, **data: Any):
        """Initialize config with environment variable support."""
        env_data = {}
        for env_var, field_name in ENV_MAPPING.items():
            if env_var not in os.environ:
                continue
            if field_name in data or to_camel(field_name) in data:
                continue
            env_data[field_name] = _sanitize_string(os.environ[env_var])

        super().__init__(**{**env_data, **data})

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Optional["Config"]:
        """Load configuration from the JSON config file.

        Returns:
            The stored configuration merged over the defaults, or None when
            no config file exists yet.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        config_path = path or default_config_path()
        if not config_path.exists():
            return None

        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            return cls(**data)
        except (OSError, ValueError, ValidationError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

    def save(self, path: Optional[Path] = None) -> Path:
        """Validate and write the configuration.

        Raises:
            ConfigError: If the configuration is invalid or cannot be written.
        """
        result = ConfigValidator().validate(self.model_dump())
        if not result.valid:
            raise ConfigError(f"Invalid configuration: {', '.join(result.errors)}")

        config_path = path or default_config_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                self.model_dump_json(by_alias=True, exclude_none=True, indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e
        return config_path

    def provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            model=self.model,
            api_key=self.api_key,
            api_url=self.api_url,
            max_tokens=self.max_tokens,
            commit_style=self.commit_style,
        )

    def get_log_file(self) -> Optional[Path]:
        return Path(self.log_file).expanduser() if self.log_file else None


class ConfigValidator:
    """Checks a configuration mapping before it is saved."""

    required_fields = [
        "commit_style",
        "ai_provider",
        "model",
        "max_tokens",
        "include_context",
        "auto_commit",
    ]

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        errors = []

        for field_name in self.required_fields:
            if config.get(field_name) is None:
                errors.append(f"Missing required field: {field_name}")

        styles = [style.value for style in CommitStyle]
        commit_style = config.get("commit_style")
        if commit_style and commit_style not in styles:
            errors.append(f"Invalid commit style: {commit_style}. Must be one of: {', '.join(styles)}")

        providers = [provider.value for provider in AIProvider]
        ai_provider = config.get("ai_provider")
        if ai_provider and ai_provider not in providers:
            errors.append(f"Invalid AI provider: {ai_provider}. Must be one of: {', '.join(providers)}")

        model = config.get("model")
        if model is not None and (not isinstance(model, str) or not model.strip()):
            errors.append("Model must be a non-empty string")

        max_tokens = config.get("max_tokens")
        if max_tokens is not None and (
            isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or not 0 < max_tokens <= 4000
        ):
            errors.append("Max tokens must be a positive number between 1 and 4000")

        errors.extend(self._provider_errors(config))
        return ValidationResult(valid=not errors, errors=errors)

    def validate_api_key(self, api_key: Optional[str]) -> bool:
        return isinstance(api_key, str) and len(api_key.strip()) > 0

    def validate_url(self, url: Optional[str]) -> bool:
        if not isinstance(url, str):
            return False
        parsed = urlparse(url)
        return bool(parsed.scheme and parsed.netloc)

    def _provider_errors(self, config: Dict[str, Any]) -> list:
        ai_provider = config.get("ai_provider")
        if ai_provider in (AIProvider.OPENAI.value, AIProvider.OPENROUTER.value):
            if not self.validate_api_key(config.get("api_key")):
                return [f"{ai_provider} requires a valid API key"]
        elif ai_provider == AIProvider.OLLAMA.value:
            if not self.validate_url(config.get("api_url")):
                return ["Ollama requires a valid API URL"]
        elif ai_provider == AIProvider.CUSTOM.value:
            if not self.validate_url(config.get("api_url")):
                return ["Custom provider requires a valid API URL"]
        return []
