"""Interactive configuration wizard."""
from pathlib import Path
from typing import Dict, List, Optional

import click
from rich.console import Console

from .config import Config, ConfigValidator
from .model_configs import COMMON_MODEL_CONFIGS, OPENROUTER_MODEL_PREFIXES
from .models import AIProvider, CommitStyle

CUSTOM_MODEL = "custom"
DEFAULT_OLLAMA_URL = "http://localhost:11434"


class ProviderSetup:
    """Collects the provider specific part of the configuration."""

    def __init__(self):
        self.validator = ConfigValidator()

    def openai_models(self) -> List[str]:
        models = [m for m in COMMON_MODEL_CONFIGS if m.startswith(("gpt-4", "gpt-5"))]
        return models + [CUSTOM_MODEL]

    def openrouter_models(self) -> List[str]:
        return list(OPENROUTER_MODEL_PREFIXES) + [CUSTOM_MODEL]

    def setup_provider(self, provider: str) -> Dict[str, Optional[str]]:
        if provider == AIProvider.OPENAI.value:
            return self._setup_hosted("OpenAI", self.openai_models(), "gpt-5-nano", "gpt-4-custom")
        if provider == AIProvider.OPENROUTER.value:
            return self._setup_hosted(
                "OpenRouter", self.openrouter_models(), "openai/gpt-5-nano", "provider/model-name"
            )
        if provider == AIProvider.OLLAMA.value:
            return self._setup_ollama()
        if provider == AIProvider.CUSTOM.value:
            return self._setup_custom()
        raise click.BadParameter(f"Unsupported provider: {provider}")

    def _prompt_api_key(self, label: str) -> str:
        while True:
            key = click.prompt(f"Enter your {label} API key", hide_input=True)
            if self.validator.validate_api_key(key):
                return key.strip()
            click.echo("Please enter a valid API key")

    def _prompt_url(self, message: str, default: Optional[str] = None) -> str:
        while True:
            url = click.prompt(message, default=default)
            if self.validator.validate_url(url):
                return url.strip()
            click.echo("Please enter a valid URL")

    def _prompt_model(self, label: str, choices: List[str], default: str, example: str) -> str:
        model = click.prompt(
            f"Choose {label} model",
            type=click.Choice(choices),
            default=default if default in choices else choices[0],
        )
        if model == CUSTOM_MODEL:
            model = click.prompt(f"Enter custom model name (e.g., {example})")
        return model.strip()

    def _setup_hosted(self, label: str, choices: List[str], default: str, example: str) -> Dict[str, Optional[str]]:
        api_key = self._prompt_api_key(label)
        model = self._prompt_model(label, choices, default, example)
        return {"api_key": api_key, "model": model}

    def _setup_ollama(self) -> Dict[str, Optional[str]]:
        url = self._prompt_url("Enter Ollama API URL", default=DEFAULT_OLLAMA_URL)
        model = self._prompt_model("Ollama", [CUSTOM_MODEL], CUSTOM_MODEL, "llama3.1, codellama")
        return {"api_url": url, "model": model}

    def _setup_custom(self) -> Dict[str, Optional[str]]:
        url = self._prompt_url("Enter custom API endpoint URL")
        api_key = click.prompt("Enter API key (optional)", default="", show_default=False, hide_input=True)
        model = click.prompt("Enter model name").strip()
        return {"api_url": url, "api_key": api_key.strip() or None, "model": model}


def run_setup(console: Optional[Console] = None, path: Optional[Path] = None) -> Config:
    """Ask for every setting, then validate and save the configuration.

    Raises:
        ConfigError: If the collected settings do not validate.
    """
    console = console or Console()
    console.print("[cyan]Welcome to AI Commit Setup![/cyan]\n")

    commit_style = click.prompt(
        "Choose your preferred commit message style",
        type=click.Choice([style.value for style in CommitStyle]),
        default=CommitStyle.CONVENTIONAL.value,
    )
    ai_provider = click.prompt(
        "Choose your AI provider",
        type=click.Choice([provider.value for provider in AIProvider]),
        default=AIProvider.OPENAI.value,
    )

    provider_settings = ProviderSetup().setup_provider(ai_provider)

    max_tokens = click.prompt(
        "Maximum tokens for commit message",
        type=click.IntRange(1, 4000),
        default=150,
    )
    include_context = click.confirm("Include repository context in AI prompts?", default=True)
    auto_commit = click.confirm("Enable auto-commit mode (skip confirmation)?", default=False)

    config = Config(
        commit_style=commit_style,
        ai_provider=ai_provider,
        max_tokens=max_tokens,
        include_context=include_context,
        auto_commit=auto_commit,
        **provider_settings,
    )
    saved_path = config.save(path)
    console.print(f"[green]Configuration saved to {saved_path}[/green]")
    return config
