"""Tests for the interactive setup wizard."""
import json
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from aicommit.config import Config
from aicommit.exceptions import ConfigError
from aicommit.setup_wizard import CUSTOM_MODEL, ProviderSetup, run_setup


def run_wizard(prompts, confirms):
    with patch("aicommit.setup_wizard.click.prompt", side_effect=prompts), \
         patch("aicommit.setup_wizard.click.confirm", side_effect=confirms):
        return run_setup(Mock(spec=Console))


def test_openrouter_setup(isolated_config):
    config = run_wizard(
        ["conventional", "openrouter", "sk-or-key", "openai/gpt-4o-mini", 200],
        [True, False],
    )

    assert config == Config(
        commit_style="conventional",
        ai_provider="openrouter",
        api_key="sk-or-key",
        model="openai/gpt-4o-mini",
        max_tokens=200,
        include_context=True,
        auto_commit=False,
    )
    stored = json.loads(isolated_config.read_text())
    assert stored["aiProvider"] == "openrouter"
    assert stored["maxTokens"] == 200


def test_ollama_setup_with_custom_model(isolated_config):
    config = run_wizard(
        ["freeform", "ollama", "http://localhost:11434", CUSTOM_MODEL, "codellama", 150],
        [False, True],
    )

    assert config.ai_provider == "ollama"
    assert config.api_url == "http://localhost:11434"
    assert config.model == "codellama"
    assert config.include_context is False
    assert config.auto_commit is True


def test_invalid_url_is_asked_again(isolated_config):
    config = run_wizard(
        ["conventional", "custom", "not a url", "https://llm.internal/v1/chat", "", "local-model", 150],
        [True, False],
    )

    assert config.api_url == "https://llm.internal/v1/chat"
    assert config.api_key is None
    assert config.model == "local-model"


def test_blank_api_key_is_asked_again(isolated_config):
    config = run_wizard(
        ["conventional", "openai", "   ", "sk-openai", "gpt-5-nano", 150],
        [True, False],
    )

    assert config.api_key == "sk-openai"
    assert config.model == "gpt-5-nano"


def test_invalid_settings_are_not_saved(isolated_config):
    with pytest.raises(ConfigError):
        run_wizard(
            ["conventional", "custom", "https://llm.internal", "", "   ", 150],
            [True, False],
        )
    assert not isolated_config.exists()


def test_model_choices():
    setup = ProviderSetup()
    assert "gpt-5-nano" in setup.openai_models()
    assert "claude-4-sonnet" not in setup.openai_models()
    assert setup.openrouter_models()[-1] == CUSTOM_MODEL
    assert "anthropic/claude-3-sonnet" in setup.openrouter_models()
