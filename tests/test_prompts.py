"""Tests for prompt building and model token settings."""
from aicommit.model_configs import ModelTokenConfig, get_model_config, get_token_limit_options
from aicommit.models import CommitStyle, RepoInfo
from aicommit.prompts import (
    CONVENTIONAL_SYSTEM_PROMPT,
    FREEFORM_SYSTEM_PROMPT,
    build_prompt,
    get_system_prompt,
)


def test_system_prompt_per_style():
    assert get_system_prompt(CommitStyle.CONVENTIONAL) == CONVENTIONAL_SYSTEM_PROMPT
    assert get_system_prompt("freeform") == FREEFORM_SYSTEM_PROMPT
    assert CONVENTIONAL_SYSTEM_PROMPT != FREEFORM_SYSTEM_PROMPT


def test_build_prompt_ends_with_diff():
    prompt = build_prompt("diff --git a/x b/x", "conventional")
    assert prompt.endswith("diff --git a/x b/x")
    assert "Repository:" not in prompt


def test_build_prompt_includes_repo_context():
    prompt = build_prompt("diff", CommitStyle.FREEFORM, RepoInfo(name="demo", branch="main"))
    lines = prompt.splitlines()
    assert lines[-2] == "Repository: demo (branch: main)"
    assert lines[-1] == "diff"


def test_prompt_examples_differ_by_style():
    assert build_prompt("diff", "conventional") != build_prompt("diff", "freeform")


def test_newer_openai_models_use_completion_tokens():
    assert get_token_limit_options("gpt-4o-mini", "openai", 150) == {"max_completion_tokens": 150}
    assert get_token_limit_options("gpt-5-preview", "custom", 80) == {"max_completion_tokens": 80}


def test_openrouter_prefixes_resolve():
    assert get_model_config("openai/gpt-4o", "openrouter").max_tokens_field == "max_completion_tokens"
    assert get_model_config("anthropic/claude-3-sonnet", "openrouter").max_tokens_field == "max_tokens"


def test_other_models_use_max_tokens():
    assert get_token_limit_options("llama3.1", "ollama", 200) == {"max_tokens": 200}
    assert get_token_limit_options("mistralai/mixtral", "openrouter", 10) == {"max_tokens": 10}


def test_model_config_only_carries_token_field():
    assert set(ModelTokenConfig.model_fields) == {"max_tokens_field"}
    assert ModelTokenConfig().max_tokens_field == "max_tokens"
