"""Provider gateway: picks and memoizes commit message strategies."""
from typing import Dict, Optional, Tuple, Union

from .commit_message.strategy import (
    CommitMessageStrategy,
    CustomCommitStrategy,
    OllamaCommitStrategy,
    OpenAICommitStrategy,
    OpenRouterCommitStrategy,
)
from .config import Config
from .exceptions import ProviderError
from .models import AIProvider, ProviderConfig, RepoInfo

CacheKey = Tuple[str, str]


class StrategyCache:
    """Strategy instances keyed by ``(provider, model)``.

    An entry is reused only while its provider settings match the request.

    Owned by the caller; entries are replaced, never expired. Not guarded by a lock, so
    share one instance per command invocation rather than across threads.
    """

    def __init__(self):
        self._strategies: Dict[CacheKey, CommitMessageStrategy] = {}

    def get(self, key: CacheKey) -> Optional[CommitMessageStrategy]:
        return self._strategies.get(key)

    def put(self, key: CacheKey, strategy: CommitMessageStrategy) -> None:
        self._strategies[key] = strategy

    def clear(self) -> None:
        self._strategies.clear()

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


def _resolve_provider(provider: Union[AIProvider, str]) -> AIProvider:
    try:
        return AIProvider(provider)
    except ValueError:
        raise ProviderError(str(provider), f"Unsupported AI provider: {provider}") from None


def build_strategy(provider: Union[AIProvider, str], provider_config: ProviderConfig) -> CommitMessageStrategy:
    """Instantiate the strategy for ``provider`` without consulting a cache."""
    provider = _resolve_provider(provider)
    if provider == AIProvider.OPENAI:
        return OpenAICommitStrategy(provider_config)
    if provider == AIProvider.OPENROUTER:
        return OpenRouterCommitStrategy(provider_config)
    if provider == AIProvider.OLLAMA:
        return OllamaCommitStrategy(provider_config)
    return CustomCommitStrategy(provider_config)


def create_strategy(config: Config, cache: Optional[StrategyCache] = None) -> CommitMessageStrategy:
    """Return the strategy for the configured provider, reusing a cached one."""
    provider = _resolve_provider(config.ai_provider)
    key = (provider.value, config.model)
    provider_config = config.provider_config()

    if cache is not None:
        cached = cache.get(key)
        # Settings changed since this entry was built
        if cached is not None and cached.config == provider_config:
            return cached

    strategy = build_strategy(provider, provider_config)
    if cache is not None:
        cache.put(key, strategy)
    return strategy


async def generate_commit_message(
    staged_changes: str,
    config: Config,
    cache: Optional[StrategyCache] = None,
    repo_info: Optional[RepoInfo] = None,
) -> str:
    """Ask the configured provider for raw commit message text."""
    strategy = create_strategy(config, cache)
    return await strategy.generate_message(staged_changes, repo_info)
