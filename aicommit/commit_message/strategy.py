"""Commit message generation strategies, one per AI backend."""
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from openai import APITimeoutError, AsyncOpenAI
from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from ..exceptions import ProviderError, ProviderTimeoutError
from ..model_configs import get_token_limit_options
from ..models import ProviderConfig, RepoInfo
from ..prompts import build_prompt, get_system_prompt

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_TIMEOUT = 60.0
OLLAMA_TIMEOUT = 120.0
OLLAMA_HEALTH_TIMEOUT = 15.0

TIMEOUT_ERRORS = (httpx.TimeoutException, APITimeoutError)


class CommitMessageStrategy(ABC):
    """Abstract base class for commit message generation strategies.

    Subclasses implement :meth:`_complete`; this class builds the prompts,
    trims the answer and wraps every failure in :class:`ProviderError`.
    """

    provider_name = "AI"
    temperature = 0.3

    def __init__(self, config: ProviderConfig):
        self.config = config

    async def generate_message(
        self, staged_changes: str, repo_info: Optional[RepoInfo] = None
    ) -> str:
        """Ask the backend for a commit message describing ``staged_changes``."""
        prompt = build_prompt(staged_changes, self.config.commit_style, repo_info)
        system_prompt = get_system_prompt(self.config.commit_style)

        try:
            message = await self._complete(prompt, system_prompt)
        except ProviderError:
            raise
        except Exception as e:
            timeout = _find_timeout(e)
            if timeout is not None:
                raise ProviderTimeoutError(self.provider_name, f"request timed out ({timeout})") from e
            raise ProviderError(self.provider_name, str(e) or type(e).__name__) from e

        message = (message or "").strip()
        if not message:
            raise ProviderError(self.provider_name, f"No response from {self.provider_name}")
        return message

    @abstractmethod
    async def _complete(self, prompt: str, system_prompt: str) -> str:
        """Send one request and return the raw completion text."""
        pass

    def _messages(self, prompt: str, system_prompt: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]


def _find_timeout(error: BaseException) -> Optional[BaseException]:
    """Return the timeout error in the cause chain of ``error``, if any."""
    seen = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, TIMEOUT_ERRORS):
            return error
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return None


class OpenAICommitStrategy(CommitMessageStrategy):
    """Strategy for the hosted OpenAI API, driven through a pydantic-ai agent."""

    provider_name = "OpenAI"

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        self._agent: Optional[Agent] = None

    def _get_agent(self) -> Agent:
        if not self.config.api_key:
            raise ProviderError(self.provider_name, "OpenAI API key is required")
        if self._agent is None:
            model = OpenAIChatModel(
                self.config.model,
                provider=OpenAIProvider(
                    openai_client=AsyncOpenAI(
                        api_key=self.config.api_key, timeout=DEFAULT_TIMEOUT
                    )
                ),
            )
            self._agent = Agent(
                model,
                output_type=str,
                system_prompt=get_system_prompt(self.config.commit_style),
                model_settings={
                    "max_tokens": self.config.max_tokens,
                    "temperature": self.temperature,
                },
            )
        return self._agent

    async def _complete(self, prompt: str, system_prompt: str) -> str:
        agent = self._get_agent()
        result = await agent.run(prompt)
        if not result:
            return ""

        # Handle different result structures
        if hasattr(result, "output"):
            return result.output
        if hasattr(result, "data"):
            return result.data
        return str(result)


class HTTPCommitStrategy(CommitMessageStrategy):
    """Base for strategies that talk to a JSON chat endpoint over httpx."""

    def __init__(
        self,
        config: ProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    async def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Any:
        async with self._client() as client:
            response = await client.post(url, json=payload, headers=headers, timeout=timeout)
            if response.is_error:
                raise ProviderError(
                    self.provider_name, f"HTTP {response.status_code}: {response.text}"
                )
            return response.json()

    def _chat_payload(self, prompt: str, system_prompt: str, provider: str) -> Dict[str, Any]:
        payload = {
            "model": self.config.model,
            "messages": self._messages(prompt, system_prompt),
            "temperature": self.temperature,
        }
        payload.update(
            get_token_limit_options(self.config.model, provider, self.config.max_tokens)
        )
        return payload

    @staticmethod
    def _completion_text(data: Any) -> Optional[str]:
        """Read ``choices[0].message.content`` from a chat completion."""
        if not isinstance(data, dict):
            return None
        choices = data.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            return None
        return (choices[0].get("message") or {}).get("content")


class OpenRouterCommitStrategy(HTTPCommitStrategy):
    """Strategy for the OpenRouter chat completion API."""

    provider_name = "OpenRouter"

    async def _complete(self, prompt: str, system_prompt: str) -> str:
        if not self.config.api_key:
            raise ProviderError(self.provider_name, "OpenRouter API key is required")

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "HTTP-Referer": "https://github.com/ai-commit-tools",
            "X-Title": "AI Commit Tools",
        }
        data = await self._post_json(
            OPENROUTER_URL,
            self._chat_payload(prompt, system_prompt, "openrouter"),
            headers=headers,
        )

        message = self._completion_text(data)
        if not message:
            raise ProviderError(
                self.provider_name, f"No response from OpenRouter. Response: {json.dumps(data)}"
            )
        return message


class CustomCommitStrategy(HTTPCommitStrategy):
    """Strategy for any OpenAI-compatible endpoint given by URL."""

    provider_name = "Custom API"

    async def _complete(self, prompt: str, system_prompt: str) -> str:
        if not self.config.api_url:
            raise ProviderError(self.provider_name, "Custom API URL is required")

        headers = {}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"

        data = await self._post_json(
            self.config.api_url,
            self._chat_payload(prompt, system_prompt, "custom"),
            headers=headers,
        )

        message = self._completion_text(data)
        if not message and isinstance(data, dict):
            message = data.get("response")
        if not message:
            raise ProviderError(self.provider_name, "No response from custom API")
        return message


class OllamaCommitStrategy(HTTPCommitStrategy):
    """Strategy for a local Ollama daemon."""

    provider_name = "Ollama"
    temperature = 0.1

    async def _complete(self, prompt: str, system_prompt: str) -> str:
        if not self.config.api_url:
            raise ProviderError(self.provider_name, "Ollama API URL is required")

        base_url = self.config.api_url.rstrip("/")
        await self._check_connection(base_url)

        payload = {
            "model": self.config.model,
            "messages": self._messages(prompt, system_prompt),
            "stream": False,
            "options": {
                "num_predict": self.config.max_tokens,
                "temperature": self.temperature,
            },
        }

        try:
            async with self._client() as client:
                response = await client.post(
                    f"{base_url}/api/chat", json=payload, timeout=OLLAMA_TIMEOUT
                )
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(
                self.provider_name,
                "Ollama request timed out. The model might be loading or the request is too complex.",
            ) from e

        if response.status_code == 404:
            raise ProviderError(
                self.provider_name,
                "Model not found. Available models: run 'ollama list' to see installed models",
            )
        if response.is_error:
            raise ProviderError(
                self.provider_name, f"HTTP {response.status_code}: {response.text}"
            )

        message = self._parse_chat_response(response.text).strip()
        if not message:
            raise ProviderError(self.provider_name, "Empty response from Ollama")
        return message

    async def _check_connection(self, base_url: str) -> None:
        try:
            async with self._client() as client:
                response = await client.get(
                    f"{base_url}/api/tags", timeout=OLLAMA_HEALTH_TIMEOUT
                )
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(
                self.provider_name,
                "Ollama server is not running or not reachable. Please start Ollama with: ollama serve",
            ) from e
        except httpx.ConnectError as e:
            raise ProviderError(
                self.provider_name,
                f"Cannot connect to Ollama. Please ensure Ollama is running on {base_url}",
            ) from e

        if response.is_error:
            raise ProviderError(
                self.provider_name,
                f"Ollama server not responding (HTTP {response.status_code})",
            )

    @staticmethod
    def _parse_chat_response(text: str) -> str:
        """Read the message from a single JSON body or from streamed JSON lines."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            chunks = []
            for line in text.splitlines():
                if not line.strip():
                    continue
                try:
                    chunk = json.loads(line)
                except json.JSONDecodeError:
                    continue
                content = (chunk.get("message") or {}).get("content")
                if content:
                    chunks.append(content)
            return "".join(chunks)

        if not isinstance(data, dict):
            return ""
        return (data.get("message") or {}).get("content") or ""
