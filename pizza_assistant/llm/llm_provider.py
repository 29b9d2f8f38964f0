"""LLM Provider implementation using Anthropic Claude API."""

from typing import Protocol

import anthropic

from ..config import AssistantConfig


class ILLMProvider(Protocol):
    """Abstraction for LLM access."""

    async def complete(
        self,
        messages: list[dict],  # [{"role": "user", "content": "..."}]
        system: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate completion."""
        ...


class LLMProvider:
    """Anthropic Claude API provider."""

    def __init__(self, config: AssistantConfig):
        if not config.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY is not configured")

        self._model = config.llm_model
        self._max_tokens = config.llm_max_tokens
        self._client = anthropic.AsyncAnthropic(
            api_key=config.anthropic_api_key,
            timeout=config.llm_timeout,
            max_retries=0,
        )

    async def complete(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate completion using Claude API."""
        kwargs = {
            "model": self._model,
            "messages": messages,
            "max_tokens": max_tokens or self._max_tokens,
        }
        if system:
            kwargs["system"] = system

        try:
            response = await self._client.messages.create(**kwargs)
        except Exception as e:
            # Re-raise for handling by caller
            raise RuntimeError(f"LLM API error: {e}") from e

        return "".join(getattr(block, "text", "") for block in response.content).strip()

    async def aclose(self) -> None:
        await self._client.close()
