"""Chat backends behind a single ``generate`` capability (GitHub Models / OpenAI / Azure / local)."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from openai import AsyncAzureOpenAI, AsyncOpenAI, OpenAIError

from config import Settings

logger = logging.getLogger("blogsum.llm")


class BackendError(Exception):
    """Raised when the text-generation backend call fails."""


class ChatBackend(Protocol):
    async def generate(self, prompt: str) -> list[str]:
        """Return every generated message for *prompt*, possibly none."""
        ...


class OpenAIChatBackend:
    """``ChatBackend`` over any OpenAI-compatible chat-completions client."""

    def __init__(self, client: AsyncOpenAI, model: str, *, temperature: float | None = None) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature

    async def generate(self, prompt: str) -> list[str]:
        """Send *prompt* as a single user message.

        Returns
        -------
        list[str]
            Text of each choice that carries content, in order.
        """
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except OpenAIError as exc:
            logger.exception("LLM call failed: %s", exc)
            raise BackendError(f"Chat backend call failed: {exc}") from exc

        return [
            choice.message.content
            for choice in response.choices
            if choice.message is not None and choice.message.content
        ]


_REQUIRED_CREDENTIALS: dict[str, str] = {
    "github": "github_token",
    "openai": "openai_api_key",
    "azure": "azure_openai_api_key",
}


def build_backend(settings: Settings) -> OpenAIChatBackend:
    """Return a backend for the configured provider.

    Raises ``BackendError`` when the provider's credential is not configured,
    so a misconfigured service fails at startup rather than on each request.
    """
    provider = settings.llm_provider.lower()

    # unknown providers fall through to GitHub Models below
    credential = None if provider == "local" else _REQUIRED_CREDENTIALS.get(provider, "github_token")
    if credential and not getattr(settings, credential):
        raise BackendError(f"{credential.upper()} is not configured for provider '{provider}'.")

    if provider == "azure":
        client = AsyncAzureOpenAI(
            azure_endpoint=settings.azure_openai_endpoint,
            api_key=settings.azure_openai_api_key,
            api_version="2024-12-01-preview",
        )
        model = settings.azure_openai_deployment
    elif provider == "local":
        client = AsyncOpenAI(
            base_url=settings.local_llm_base_url,
            api_key="not-needed",
        )
        model = settings.local_llm_model
    elif provider == "openai":
        client = AsyncOpenAI(api_key=settings.openai_api_key)
        model = settings.openai_model
    else:  # default: GitHub Models
        client = AsyncOpenAI(
            base_url=settings.github_models_endpoint,
            api_key=settings.github_token,
        )
        model = settings.github_model

    logger.info("Chat backend ready — provider=%s model=%s", provider, model)
    return OpenAIChatBackend(client, model, temperature=settings.llm_temperature)
