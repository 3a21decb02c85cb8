from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from openai import AsyncOpenAI

from services.prompt_builder import ChatMessage

logger = logging.getLogger(__name__)


class CompletionError(RuntimeError):
    """Raised when the completion service fails or returns no text."""


class CompletionClient(Protocol):
    async def complete(self, messages: Sequence[ChatMessage]) -> str: ...


class OpenAICompletionClient:
    """Request a single chat completion from OpenAI and return its text."""

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o",
        temperature: float = 0.8,
        max_tokens: int = 2000,
        timeout: float = 60.0,
    ) -> None:
        # Without a key every call fails as a provider error, after request validation.
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0) if api_key else None
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        if self._client is None:
            raise CompletionError("OpenAI API key is not configured.")

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[message.as_dict() for message in messages],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:  # noqa: BLE001 - surface OpenAI errors as completion failures
            raise CompletionError(f"OpenAI request failed: {type(exc).__name__}") from exc

        if not response.choices:
            raise CompletionError("OpenAI returned no choices.")

        content = response.choices[0].message.content
        if not content:
            raise CompletionError("OpenAI returned empty response.")

        logger.debug("Received %s chars from %s", len(content), self._model)
        return content
