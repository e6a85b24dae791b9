# noqa: D205,D400
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import openai

from answer_gate.config import Settings, get_settings
from answer_gate.errors import JudgmentUnavailableError

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Lightweight wrapper around the OpenAI chat-completions API.

    Exposes `judge(prompt)`: one user message in, the reply text out. Every
    failure (SDK error, error payload, empty reply) surfaces as
    JudgmentUnavailableError. There are no retries.
    """

    def __init__(self, settings: Settings | None = None, *, model: str | None = None) -> None:
        settings = settings or get_settings()
        self._api_key = settings.openai_api_key
        self._base_url = settings.openai_base_url
        self._timeout = settings.judge_timeout_s
        self._client: Optional[openai.AsyncOpenAI] = None
        self.model = str(model or settings.openai_model)
        self.max_tokens = settings.judge_max_tokens
        self.temperature = settings.judge_temperature

    @property
    def client(self) -> openai.AsyncOpenAI:  # noqa: D401
        """Lazily initialise the AsyncOpenAI client."""
        if self._client is None:
            if not self._api_key:
                raise JudgmentUnavailableError("OpenAI client not initialised (missing API key)")
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def call(self, messages: List[Dict[str, str]], *, temperature: float | None = None) -> Any:
        """Invoke the chat-completions endpoint and return the first choice's message."""

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,  # type: ignore[arg-type]
                temperature=self.temperature if temperature is None else temperature,
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as exc:
            raise JudgmentUnavailableError(f"OpenAI API error: {exc}") from exc

        if not response.choices:
            raise JudgmentUnavailableError("OpenAI API returned no choices")
        return response.choices[0].message

    async def judge(self, prompt: str) -> str:
        """Send a single classification prompt and return the raw reply text."""

        message = await self.call(messages=[{"role": "user", "content": prompt}])
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise JudgmentUnavailableError("OpenAI API returned empty content")
        logger.debug("Judgment reply (%d chars) from %s", len(content), self.model)
        return content
