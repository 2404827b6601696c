"""Claude API client that streams generated legal documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anthropic

from armanlegal.errors import ProducerError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class DocumentDrafter:
    """Streams a drafted document from the Claude API.

    Uses the async Anthropic client for non-blocking API calls.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 4096,
        system_prompt: str = "",
    ) -> None:
        """Initialize the drafter.

        Args:
            api_key: Anthropic API key. Falls back to ``LLM__API_KEY``.
            model: Model identifier to use.
            max_tokens: Upper bound on the generated document length.
            system_prompt: Drafting instructions sent with every request.

        Raises:
            ValueError: If no API key is available.
        """
        if api_key is None:
            from armanlegal.config import get_settings

            api_key = get_settings().llm.api_key.get_secret_value()
        if not api_key:
            raise ValueError("API key required. Set LLM__API_KEY or pass api_key.")

        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt
        self._client = anthropic.AsyncAnthropic(api_key=self.api_key)

    async def stream_document(self, prompt: str) -> AsyncIterator[str]:
        """Stream the document generated for *prompt*.

        Yields:
            Text chunks as they arrive.

        Raises:
            ProducerError: If the API call fails, including mid-stream.
        """
        api_params: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.system_prompt:
            api_params["system"] = self.system_prompt

        received = 0
        try:
            async with self._client.messages.stream(**api_params) as stream:
                async for text in stream.text_stream:
                    received += len(text)
                    yield text
        except anthropic.APIError as e:
            logger.error(
                "Stream error after %d chars: %s", received, e, exc_info=True
            )
            raise ProducerError(f"Document generation failed: {e}") from e

        logger.info("Streamed document: %d chars from %s", received, self.model)
