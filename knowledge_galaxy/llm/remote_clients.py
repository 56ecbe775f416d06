"""Remote client for the Anthropic Messages API.

The client only moves text: it returns the model's raw reply and leaves all
parsing and validation to the knowledge graph parser.
"""

from __future__ import annotations

import logging
import httpx

from ..api.config import config
from ..utils.constants import ANTHROPIC_API_VERSION
from ..utils.exceptions import LLMError, LLMTimeoutError, RateLimitError
from ..utils.types import LLMResponse

logger = logging.getLogger(__name__)


class AnthropicGraphClient:
    """Client for generating knowledge graph JSON with Claude models."""

    def __init__(
        self,
        api_key: str,
        endpoint: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Anthropic API key
            endpoint: Messages API URL
            model: Model identifier
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.endpoint = endpoint or config.GRAPH_MODEL_ENDPOINT
        self.model = model or config.GRAPH_MODEL
        self.max_tokens = max_tokens or config.GRAPH_MAX_TOKENS
        self.temperature = (
            temperature if temperature is not None else config.GRAPH_TEMPERATURE
        )
        self.timeout = timeout or config.GRAPH_TIMEOUT_SECONDS
        self._transport = transport

    async def generate(self, prompt: str, system: str | None = None) -> LLMResponse:
        """Send one user message and return the text of the reply.

        Args:
            prompt: User message
            system: Optional system prompt

        Returns:
            Raw reply text

        Raises:
            LLMTimeoutError: If the request exceeds the timeout
            RateLimitError: If rate limit is hit
            LLMError: For any other HTTP failure or an empty reply
        """
        body = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            body["system"] = system

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self.endpoint,
                    headers={
                        "x-api-key": self.api_key,
                        "anthropic-version": ANTHROPIC_API_VERSION,
                        "content-type": "application/json",
                    },
                    json=body,
                )

                if response.status_code == 429:
                    logger.warning("Anthropic rate limit hit (model: %s)", self.model)
                    raise RateLimitError("Anthropic rate limit exceeded")

                response.raise_for_status()
                data = response.json()

            except httpx.TimeoutException as e:
                logger.warning(
                    "Anthropic request timed out after %ss (model: %s)",
                    self.timeout,
                    self.model,
                )
                raise LLMTimeoutError(
                    f"Model request timed out after {self.timeout}s"
                ) from e
            except httpx.HTTPError as e:
                logger.error(f"Anthropic API error: {e}")
                raise LLMError(f"Model request failed: {e}") from e
            except ValueError as e:
                raise LLMError("Model response body is not JSON") from e

        return _first_text_block(data)


def _first_text_block(data) -> LLMResponse:
    content = data.get("content") if isinstance(data, dict) else None
    if isinstance(content, list):
        for block in content:
            if isinstance(block, dict) and block.get("type", "text") == "text":
                text = block.get("text")
                if isinstance(text, str):
                    return text
    raise LLMError("Model response contained no text content")
