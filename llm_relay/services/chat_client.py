"""
Chat Client - Streaming chat completions over the OpenAI API.

Wraps openai.AsyncOpenAI behind a single capability:

  stream_chat_completion(model, prompt) → async iterator of TextChunk

Client construction is modelled as an explicit state instead of a
nullable attribute:

  Unconfigured   no API key, or the client could not be built
  Ready(client)  requests can be made
"""

from dataclasses import dataclass, field
from typing import AsyncIterator, Union

from loguru import logger
from openai import AsyncOpenAI

from llm_relay.config import RelayConfig


@dataclass
class TextChunk:
    """One streamed chunk with zero or more text fragments."""
    content_updates: list[str] = field(default_factory=list)


class ChatClient:
    """Stream chat completions from an OpenAI-compatible endpoint."""

    def __init__(self, api: AsyncOpenAI):
        self.api = api

    async def stream_chat_completion(self, model: str, prompt: str) -> AsyncIterator[TextChunk]:
        """
        Send the prompt as a single user message and yield chunks as they arrive.

        Args:
            model: Model identifier
            prompt: Raw user text

        Yields:
            TextChunk per streamed response chunk

        Raises:
            openai.OpenAIError: On transport or API failures, at any point
        """
        stream = await self.api.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            stream=True,
        )
        try:
            async for chunk in stream:
                yield self._to_text_chunk(chunk)
        finally:
            # Releases the HTTP connection when the consumer stops early
            await stream.close()

    @staticmethod
    def _to_text_chunk(chunk) -> TextChunk:
        """Collect non-empty delta contents from every choice."""
        updates = []
        for choice in chunk.choices:
            delta = choice.delta
            if delta is not None and delta.content:
                updates.append(delta.content)
        return TextChunk(content_updates=updates)


@dataclass(frozen=True)
class Unconfigured:
    """No usable client."""


@dataclass(frozen=True)
class Ready:
    """Client constructed and usable."""
    client: ChatClient


ClientState = Union[Unconfigured, Ready]


def init_client(config: RelayConfig) -> ClientState:
    """
    Build the chat client for the given configuration.

    Args:
        config: Relay configuration

    Returns:
        Ready(ChatClient) on success, Unconfigured if the key is missing
        or construction fails
    """
    if not config.has_api_key:
        # Don't initialize API client if API key is missing
        logger.debug("No API key configured, chat client not initialized")
        return Unconfigured()

    try:
        api = AsyncOpenAI(api_key=config.api_key, base_url=config.api_base)
    except Exception:
        logger.exception(f"Failed to initialize chat client for {config.api_base}")
        return Unconfigured()

    logger.debug(f"Chat client initialized for {config.api_base}")
    return Ready(ChatClient(api))
