"""
LLM Query Handler - Stream a chat completion into the result list.

get_results() is synchronous and does no I/O. It returns a single
"Generate Text" row whose async action runs the streaming call:

  Generating → Streaming (one row per text fragment) → Completed
                                                     → Cancelled
                                                     → Errored

Every row change goes out through host.notify_update(), tagged with the
originating query and cancellation token. Cancellation is polled once
per chunk. The completed row copies the text to the clipboard when
selected.
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Optional

from loguru import logger

from llm_relay.config import RelayConfig
from llm_relay.host import LauncherHost, ResultsUpdatedEvent
from llm_relay.search.result import ResultItem, make_result
from llm_relay.services.cancellation import CancellationToken
from llm_relay.services.chat_client import ClientState, Ready, init_client

GENERATING_SUBTITLE = "Generating text..."
STREAMING_SUBTITLE = "Generating text (streaming)..."
COMPLETED_SUBTITLE = "Generated Text (Click to copy)"
CANCELLED_TITLE = "Cancelled"
ERROR_TITLE = "Error generating text"


@dataclass
class StreamState:
    """Text accumulated by one in-flight generation."""
    buffer: list[str] = field(default_factory=list)
    cancelled: bool = False

    def append(self, text: str) -> None:
        self.buffer.append(text)

    @property
    def text(self) -> str:
        return "".join(self.buffer)


class LLMQueryHandler:
    """Generate text for the typed query with a remote chat model."""

    name = "llm"

    def __init__(self, config: RelayConfig, host: LauncherHost, client_state: Optional[ClientState] = None):
        self.config = config
        self.host = host
        self.client_state = client_state if client_state is not None else init_client(config)

    def get_results(self, query: str, token: CancellationToken) -> list[ResultItem]:
        # Check for missing API key
        if not self.config.has_api_key:
            return self._make_result(
                "Missing API Key",
                "Please set the OPENAI_API_KEY environment variable.",
            )

        # Client is absent when construction was skipped or failed at startup
        if not isinstance(self.client_state, Ready):
            return self._make_result(
                "API Client Not Initialized",
                "Please ensure the OPENAI_API_KEY and OPENAI_API_BASE environment variables are set.",
            )

        return self._make_result(
            "Generate Text",
            f"Use '{self.config.model}' to generate text for: {query}",
            async_action=partial(self.run_streaming_generation, query, token),
        )

    async def run_streaming_generation(self, query: str, token: CancellationToken) -> bool:
        """
        Stream a completion for the query, publishing a row per text fragment.

        Args:
            query: Raw query text, sent as the prompt
            token: Polled before each chunk is processed

        Returns:
            Always False; the copy action on the final row reports success
        """
        def update_result(title, subtitle, action=None):
            self.host.notify_update(ResultsUpdatedEvent(
                query=query,
                token=token,
                results=self._make_result(title, subtitle, action=action),
            ))

        update_result("...", GENERATING_SUBTITLE)
        logger.debug(f"Starting generation with model {self.config.model}")

        state = StreamState()

        try:
            client = self.client_state.client
            stream = client.stream_chat_completion(self.config.model, query)
            try:
                async for chunk in stream:
                    if token.is_cancelled:
                        state.cancelled = True
                        break

                    for update in chunk.content_updates:
                        state.append(update)
                        update_result(state.text, STREAMING_SUBTITLE)
            finally:
                try:
                    await stream.aclose()
                except Exception as e:
                    if not state.cancelled:
                        raise
                    logger.warning(f"Closing cancelled stream failed: {e}")

            if state.cancelled:
                logger.debug("Generation cancelled")
                update_result(CANCELLED_TITLE, "Text generation was cancelled.")
                return False

            text = state.text
            logger.info(f"Generated {len(text)} characters with {self.config.model}")
            update_result(
                text,
                COMPLETED_SUBTITLE,
                action=lambda t=text: self._copy(t),
            )

        except Exception as e:
            logger.warning(f"Text generation failed: {e}")
            update_result(ERROR_TITLE, str(e) or type(e).__name__)

        return False

    def _copy(self, text: str) -> bool:
        """Copy the generated text and report success."""
        self.host.copy_to_clipboard(text)
        return True

    def _make_result(self, title, subtitle, action=None, async_action=None) -> list[ResultItem]:
        return make_result(
            title,
            subtitle,
            action=action,
            async_action=async_action,
            icon=self.config.icon_path,
        )
