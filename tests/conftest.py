"""
Shared test fixtures for the LLM relay test suite.

Provides temporary settings files, a recording launcher host, and a
scripted chat client that streams canned chunks without network access.
"""

import pytest
import toml

from llm_relay.config import RelayConfig
from llm_relay.services.chat_client import Ready, TextChunk


class RecordingHost:
    """Launcher host that keeps every published event and clipboard write."""

    def __init__(self):
        self.events = []
        self.clipboard = []

    def notify_update(self, event):
        self.events.append(event)

    def copy_to_clipboard(self, text):
        self.clipboard.append(text)

    @property
    def rows(self):
        """(title, subtitle) of the single row in each published event."""
        return [(e.results[0].title, e.results[0].subtitle) for e in self.events]


class ScriptedChatClient:
    """
    Chat client that streams pre-baked chunks.

    Args:
        chunks: List of fragment lists, one per chunk
        error: Exception raised after all chunks are yielded
        on_chunk: Called with the chunk index just before it is yielded
        close_error: Exception raised while the stream is being closed
    """

    def __init__(self, chunks, error=None, on_chunk=None, close_error=None):
        self.chunks = chunks
        self.error = error
        self.close_error = close_error
        self.on_chunk = on_chunk
        self.pulled = 0
        self.closed = False
        self.calls = []

    async def stream_chat_completion(self, model, prompt):
        self.calls.append((model, prompt))
        try:
            for i, updates in enumerate(self.chunks):
                if self.on_chunk:
                    self.on_chunk(i)
                self.pulled += 1
                yield TextChunk(content_updates=list(updates))
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True
            if self.close_error is not None:
                raise self.close_error


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def config():
    return RelayConfig(
        api_key="sk-test",
        api_base="https://api.example.test/v1",
        model="test-model",
        icon_path="images/app.png",
    )


@pytest.fixture
def keyless_config():
    return RelayConfig(
        api_key=None,
        api_base="https://api.openai.com/v1",
        model="gpt-4.1",
    )


@pytest.fixture
def make_handler(config, host):
    """Build an LLMQueryHandler around a ScriptedChatClient."""
    from llm_relay.search.handlers.llm_query import LLMQueryHandler

    def _make(chunks=(), error=None, on_chunk=None, close_error=None):
        client = ScriptedChatClient(list(chunks), error=error, on_chunk=on_chunk, close_error=close_error)
        handler = LLMQueryHandler(config, host, client_state=Ready(client))
        return handler, client

    return _make


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "llm": {"api_base": "http://localhost:11434/v1", "model": "llama3"},
        "result": {"icon_path": "images/custom.png"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
