# LLM Relay Services Package
"""
Backend services for the LLM relay.

Services handle the remote chat API and cancellation signalling.
"""

from .cancellation import CancellationToken
from .chat_client import ChatClient, ClientState, Ready, TextChunk, Unconfigured, init_client

__all__ = [
    "CancellationToken",
    "ChatClient",
    "ClientState",
    "Ready",
    "TextChunk",
    "Unconfigured",
    "init_client",
]
