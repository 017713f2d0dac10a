"""
Search handlers - Query processors.

Each handler turns a query into result rows for the launcher.
"""

from .llm_query import LLMQueryHandler, StreamState

__all__ = [
    "LLMQueryHandler",
    "StreamState",
]
