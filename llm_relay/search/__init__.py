"""
Search package - Result rows and query handlers.

Provides the row type the launcher renders and the handler that fills
it from a streaming chat completion.
"""

from .result import ResultItem, make_result

__all__ = ["ResultItem", "make_result"]
