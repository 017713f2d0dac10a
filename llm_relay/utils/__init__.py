# LLM Relay Utilities Package
"""
Shared utility functions and helpers for the LLM relay.
"""

from .helpers import copy_to_clipboard, load_settings

__all__ = ["copy_to_clipboard", "load_settings"]
