"""
Result items - The rows a handler hands back to the launcher.

A handler never mutates a row it already returned; every change is a
new list of ResultItem published through the host.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

DEFAULT_ICON = "images/app.png"


@dataclass(frozen=True)
class ResultItem:
    """A single result row as displayed by the launcher."""
    title: str
    subtitle: str = ""
    icon: str = DEFAULT_ICON
    action: Optional[Callable[[], bool]] = None  # run on selection
    async_action: Optional[Callable[[], Awaitable[bool]]] = None  # awaited on selection


def make_result(
    title: str,
    subtitle: str,
    action: Optional[Callable[[], bool]] = None,
    async_action: Optional[Callable[[], Awaitable[bool]]] = None,
    icon: str = DEFAULT_ICON,
) -> list[ResultItem]:
    """Wrap a single result row in the list shape the launcher expects."""
    return [
        ResultItem(
            title=title,
            subtitle=subtitle,
            icon=icon,
            action=action,
            async_action=async_action,
        )
    ]
