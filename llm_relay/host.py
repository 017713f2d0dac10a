"""
Host interface - What the relay needs from the launcher that runs it.

The launcher owns the result list and the clipboard. The relay only
publishes ResultsUpdatedEvent objects and asks for clipboard writes.
"""

from dataclasses import dataclass
from typing import Protocol

from llm_relay.search.result import ResultItem
from llm_relay.services.cancellation import CancellationToken


@dataclass(frozen=True)
class ResultsUpdatedEvent:
    """New result rows for a query, superseding any earlier rows for it."""
    query: str
    token: CancellationToken
    results: list[ResultItem]


class LauncherHost(Protocol):
    """Callbacks the launcher provides to the relay."""

    def notify_update(self, event: ResultsUpdatedEvent) -> None:
        """Replace the displayed rows for event.query."""
        ...

    def copy_to_clipboard(self, text: str) -> None:
        """Write text to the system clipboard."""
        ...
