"""Cooperative cancellation for streaming generations."""

from dataclasses import dataclass


@dataclass
class CancellationToken:
    """
    Polled cancellation flag shared between the host and one generation.

    The host calls cancel() from any coroutine or thread; the streaming
    loop checks is_cancelled once per chunk.
    """

    _cancelled: bool = False

    def cancel(self) -> None:
        """Request cancellation (single bool write)."""
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled
