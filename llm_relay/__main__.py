"""
Terminal host for the LLM relay.

Drives the handler the way a launcher would: shows the initial row,
selects it, redraws the streaming row on every update and optionally
selects the finished row to copy the text.

Usage:
    python -m llm_relay [--copy] PROMPT...
"""

import asyncio
import signal
import sys

from loguru import logger

from llm_relay.config import load_config
from llm_relay.host import ResultsUpdatedEvent
from llm_relay.search.handlers.llm_query import COMPLETED_SUBTITLE, LLMQueryHandler
from llm_relay.services.cancellation import CancellationToken
from llm_relay.utils.helpers import copy_to_clipboard


class TerminalHost:
    """Prints result rows to stdout and copies with wl-copy."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self.last_results = []

    def notify_update(self, event: ResultsUpdatedEvent) -> None:
        self.last_results = event.results
        for item in event.results:
            self.stream.write(f"\r\033[K{item.title}  [{item.subtitle}]")
        self.stream.flush()

    def copy_to_clipboard(self, text: str) -> None:
        copy_to_clipboard(text)


async def _select(item, token: CancellationToken) -> bool:
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, token.cancel)
    except (NotImplementedError, ValueError):
        logger.debug("Signal handlers unsupported, Ctrl-C will abort instead of cancel")
    return await item.async_action()


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    copy = "--copy" in args
    if copy:
        args.remove("--copy")

    if not args:
        print("Usage: python -m llm_relay [--copy] PROMPT...", file=sys.stderr)
        return 1

    query = " ".join(args)
    host = TerminalHost()
    handler = LLMQueryHandler(load_config(), host)
    token = CancellationToken()

    results = handler.get_results(query, token)
    item = results[0]
    print(f"{item.title}  [{item.subtitle}]")
    if item.async_action is None:
        return 1

    asyncio.run(_select(item, token))
    print()

    final = host.last_results[0] if host.last_results else None
    if final is None or final.subtitle != COMPLETED_SUBTITLE:
        return 1

    if copy and final.action is not None:
        final.action()
    return 0


if __name__ == "__main__":
    sys.exit(main())
