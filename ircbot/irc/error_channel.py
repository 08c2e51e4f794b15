"""Asynchronous hook-error reporting.

The read loop pushes failures onto an unbounded queue; a single daemon
thread drains it and logs each entry, so a slow log sink never stalls
message dispatch.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

from ..constants import ERROR_CHANNEL_JOIN_TIMEOUT
from ..errors.handling import log_error
from ..logs.logger import logger

ErrorHandler = Callable[[BaseException], None]

_STOP = object()


def _log_hook_error(error: BaseException) -> None:
    log_error("Hook failed", error)


class ErrorChannel:
    def __init__(self, handler: ErrorHandler | None = None):
        self.handler = handler or _log_hook_error
        self._queue: queue.SimpleQueue = queue.SimpleQueue()
        self._thread: threading.Thread | None = None
        self.reported = 0

    def put(self, error: BaseException) -> None:
        """Enqueue ``error``; never blocks."""
        self._queue.put(error)

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("error consumer already started")
        self._thread = threading.Thread(
            target=self._consume, name="ircbot-errors", daemon=True
        )
        self._thread.start()
        logger.log_event("errors", "consumer_start", level=logging.DEBUG)

    def close(self, timeout: float | None = ERROR_CHANNEL_JOIN_TIMEOUT) -> None:
        """Stop the consumer after everything queued so far was handled."""
        if self._thread is None:
            return
        self._queue.put(_STOP)
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.log_event(
                "errors", "drain_timeout", level=logging.WARNING, timeout=timeout
            )
            return
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _consume(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            self.reported += 1
            try:
                self.handler(item)
            except Exception as e:  # noqa: BLE001
                logger.log_event(
                    "errors",
                    "handler_failed",
                    level=logging.ERROR,
                    error=str(e),
                    error_type=type(e).__name__,
                )
        logger.log_event(
            "errors", "consumer_stop", level=logging.DEBUG, count=self.reported
        )
