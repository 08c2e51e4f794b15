"""Read loop: one line at a time from the transport into the dispatcher."""

from __future__ import annotations

import logging
from typing import BinaryIO

from ..constants import READ_LINE_LIMIT
from ..logs.logger import logger
from .dispatcher import ErrorSink, IRCDispatcher


class IRCListener:
    """Owns the read loop and delegates each line to the dispatcher."""

    def __init__(
        self,
        dispatcher: IRCDispatcher,
        stream: BinaryIO,
        errors: ErrorSink,
        verbose: bool = False,
    ):
        self.dispatcher = dispatcher
        self.stream = stream
        self.errors = errors
        self.verbose = verbose
        self.lines = 0
        self.dropped = 0

    def listen(self) -> None:
        """Dispatch lines until the connection closes.

        Connection loss ends the loop with a logged event; it is not raised.
        Lines longer than ``READ_LINE_LIMIT`` are discarded whole.
        """
        self.dispatcher.start()
        try:
            while True:
                try:
                    raw = self.stream.readline(READ_LINE_LIMIT)
                    if len(raw) >= READ_LINE_LIMIT and not raw.endswith(b"\n"):
                        self._discard_line(len(raw))
                        continue
                except OSError as e:
                    self._connection_lost(str(e))
                    break
                if not raw:
                    self._connection_lost("EOF")
                    break
                self._process_line(raw)
        finally:
            logger.log_event(
                "irc",
                "listener_stop",
                level=logging.DEBUG,
                user=self.dispatcher.nick,
                lines=self.lines,
            )

    def _discard_line(self, size: int) -> None:
        # Consume the remainder so it is never read as a line of its own
        while True:
            chunk = self.stream.readline(READ_LINE_LIMIT)
            size += len(chunk)
            if not chunk or chunk.endswith(b"\n"):
                break
        self.dropped += 1
        logger.log_event(
            "irc",
            "line_too_long",
            level=logging.DEBUG,
            user=self.dispatcher.nick,
            size=size,
            limit=READ_LINE_LIMIT,
        )

    def _process_line(self, raw: bytes) -> None:
        line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
        self.lines += 1
        if self.verbose:
            logger.log_event("irc", "raw_line", user=self.dispatcher.nick, line=line)
        self.dispatcher.handle(line, self.errors)

    def _connection_lost(self, reason: str) -> None:
        logger.log_event(
            "irc",
            "connection_lost",
            level=logging.ERROR,
            user=self.dispatcher.nick,
            reason=reason,
        )
