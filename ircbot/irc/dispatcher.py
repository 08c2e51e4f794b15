"""Hook registry and message dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from ..errors import HookError, NetworkError, ParseError, RegistrationClosedError
from ..logs.logger import logger
from .models import DispatcherPhase, Message
from .parser import parse_irc_message

Hook = Callable[["IRCDispatcher", Message], None]


class Connection(Protocol):
    def sendall(self, data: bytes, /) -> None: ...  # noqa: E701


class ErrorSink(Protocol):
    def put(self, item: BaseException, /) -> None: ...  # noqa: E701


def _hook_name(hook: Hook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)


def _command_key(command: str) -> str:
    # Servers send verbs uppercase, modules register them lowercase
    return command.lower()


class IRCDispatcher:
    """Owns the connection, the client identity and the hook registry.

    Hooks may only be registered while the dispatcher is in the SETUP phase.
    Once :meth:`start` has been called the registry is read-only, which is what
    lets the read loop look hooks up without locking.
    """

    def __init__(self, connection: Connection):
        self.connection = connection
        self.phase = DispatcherPhase.SETUP
        self.nick: str | None = None
        self.full_name: str | None = None
        self.host: str | None = None
        self._hooks: dict[str, list[Hook]] = {}

    # ---- setup phase -------------------------------------------------
    def setup(self, nick: str, full_name: str, host: str) -> None:
        """Store the client identity and send the registration handshake."""
        self.nick = nick
        self.full_name = full_name
        self.host = host
        self.register_hook("ping", _pong)
        logger.log_event("irc", "setup", user=nick, nick=nick, host=host)
        self.write("NICK %s", nick)
        self.write("USER %s %s * :%s", nick, host, full_name)

    def register_hook(self, command: str, hook: Hook) -> None:
        if self.phase is not DispatcherPhase.SETUP:
            raise RegistrationClosedError(
                f"cannot register hook for {command!r} after dispatch started",
                data={"command": command},
            )
        self._hooks.setdefault(_command_key(command), []).append(hook)
        logger.log_event(
            "irc",
            "hook_registered",
            level=logging.DEBUG,
            command=command,
            hook=_hook_name(hook),
        )

    def hooks_for(self, command: str) -> tuple[Hook, ...]:
        return tuple(self._hooks.get(_command_key(command), ()))

    def start(self) -> None:
        """Close registration; called once when the read loop begins."""
        if self.phase is DispatcherPhase.RUNNING:
            raise RuntimeError("dispatcher already running")
        self.phase = DispatcherPhase.RUNNING
        logger.log_event("irc", "running", level=logging.DEBUG, user=self.nick)

    # ---- running phase -----------------------------------------------
    def handle(self, raw_line: str, errors: ErrorSink) -> None:
        """Parse ``raw_line`` and run every hook bound to its command.

        Malformed lines are dropped. A failing hook is reported on ``errors``
        and does not stop the hooks registered after it.
        """
        try:
            message = parse_irc_message(raw_line)
        except ParseError as e:
            logger.log_event(
                "irc",
                "parse_failed",
                level=logging.DEBUG,
                user=self.nick,
                reason=str(e),
                line=e.line,
            )
            return

        for hook in self._hooks.get(_command_key(message.command), ()):
            try:
                hook(self, message)
            except Exception as e:  # noqa: BLE001
                errors.put(HookError(message.command, _hook_name(hook), e))

    def reply_target(self, msg: Message) -> str | None:
        """Channel ``msg`` was sent to, or the sender for private messages."""
        if msg.receiver and self.nick and msg.receiver == self.nick:
            return msg.nick
        return msg.receiver

    def write(self, fmt: str, *args: object) -> None:
        """Send one protocol line, ``fmt % args`` followed by CRLF."""
        line = fmt % args if args else fmt
        logger.log_event("irc", "write", level=logging.DEBUG, user=self.nick, line=line)
        try:
            self.connection.sendall(f"{line}\r\n".encode("utf-8"))
        except OSError as e:
            raise NetworkError(f"write failed: {e}", data={"line": line}) from e


def _pong(client: IRCDispatcher, msg: Message) -> None:
    token = msg.data if msg.data is not None else (msg.params[0] if msg.params else "")
    client.write("PONG :%s", token)
    logger.log_event("irc", "ping", level=logging.DEBUG, user=client.nick)
