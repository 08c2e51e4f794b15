"""IRC subsystem package.

Contains the parser, dispatcher, welcome join hook, read loop, error channel
and transport.
"""

from .dispatcher import Hook, IRCDispatcher  # noqa: F401
from .error_channel import ErrorChannel  # noqa: F401
from .join import RPL_WELCOME, install_welcome_join, welcome_join_hook  # noqa: F401
from .listener import IRCListener  # noqa: F401
from .models import DispatcherPhase, Message  # noqa: F401
from .parser import parse_irc_message  # noqa: F401

__all__ = [
    "DispatcherPhase",
    "ErrorChannel",
    "Hook",
    "IRCDispatcher",
    "IRCListener",
    "Message",
    "RPL_WELCOME",
    "install_welcome_join",
    "parse_irc_message",
    "welcome_join_hook",
]
