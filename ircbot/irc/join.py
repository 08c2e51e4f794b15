"""Channel join on RPL_WELCOME."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from ..constants import WELCOME_JOIN_DELAY
from ..logs.logger import logger
from .dispatcher import Hook, IRCDispatcher
from .models import Message

RPL_WELCOME = "001"


def welcome_join_hook(
    channels: Sequence[str],
    delay: float = WELCOME_JOIN_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> Hook:
    """Build the hook that joins ``channels`` once the server welcomes us.

    The hook sleeps inside the dispatch call, so the read loop stalls for
    ``delay`` seconds before the JOIN goes out and before the next line is
    handled.
    """
    targets = list(channels)

    def join_channels(client: IRCDispatcher, msg: Message) -> None:
        sleep(delay)
        if not targets:
            logger.log_event("irc", "welcome_no_channels", user=client.nick)
            return
        joined = ",".join(targets)
        logger.log_event("irc", "welcome_join", user=client.nick, channels=joined)
        client.write("JOIN %s", joined)

    return join_channels


def install_welcome_join(
    client: IRCDispatcher, channels: Sequence[str], delay: float = WELCOME_JOIN_DELAY
) -> None:
    client.register_hook(RPL_WELCOME, welcome_join_hook(channels, delay))
