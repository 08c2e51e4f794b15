#!/usr/bin/env python3
"""
Main entry point for the IRC bot
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .config import BotConfig, load_config
from .constants import DEFAULT_CONFIG_FILE, WELCOME_JOIN_DELAY
from .errors import InternalError, log_error
from .irc import ErrorChannel, IRCDispatcher, IRCListener, install_welcome_join
from .irc.connection import open_connection
from .irc.dispatcher import Connection
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .modules import MODULE_INITS, ModuleInit, ModuleSet


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="IRC bot with pluggable modules")
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help="configuration file (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="echo every received line"
    )
    return parser.parse_args(argv)


def build_client(
    connection: Connection,
    config: BotConfig,
    module_inits: Sequence[ModuleInit] = MODULE_INITS,
    join_delay: float = WELCOME_JOIN_DELAY,
) -> IRCDispatcher:
    """Create the dispatcher, install every hook and send the handshake.

    Raises:
        ModuleLoadError: a module failed to load.
        NetworkError: the handshake could not be written.
    """
    client = IRCDispatcher(connection)
    install_welcome_join(client, config.channels, join_delay)

    module_set = ModuleSet(client, config.modules)
    for init in module_inits:
        init(module_set)

    client.setup(config.nick, config.name, config.host)
    module_set.load_all()
    return client


def main(argv: Sequence[str] | None = None) -> int:
    """Run the bot until the connection closes.

    Returns the process exit status: 1 for fatal startup errors, 0 otherwise.
    """
    LoggerConfigurator().configure()
    args = parse_args(argv)
    logger.log_event("app", "start", config_file=args.config)

    try:
        config = load_config(args.config)
        connection = open_connection(config)
    except InternalError as e:
        log_error("Startup failed", e)
        return 1

    errors = ErrorChannel()
    errors.start()
    try:
        try:
            client = build_client(connection, config, join_delay=WELCOME_JOIN_DELAY)
        except InternalError as e:
            log_error("Startup failed", e)
            return 1
        with connection.makefile("rb") as stream:
            IRCListener(client, stream, errors, verbose=args.verbose).listen()
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted")
    finally:
        errors.close()
        connection.close()
        logger.log_event("connection", "closed")
        logger.log_event("app", "shutdown")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
