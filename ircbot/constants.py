"""
Configuration constants for the IRC bot

Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Config file used when neither -c nor IRCBOT_CONF_FILE is given
DEFAULT_CONFIG_FILE = os.getenv("IRCBOT_CONF_FILE", "ircbot.json")

# Default IRC port (plaintext)
DEFAULT_IRC_PORT = 6667

# Seconds to wait after RPL_WELCOME before joining (lets NickServ & co settle)
WELCOME_JOIN_DELAY = _get_env_float("WELCOME_JOIN_DELAY", 3.0)

# Timeout for outbound HTTP requests made by modules
HTTP_TIMEOUT = _get_env_float("HTTP_TIMEOUT", 10.0)

# Max bytes of a single protocol line (IRCv3 tags plus the 512 byte message)
READ_LINE_LIMIT = _get_env_int("READ_LINE_LIMIT", 8704)

# How long shutdown waits for the error consumer to drain
ERROR_CHANNEL_JOIN_TIMEOUT = _get_env_float("ERROR_CHANNEL_JOIN_TIMEOUT", 5.0)

# Transport connect timeout
CONNECT_TIMEOUT = _get_env_float("CONNECT_TIMEOUT", 30.0)
