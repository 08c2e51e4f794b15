"""Pure parsing helpers for IRC protocol lines.

Keeps logic side-effect free so it can be unit tested easily.
"""

from __future__ import annotations

import re

from ..errors import ParseError
from .models import Message

# RFC 1459: command = 1*letter / 3digit
_COMMAND_RE = re.compile(r"^(?:[A-Za-z]+|[0-9]{3})$")


def parse_irc_message(raw_line: str) -> Message:
    """Parse a raw IRC line into a Message.

    Grammar: ``[":" prefix " "] command *(" " param) [" :" trailing]``.
    IRCv3 tags are skipped. Raises ParseError for anything that does not
    yield exactly one valid command token.
    """
    original = raw_line.rstrip("\r\n")
    working = original

    if working.startswith("@"):
        tag_end = working.find(" ")
        if tag_end == -1:
            raise ParseError("tags without command", original)
        working = working[tag_end + 1 :].lstrip(" ")

    prefix: str | None = None
    if working.startswith(":"):
        prefix_end = working.find(" ")
        if prefix_end == -1:
            raise ParseError("prefix without command", original)
        prefix = working[1:prefix_end]
        if not prefix:
            raise ParseError("empty prefix", original)
        working = working[prefix_end + 1 :]

    data: str | None = None
    if working.startswith(":"):
        raise ParseError("missing command", original)
    if " :" in working:
        working, data = working.split(" :", 1)

    parts = working.split()
    if not parts:
        raise ParseError("missing command", original)

    command = parts[0]
    if not _COMMAND_RE.match(command):
        raise ParseError(f"invalid command token {command!r}", original)

    return Message(
        raw=original,
        prefix=prefix,
        command=command,
        params=tuple(parts[1:]),
        data=data,
    )

