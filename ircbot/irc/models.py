"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DispatcherPhase(Enum):
    SETUP = auto()
    RUNNING = auto()


@dataclass(frozen=True, slots=True)
class Message:
    """One parsed protocol line.

    ``params`` holds the middle parameters only; the trailing parameter is
    kept apart in ``data``.
    """

    raw: str
    prefix: str | None
    command: str
    params: tuple[str, ...] = ()
    data: str | None = None

    @property
    def receiver(self) -> str | None:
        """Target channel or user (first middle parameter)."""
        return self.params[0] if self.params else None

    @property
    def nick(self) -> str | None:
        """Nickname part of a ``nick!user@host`` prefix."""
        if not self.prefix:
            return None
        return self.prefix.split("!", 1)[0]
