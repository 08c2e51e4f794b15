from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_IRC_PORT


class BotConfig(BaseModel):
    """Connection, identity and per-module configuration.

    Attributes:
        host: IRC server host name.
        port: IRC server port.
        channels: Channels joined after the welcome reply, in this order.
        nick: Nickname to register with.
        name: Real name sent in the USER handshake.
        cert: CA certificate bundle; setting it switches the transport to TLS.
        client_cert: Client certificate presented to the server (needs client_key).
        client_key: Private key for client_cert.
        modules: Raw configuration fragments keyed by module name.
    """

    host: str = "localhost"
    port: int = Field(default=DEFAULT_IRC_PORT, ge=1, le=65535)
    channels: list[str] = Field(default_factory=list)
    nick: str = Field(default="ircbot", min_length=1)
    name: str = "ircbot"
    cert: str | None = None
    client_cert: str | None = None
    client_key: str | None = None
    modules: dict[str, Any] = Field(default_factory=dict)

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> list[str]:
        """Strip whitespace and drop empty entries, keeping order."""
        if not isinstance(v, list):
            raise ValueError("channels must be a list")
        validated = []
        for c in v:
            if isinstance(c, str):
                stripped = c.strip()
                if stripped:
                    validated.append(stripped)
        return validated

    @field_validator("nick")
    @classmethod
    def validate_nick(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("nick must not contain whitespace")
        return v

    @property
    def use_tls(self) -> bool:
        return bool(self.cert)
