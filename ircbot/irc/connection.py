"""Transport establishment (plain TCP or TLS)."""

from __future__ import annotations

import socket
import ssl

from ..config.model import BotConfig
from ..constants import CONNECT_TIMEOUT
from ..errors import NetworkError
from ..logs.logger import logger


def _tls_context(config: BotConfig) -> ssl.SSLContext:
    try:
        context = ssl.create_default_context(cafile=config.cert)
        if config.client_cert and config.client_key:
            context.load_cert_chain(config.client_cert, config.client_key)
    except (OSError, ssl.SSLError) as e:
        raise NetworkError(
            f"failed to load certificates: {e}",
            data={"cert": config.cert, "client_cert": config.client_cert},
        ) from e
    return context


def open_connection(config: BotConfig) -> socket.socket:
    """Dial the configured server.

    TLS is used when a CA certificate is configured; a client certificate and
    key are presented when both are set.

    Raises:
        NetworkError: dial, certificate or handshake failure.
    """
    tls = bool(config.cert)
    logger.log_event("connection", "connecting", host=config.host, port=config.port)
    context = _tls_context(config) if tls else None
    try:
        sock = socket.create_connection(
            (config.host, config.port), timeout=CONNECT_TIMEOUT
        )
    except OSError as e:
        raise NetworkError(
            f"could not connect to {config.host}:{config.port}: {e}",
            data={"host": config.host, "port": config.port},
        ) from e
    # Reads block indefinitely once connected
    sock.settimeout(None)
    if context is not None:
        try:
            sock = context.wrap_socket(sock, server_hostname=config.host)
        except (OSError, ssl.SSLError) as e:
            sock.close()
            raise NetworkError(
                f"TLS handshake with {config.host} failed: {e}",
                data={"host": config.host},
            ) from e
    logger.log_event(
        "connection", "connected", host=config.host, port=config.port, tls=tls
    )
    return sock
