"""Announces type, size and HTML title of links posted in chat."""

from __future__ import annotations

import html
import logging
import re
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, Field

from ..constants import HTTP_TIMEOUT
from ..errors import ModuleError
from ..irc.dispatcher import IRCDispatcher
from ..irc.models import Message
from ..logs.logger import logger
from .base import Module
from .module_set import ModuleSet

DEFAULT_URL_REGEX = r"https?://[^\s<>\"']+"
MAX_BODY_BYTES = 1024 * 1024

_TITLE_RE = re.compile(r"<title[^>]*>(.+?)</title>", re.IGNORECASE | re.DOTALL)
_SPACES_RE = re.compile(r" {2,}")


class URLConfig(BaseModel):
    regex: str = DEFAULT_URL_REGEX
    exclude: list[str] = Field(default_factory=list)


def sanitize_title(title: str) -> str:
    normalized = title.replace("\r", " ").replace("\n", " ")
    return _SPACES_RE.sub(" ", normalized).strip()


def extract_title(body: str) -> str | None:
    match = _TITLE_RE.search(body)
    if not match:
        return None
    title = sanitize_title(html.unescape(match.group(1)))
    return title or None


def _host_port(link: str) -> str:
    """Host of ``link`` including any explicit port, without userinfo."""
    return urlsplit(link).netloc.rpartition("@")[2]


class URLModule(Module):
    config_model = URLConfig

    def __init__(self, http_client: httpx.Client | None = None) -> None:
        super().__init__()
        self._http = http_client
        self._re: re.Pattern[str] | None = None

    def name(self) -> str:
        return "url"

    def help(self) -> str:
        return "Displays HTML titles for HTTP links."

    def load(self, client: IRCDispatcher) -> None:
        try:
            self._re = re.compile(self.config.regex)
        except re.error as e:
            raise ModuleError(f"invalid regex {self.config.regex!r}: {e}") from e
        client.register_hook("privmsg", self.url_cmd)

    def is_excluded(self, host: str | None) -> bool:
        if not host:
            return False
        return host.lower() in (h.lower() for h in self.config.exclude)

    def url_cmd(self, client: IRCDispatcher, msg: Message) -> None:
        if not msg.data or self._re is None:
            return
        match = self._re.search(msg.data)
        if not match:
            return
        link = match.group(0)
        try:
            host = _host_port(link)
        except ValueError:
            return
        if self.is_excluded(host):
            logger.log_event("url", "excluded", level=logging.DEBUG, host=host)
            return
        target = client.reply_target(msg)
        if not target:
            return

        logger.log_event("url", "fetch", level=logging.DEBUG, user=client.nick, url=link)
        try:
            info = self.fetch_info(link)
        except httpx.HTTPError as e:
            raise ModuleError(f"fetching {link} failed: {e}", data={"url": link}) from e
        client.write("NOTICE %s :%s", target, info)

    def fetch_info(self, link: str) -> str:
        if self._http is not None:
            return self._get_info(self._http, link)
        with httpx.Client(timeout=HTTP_TIMEOUT, follow_redirects=True) as http:
            return self._get_info(http, link)

    def _get_info(self, http: httpx.Client, link: str) -> str:
        with http.stream("GET", link) as resp:
            return self.info_string(resp)

    def info_string(self, resp: httpx.Response) -> str:
        ctype = resp.headers.get("Content-Type", "")
        if not ctype:
            raise ModuleError("missing content-type header", data={"url": str(resp.url)})
        mtype = ctype.split(";", 1)[0].strip().lower()
        if not mtype or "/" not in mtype:
            raise ModuleError(f"malformed content-type {ctype!r}", data={"url": str(resp.url)})

        info = f"URL -- Type: {mtype}"
        csize = resp.headers.get("Content-Length")
        if csize:
            info = f"{info}. Size: {csize} bytes"

        if mtype == "text/html":
            title = extract_title(self._read_body(resp))
            if title:
                info = f"{info}. Title: {title}"
        return info

    @staticmethod
    def _read_body(resp: httpx.Response) -> str:
        chunks: list[bytes] = []
        size = 0
        for chunk in resp.iter_bytes():
            chunks.append(chunk)
            size += len(chunk)
            if size >= MAX_BODY_BYTES:
                break
        encoding = resp.charset_encoding or "utf-8"
        try:
            return b"".join(chunks).decode(encoding, errors="replace")
        except LookupError:
            return b"".join(chunks).decode("utf-8", errors="replace")


def init(module_set: ModuleSet) -> None:
    module_set.register(URLModule())
