"""Structured event logger."""

from __future__ import annotations

import logging
import os


class BotLogger:
    """Emits ``domain_action`` events on a stdlib logger.

    Handlers are left to :class:`ircbot.logging_config.LoggerConfigurator`;
    this class only builds the message text.
    """

    def __init__(self, name: str = "ircbot") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 28
        self.logger = logging.getLogger(name)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import so reload_event_templates() is picked up.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        kw: dict[str, object] = dict(kwargs)
        user = kw.pop("user", None)
        prefix = self._build_prefix(user if isinstance(user, str) else None)
        if self._is_debug_enabled():
            msg = self._build_debug_message(event_name, prefix, human_text, kw)
        else:
            msg = f"{prefix} {human_text}"
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _build_prefix(user: str | None) -> str:
        user_label = user or "system"
        padded = user_label.ljust(12)[:12]
        return f"[{padded}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = BotLogger()
