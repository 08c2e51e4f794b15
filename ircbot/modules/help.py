"""Answers help requests with the help text of every loaded module."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from ..irc.dispatcher import IRCDispatcher
from ..irc.models import Message
from ..logs.logger import logger
from .base import Module
from .module_set import ModuleSet


class HelpConfig(BaseModel):
    trigger: str = Field(default="!help", min_length=1)


class HelpModule(Module):
    config_model = HelpConfig

    def __init__(self, module_set: ModuleSet) -> None:
        super().__init__()
        self.module_set = module_set

    def name(self) -> str:
        return "help"

    def help(self) -> str:
        return f"Lists modules and their help text. Usage: {self.config.trigger} [module]"

    def load(self, client: IRCDispatcher) -> None:
        client.register_hook("privmsg", self.help_cmd)

    def help_cmd(self, client: IRCDispatcher, msg: Message) -> None:
        if not msg.data:
            return
        words = msg.data.split()
        if not words or words[0] != self.config.trigger:
            return
        target = client.reply_target(msg)
        if not target:
            return

        if len(words) > 1:
            module = self.module_set.get(words[1])
            if module is None:
                client.write("NOTICE %s :No such module: %s", target, words[1])
                return
            modules = [module]
        else:
            modules = list(self.module_set.modules)

        logger.log_event("help", "reply", level=logging.DEBUG, user=client.nick, target=target)
        for module in modules:
            client.write("NOTICE %s :%s: %s", target, module.name(), module.help())


def init(module_set: ModuleSet) -> None:
    module_set.register(HelpModule(module_set))
