"""Ordered module registry driving configuration and load."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from ..errors import DuplicateModuleError, ModuleLoadError
from ..logs.logger import logger
from .base import Module

if TYPE_CHECKING:  # pragma: no cover
    from ..irc.dispatcher import IRCDispatcher


class ModuleSet:
    """Registered modules plus the raw per-module configuration.

    Used once at startup: modules are registered, then :meth:`load_all`
    configures and loads each in registration order. After that the set is
    only reachable through the hooks its modules installed.
    """

    def __init__(
        self, client: IRCDispatcher, raw_config: Mapping[str, Any] | None = None
    ):
        self.client = client
        self.raw_config: Mapping[str, Any] = raw_config or {}
        self._modules: list[Module] = []
        self._loaded = False

    @property
    def modules(self) -> tuple[Module, ...]:
        return tuple(self._modules)

    def get(self, name: str) -> Module | None:
        for module in self._modules:
            if module.name() == name:
                return module
        return None

    def register(self, module: Module) -> None:
        name = module.name()
        if self.get(name) is not None:
            logger.log_event("module", "duplicate", level=logging.ERROR, module=name)
            raise DuplicateModuleError(
                f"module '{name}' is already registered", data={"module": name}
            )
        self._modules.append(module)
        logger.log_event("module", "registered", level=logging.DEBUG, module=name)

    def load_all(self) -> None:
        """Configure and load every module in registration order.

        Stops at the first failure. Modules loaded before it keep their hooks.

        Raises:
            ModuleLoadError: a module's configuration or load routine failed.
        """
        if self._loaded:
            logger.log_event("module", "already_loaded", level=logging.WARNING)
            return
        self._loaded = True
        for module in self._modules:
            name = module.name()
            try:
                module.defaults()
                if name in self.raw_config:
                    logger.log_event(
                        "module", "overlay", level=logging.DEBUG, module=name
                    )
                    module.overlay(self.raw_config[name])
                module.load(self.client)
            except Exception as e:  # noqa: BLE001
                logger.log_event(
                    "module", "load_failed", level=logging.ERROR, module=name, error=str(e)
                )
                raise ModuleLoadError(name, str(e)) from e
            logger.log_event("module", "loaded", module=name)


ModuleInit = Callable[[ModuleSet], None]
