"""Module contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from ..errors import ConfigError

if TYPE_CHECKING:  # pragma: no cover
    from ..irc.dispatcher import IRCDispatcher


class ModuleConfig(BaseModel):
    """Configuration for modules that take no options."""


class Module(ABC):
    """A pluggable unit that registers hooks and carries its own configuration.

    Subclasses set ``config_model`` to a pydantic model whose field defaults
    are the module defaults. The module set calls :meth:`defaults`, then
    :meth:`overlay` with the module's configuration fragment (if any), then
    :meth:`load`.
    """

    config_model: type[BaseModel] = ModuleConfig

    def __init__(self) -> None:
        self.config: Any = self.config_model()

    @abstractmethod
    def name(self) -> str:
        """Identity name; also the key of the module's configuration fragment."""

    @abstractmethod
    def help(self) -> str:
        """One-line human readable description."""

    def defaults(self) -> None:
        self.config = self.config_model()

    def overlay(self, fragment: object) -> None:
        """Merge ``fragment`` over the current configuration.

        Keys present in ``fragment`` replace the current values; absent keys
        keep them.

        Raises:
            ConfigError: ``fragment`` is not a mapping or a value fails validation.
        """
        if not isinstance(fragment, Mapping):
            raise ConfigError(
                f"configuration for module '{self.name()}' must be an object",
                data={"module": self.name()},
            )
        merged = {**self.config.model_dump(), **fragment}
        try:
            self.config = self.config_model.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(
                f"invalid configuration for module '{self.name()}': {e}",
                data={"module": self.name()},
            ) from e

    @abstractmethod
    def load(self, client: IRCDispatcher) -> None:
        """Register hooks on ``client``; raise to abort startup."""
