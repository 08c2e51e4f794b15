"""Configuration loading utilities."""

from __future__ import annotations

import json
import os

from pydantic import ValidationError

from ..errors import ConfigError
from ..logs.logger import logger
from .model import BotConfig


class ConfigLoader:
    """Loads a :class:`BotConfig` from a JSON document."""

    def load(self, config_file: str | os.PathLike[str]) -> BotConfig:
        """Load and validate the configuration file.

        A missing file yields the default configuration.

        Raises:
            ConfigError: If the file cannot be read, is not JSON, or fails validation.
        """
        path = os.fspath(config_file)
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.log_event("app", "config_missing", config_file=path)
            return BotConfig()
        except ValueError as e:
            raise ConfigError(f"{path} is not valid UTF-8 JSON: {e}", data={"path": path}) from e
        except OSError as e:
            raise ConfigError(f"cannot read {path}: {e}", data={"path": path}) from e

        config = self.from_dict(raw, source=path)
        logger.log_event("app", "config_loaded", config_file=path)
        return config

    @staticmethod
    def from_dict(raw: object, source: str = "<dict>") -> BotConfig:
        if not isinstance(raw, dict):
            raise ConfigError(
                f"{source}: top-level value must be an object", data={"path": source}
            )
        try:
            return BotConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"{source}: {e}", data={"path": source}) from e


def load_config(config_file: str | os.PathLike[str]) -> BotConfig:
    return ConfigLoader().load(config_file)
